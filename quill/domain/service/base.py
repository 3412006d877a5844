"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the rules for journals, comments and accounts. They take
    repositories through their constructor and raise DomainError subclasses
    on failure.
    """
