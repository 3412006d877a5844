"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidIdError(ValidationError):
    """Raised when an identifier is not well formed."""

    def __init__(self, resource: str, value: str | None):
        self.resource = resource
        self.value = value
        super().__init__(f"Invalid {resource} ID")


class UnauthenticatedError(DomainError):
    """Raised when an operation requires an authenticated principal."""

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message)


class InvalidCredentialsError(UnauthenticatedError):
    """Raised when login credentials do not match a user."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotFoundOrForbiddenError(DomainError):
    """Raised when a resource is missing or owned by someone else.

    The two cases share one error so callers cannot probe for the
    existence of other users' content.
    """

    def __init__(self, resource: str, action: str):
        self.resource = resource
        self.action = action
        super().__init__(
            f"{resource} not found or you don't have permission to {action} it"
        )


class ConflictError(DomainError):
    """Raised when a write collides with existing data (e.g. duplicate email)."""

    pass


class StoreError(DomainError):
    """Raised when the underlying persistence layer fails."""

    pass
