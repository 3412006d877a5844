"""Authentication use cases."""

from .change_password import ChangePasswordRequest, ChangePasswordUseCase
from .login import LoginRequest, LoginUseCase
from .register import AuthResponse, RegisterRequest, RegisterUseCase

__all__ = [
    "AuthResponse",
    "ChangePasswordRequest",
    "ChangePasswordUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterUseCase",
]
