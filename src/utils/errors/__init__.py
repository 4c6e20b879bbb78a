"""Exceções compartilhadas do relay."""

from .exceptions import (
    AuthorizationError,
    ConfigurationError,
    CredentialError,
    ProviderError,
    RelayError,
    TransportError,
)

__all__ = [
    "AuthorizationError",
    "ConfigurationError",
    "CredentialError",
    "ProviderError",
    "RelayError",
    "TransportError",
]
