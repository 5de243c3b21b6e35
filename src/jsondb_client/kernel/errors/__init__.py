"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    ├── ApplicationError         (application.py)
    │   └── ConfigError          (config.validation)
    └── InfrastructureError      (infrastructure.py)
        ├── InvocationError
        │   └── InvocationTimeoutError
        └── MalformedResponseError
"""

from jsondb_client.kernel.errors.application import ApplicationError
from jsondb_client.kernel.errors.base import BaseError
from jsondb_client.kernel.errors.domain import DomainError, ValidationError
from jsondb_client.kernel.errors.infrastructure import (
    InfrastructureError,
    InvocationError,
    InvocationTimeoutError,
    MalformedResponseError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvocationError",
    "InvocationTimeoutError",
    "MalformedResponseError",
    "ValidationError",
]
