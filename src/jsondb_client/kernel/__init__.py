"""Kernel – framework-agnostic building blocks shared by every layer."""

from jsondb_client.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InvocationError,
    InvocationTimeoutError,
    MalformedResponseError,
    ValidationError,
)
from jsondb_client.kernel.invocation import Command, Invoker
from jsondb_client.kernel.types import Document, new_document_id

__all__ = [
    "ApplicationError",
    "BaseError",
    "Command",
    "Document",
    "DomainError",
    "InfrastructureError",
    "InvocationError",
    "InvocationTimeoutError",
    "Invoker",
    "MalformedResponseError",
    "ValidationError",
    "new_document_id",
]
