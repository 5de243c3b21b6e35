"""Infrastructure errors – faults raised at the invocation boundary."""

from __future__ import annotations

from typing import Any

from jsondb_client.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not a client-side rule violation."""

    default_code = "infrastructure_error"


class InvocationError(InfrastructureError):
    """The backend reported a fault, or the transport failed, for a command."""

    default_code = "invocation_error"

    def __init__(
        self,
        command: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Command '{command}' failed", **kwargs)
        self.command = command
        self.status_code = status_code


class InvocationTimeoutError(InvocationError):
    """A command did not answer before the transport deadline."""

    default_code = "invocation_timeout"


class MalformedResponseError(InfrastructureError):
    """The backend answered with a shape the client cannot interpret."""

    default_code = "malformed_response"

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.command = command
        self.payload_type = payload_type


__all__ = [
    "InfrastructureError",
    "InvocationError",
    "InvocationTimeoutError",
    "MalformedResponseError",
]
