# aws/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from botocore.exceptions import BotoCoreError, ClientError

T = TypeVar("T")


@dataclass
class RemoteFailure:
    """Diagnostics of a failed AWS call."""
    kind: str  # "service" | "client"
    operation: str
    message: str
    status_code: Optional[int] = None
    error_code: Optional[str] = None
    error_type: Optional[str] = None
    request_id: Optional[str] = None

    @classmethod
    def from_exception(cls, operation: str, exc: Exception) -> RemoteFailure:
        """Build from a botocore ClientError (request rejected) or BotoCoreError."""
        if isinstance(exc, ClientError):
            error = exc.response.get("Error", {})
            meta = exc.response.get("ResponseMetadata", {})
            return cls(
                kind="service",
                operation=operation,
                message=error.get("Message", str(exc)),
                status_code=meta.get("HTTPStatusCode"),
                error_code=error.get("Code"),
                error_type=error.get("Type"),
                request_id=meta.get("RequestId"),
            )
        return cls(kind="client", operation=operation, message=str(exc))

    def lines(self) -> list[str]:
        if self.kind == "client":
            return [f"Error Message: {self.message}"]
        return [
            f"Error Message:    {self.message}",
            f"HTTP Status Code: {self.status_code}",
            f"AWS Error Code:   {self.error_code}",
            f"Error Type:       {self.error_type}",
            f"Request ID:       {self.request_id}",
        ]


@dataclass
class RemoteResult(Generic[T]):
    """Outcome of an AWS call: a value, or the failure that prevented it."""
    value: Optional[T] = None
    error: Optional[RemoteFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any = None) -> RemoteResult:
        return cls(value=value)

    @classmethod
    def failure(cls, error: RemoteFailure) -> RemoteResult:
        return cls(error=error)


@dataclass
class RemoteCallFailed(Exception):
    """Raised by the orchestrator when a call it depends on failed."""
    failure: RemoteFailure

    def __str__(self) -> str:
        return f"{self.failure.operation} failed: {self.failure.message}"


REMOTE_ERRORS = (ClientError, BotoCoreError)

SERVICE_HINT = (
    "Caught a ClientError, which means your request made it to AWS, "
    "but was rejected with an error response for some reason."
)
CLIENT_HINT = (
    "Caught a BotoCoreError, which means the client encountered a serious internal "
    "problem while trying to communicate with AWS, such as not being able to access "
    "the network or load the credentials."
)


def report_failure(console, failure: RemoteFailure) -> None:
    """Print the diagnostics of a failed call."""
    console.print_error(
        f"{failure.operation} failed",
        SERVICE_HINT if failure.kind == "service" else CLIENT_HINT,
        details=failure.lines(),
    )
