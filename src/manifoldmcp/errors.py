"""Tool error taxonomy - unknown operation, invalid params, internal error."""

from __future__ import annotations

from enum import Enum

from pydantic import ValidationError


class ErrorKind(str, Enum):
    UNKNOWN_OPERATION = "unknown_operation"
    INVALID_PARAMS = "invalid_params"
    INTERNAL_ERROR = "internal_error"

    @property
    def jsonrpc_code(self) -> int:
        """JSON-RPC error code used when the error crosses the MCP transport."""
        return _JSONRPC_CODES[self]


_JSONRPC_CODES = {
    ErrorKind.UNKNOWN_OPERATION: -32601,
    ErrorKind.INVALID_PARAMS: -32602,
    ErrorKind.INTERNAL_ERROR: -32603,
}


class ToolError(Exception):
    """Base for every failure reported back to the caller of a tool."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownOperationError(ToolError):
    kind = ErrorKind.UNKNOWN_OPERATION

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidParamsError(ToolError):
    """Argument validation failure. `issues` holds (field path, reason) pairs."""

    kind = ErrorKind.INVALID_PARAMS

    def __init__(self, message: str, issues: list[tuple[str, str]] | None = None) -> None:
        super().__init__(message)
        self.issues = issues or []

    @classmethod
    def from_issues(cls, issues: list[tuple[str, str]]) -> InvalidParamsError:
        text = ", ".join(f"{path}: {reason}" for path, reason in issues)
        return cls(f"Invalid parameters: {text}", issues)

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> InvalidParamsError:
        issues = [
            (".".join(str(part) for part in err["loc"]) or "(root)", err["msg"])
            for err in exc.errors()
        ]
        return cls.from_issues(issues)

    @property
    def fields(self) -> list[str]:
        return [path for path, _ in self.issues]


class InternalError(ToolError):
    kind = ErrorKind.INTERNAL_ERROR


class MissingCredentialError(InternalError):
    def __init__(self, env_var: str) -> None:
        super().__init__(f"{env_var} environment variable is required")
        self.env_var = env_var


class RemoteError(InternalError):
    """Non-success HTTP status or network failure talking to the remote API.

    ``status_code`` is the HTTP status, or None when no response arrived.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
