"""Per-call value objects: outbound request and result envelope."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from manifoldmcp.errors import ErrorKind, ToolError


class OutboundRequest(BaseModel):
    """One HTTP call against the remote API, built fresh for each tool call."""

    method: Literal["GET", "POST"] = "GET"
    path: str
    params: list[tuple[str, str]] = Field(default_factory=list)  # ordered, keys may repeat
    body: dict[str, Any] | None = None
    authenticated: bool = False
    error_from_body: bool = False  # report response text instead of reason phrase on failure


class TextBlock(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolFailure(BaseModel):
    kind: ErrorKind
    message: str


class ToolResult(BaseModel):
    """Either text content or a structured failure, never both."""

    content: list[TextBlock] = Field(default_factory=list)
    error: ToolFailure | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    @classmethod
    def success(cls, text: str) -> ToolResult:
        return cls(content=[TextBlock(text=text)])

    @classmethod
    def failure(cls, exc: ToolError) -> ToolResult:
        return cls(error=ToolFailure(kind=exc.kind, message=exc.message))
