"""Tool dispatcher - validate, translate, send, render; one request per call."""

from __future__ import annotations

from typing import Any

import structlog

from manifoldmcp.errors import InternalError, RemoteError, ToolError, UnknownOperationError
from manifoldmcp.models.envelope import ToolResult
from manifoldmcp.models.params import validate_params
from manifoldmcp.remote.client import ManifoldClient
from manifoldmcp.tools.catalog import ToolDescriptor
from manifoldmcp.tools.operations import OPERATIONS, Operation

log = structlog.get_logger(__name__)


class Dispatcher:
    """Runs tool calls against the remote API. Holds no per-call state."""

    def __init__(self, client: ManifoldClient, operations: dict[str, Operation] | None = None) -> None:
        self.client = client
        self.operations = operations if operations is not None else OPERATIONS

    def list_tools(self) -> list[ToolDescriptor]:
        return [op.descriptor for op in self.operations.values()]

    async def call(self, name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """Run one tool call. Failures come back as an error envelope, never raised."""
        try:
            text = await self._run(name, arguments)
        except RemoteError as e:
            log.warning(
                "tool_failed", tool=name, kind=e.kind.value, status=e.status_code, error=e.message
            )
            return ToolResult.failure(e)
        except ToolError as e:
            log.warning("tool_failed", tool=name, kind=e.kind.value, error=e.message)
            return ToolResult.failure(e)
        except Exception as e:
            log.exception("tool_crashed", tool=name)
            return ToolResult.failure(InternalError(f"Unexpected error: {e}"))
        log.info("tool_ok", tool=name)
        return ToolResult.success(text)

    async def _run(self, name: str, arguments: dict[str, Any] | None) -> str:
        op = self.operations.get(name)
        if op is None:
            raise UnknownOperationError(name)
        log.info("tool_call", tool=name)
        params = validate_params(op.params_model, arguments)
        request = op.translate(params)
        response = await self.client.send(request)
        return op.render(params, response)
