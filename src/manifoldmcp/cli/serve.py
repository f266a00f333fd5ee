"""Serve command: run the MCP server on stdio."""

import asyncio

import structlog
import typer

from manifoldmcp.server.stdio import run_stdio

log = structlog.get_logger(__name__)

app = typer.Typer(help="Run the MCP server on stdin/stdout")


@app.callback(invoke_without_command=True)
def serve(ctx: typer.Context) -> None:
    """Serve until the client closes the transport."""
    if ctx.invoked_subcommand is not None:
        return
    settings = ctx.obj["settings"]
    if not settings.api_key:
        log.warning("api_key_missing", env=settings.api_key_env, note="write tools will fail")
    try:
        asyncio.run(run_stdio(settings))
    except KeyboardInterrupt:
        pass
    except Exception:
        log.exception("server_failed")
        raise typer.Exit(1)
