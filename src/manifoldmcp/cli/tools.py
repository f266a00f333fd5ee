"""Tools subcommand: list the catalog, call a tool once."""

from __future__ import annotations

import asyncio
import json

import typer

from manifoldmcp.remote.client import ManifoldClient
from manifoldmcp.tools.dispatcher import Dispatcher
from manifoldmcp.tools.operations import OPERATIONS

app = typer.Typer(help="Inspect and invoke tools without an MCP client")


@app.command("list")
def list_tools(
    as_json: bool = typer.Option(False, "--json", help="Print full descriptors as JSON"),
) -> None:
    """List available tools."""
    if as_json:
        payload = [op.descriptor.model_dump() for op in OPERATIONS.values()]
        typer.echo(json.dumps(payload, indent=2))
        return
    for op in OPERATIONS.values():
        access = "write" if op.mutating else "read "
        typer.echo(f"  {op.name:<18} {access}  {op.descriptor.description}")
    typer.echo(f"Total: {len(OPERATIONS)} tools")


@app.command("call")
def call_tool(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Tool name (see 'tools list')"),
    args: str = typer.Option("{}", "--args", "-a", help="Tool arguments as a JSON object"),
) -> None:
    """Run one tool call against the Manifold API and print the result."""
    try:
        arguments = json.loads(args)
    except json.JSONDecodeError as e:
        typer.echo(f"--args is not valid JSON: {e}", err=True)
        raise typer.Exit(2)
    if not isinstance(arguments, dict):
        typer.echo("--args must be a JSON object", err=True)
        raise typer.Exit(2)
    settings = ctx.obj["settings"]
    dispatcher = Dispatcher(ManifoldClient.from_settings(settings))
    result = asyncio.run(dispatcher.call(name, arguments))
    if result.error is not None:
        typer.echo(f"[{result.error.kind.value}] {result.error.message}", err=True)
        raise typer.Exit(1)
    typer.echo(result.text)
