"""Command-line entry point for the Exa tool module."""

from __future__ import annotations

import asyncio
import json
import sys

import click

from shared.config import get_settings


def run_async(coro):
    """Run an async function in a new event loop."""
    return asyncio.run(coro)


@click.group()
def cli():
    """Exa tool module: serve, list, or call tools."""
    pass


@cli.command()
@click.option("--host", default=None, help="Bind address (default: HOST setting)")
@click.option("--port", default=None, type=int, help="Bind port (default: PORT setting)")
def serve(host, port):
    """Run the HTTP service."""
    settings = get_settings()
    try:
        settings.require_api_key()
    except RuntimeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    import uvicorn

    uvicorn.run(
        "modules.exa.main:app",
        host=host or settings.host,
        port=port or settings.port,
    )


@cli.command("tools")
def list_tools_cmd():
    """Print the tool catalog as JSON."""
    from modules.exa.tools import list_tools

    catalog = [
        {
            "name": tool.name,
            "description": tool.description,
            "inputSchema": tool.input_schema(),
        }
        for tool in list_tools()
    ]
    click.echo(json.dumps(catalog, indent=2))


@cli.command()
@click.argument("tool_name")
@click.option("--args", "args_json", default="{}", help="Tool arguments as a JSON object")
def call(tool_name, args_json):
    """Invoke a single tool and print the rendered result."""
    from modules.exa.main import build_tools

    try:
        arguments = json.loads(args_json)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="--args")

    try:
        tools = build_tools()
    except RuntimeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    result = run_async(tools.invoke(tool_name, arguments))
    if result.success:
        click.echo(result.result)
    else:
        click.echo(result.error, err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
