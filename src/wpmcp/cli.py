"""
WPMCP CLI — server launcher and catalog inspection

Commands:
  wpmcp init         Create ~/.wpmcp/ and a commented config.env
  wpmcp server       Start the MCP server on stdio
  wpmcp mcp-config   Print the MCP client JSON config
  wpmcp tools        List registered tools
  wpmcp resources    List registered resources
  wpmcp call NAME    Invoke one tool and print its output
"""

import asyncio
import json
import shutil
import sys

import click

from wpmcp import __version__
from wpmcp.config import Config


@click.group()
@click.version_option(version=__version__, prog_name="wpmcp")
def main():
    """WordPress Gutenberg MCP server — code templates and docs for AI agents."""
    pass


@main.command()
def init():
    """Initialize WPMCP: create ~/.wpmcp/ and generate config."""
    Config.ensure_dirs()

    config_env = Config.DATA_DIR / "config.env"
    if not config_env.exists():
        config_env.write_text(
            "# WPMCP Configuration\n"
            "# Uncomment and edit as needed.\n"
            "\n"
            "# WPMCP_DATA_DIR=~/.wpmcp\n"
            "# WPMCP_LOG_LEVEL=INFO\n"
            "# WPMCP_VALIDATE_INPUT=1\n"
            "# WPMCP_RESOURCES_DIR=/path/to/markdown\n"
        )

    click.echo(f"WPMCP initialized at {Config.DATA_DIR}")
    click.echo(f"  Config: {config_env}")
    click.echo(f"  Logs:   {Config.LOG_DIR}")
    click.echo()
    click.echo("Run `wpmcp mcp-config` to get the client JSON snippet.")


@main.command()
@click.option("--validate-input/--no-validate-input", default=None,
              help="Check tool arguments against their inputSchema.")
def server(validate_input):
    """Start the MCP server (stdio mode)."""
    from wpmcp.server import build_server

    async def _run():
        srv = build_server(validate_input=validate_input)
        await srv.run()

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        pass


@main.command("mcp-config")
def mcp_config():
    """Print MCP config JSON for an MCP client."""
    config = {
        "mcpServers": {
            "wordpress-gutenberg": {
                "command": _find_executable(),
                "args": ["server"] if shutil.which("wpmcp") else ["-m", "wpmcp", "server"],
            }
        }
    }

    click.echo("Add this to your MCP client settings:\n")
    click.echo(json.dumps(config, indent=2))


@main.command()
def tools():
    """List registered tools in registration order."""
    from wpmcp.server import build_registry

    registry = build_registry()
    for tool in registry.list_tools():
        click.echo(f"{tool.name:<28} {tool.description}")
    click.echo(f"\n{registry.tool_count} tools")


@main.command()
def resources():
    """List registered knowledge-base resources."""
    from wpmcp.server import build_registry

    registry = build_registry()
    for resource in registry.list_resources():
        click.echo(f"{resource.uri}")
        click.echo(f"  {resource.name} ({resource.mime_type})")
    click.echo(f"\n{registry.resource_count} resources")


@main.command()
@click.argument("name")
@click.option("--args", "args_json", default="{}", help="Tool arguments as a JSON object.")
@click.option("--validate-input/--no-validate-input", default=None)
def call(name, args_json, validate_input):
    """Invoke tool NAME through the router and print the result."""
    from wpmcp.server import Router, build_registry

    try:
        arguments = json.loads(args_json)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc}", param_hint="--args")
    if not isinstance(arguments, dict):
        raise click.BadParameter("must be a JSON object", param_hint="--args")

    router = Router(build_registry(), validate_input=validate_input)
    envelope = asyncio.run(router.handle_call_tool(name, arguments))

    click.echo(envelope.payload, err=envelope.is_error)
    if envelope.is_error:
        sys.exit(1)


def _find_executable() -> str:
    """Find the wpmcp command path."""
    path = shutil.which("wpmcp")
    if path:
        return path
    # Fallback: use python -m wpmcp
    return sys.executable


if __name__ == "__main__":
    main()
