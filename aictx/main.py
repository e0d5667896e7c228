"""
aictx — CLI entrypoint.

Usage:
    aictx --help
    aictx init
    aictx generate [--agent cursor]
    aictx validate
    aictx list-agents
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from aictx import __version__
from aictx.agents.registry import BUILTIN_AGENTS
from aictx.core.observability.logging_config import setup_from_flags

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to ai-context.yaml (default: auto-detect).",
)

json_option = click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")


@click.group()
@click.version_option(version=__version__, prog_name="aictx")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """aictx: generate AI assistant context files from one docs directory."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug

    setup_from_flags(debug=debug, verbose=verbose, quiet=quiet)


@cli.command()
@config_option
@click.pass_context
def init(ctx: click.Context, config_path: Path | None) -> None:
    """Create a default ai-context.yaml and docs directory."""
    from aictx.core.use_cases.init import init_config

    result = init_config(config_path=config_path)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if not result.created:
        click.secho(f"ℹ️  {result.config_path} already exists", fg="yellow")
        return

    click.secho(f"✅ Created {result.config_path}", fg="green", bold=True)
    if result.docs_dir_created:
        click.echo(f"   📁 Created {result.docs_dir}")

    if not ctx.obj.get("quiet"):
        click.echo()
        click.echo("   Add Markdown files to the docs directory, then run:")
        click.secho("     aictx generate", fg="cyan")
        click.echo()


@cli.command()
@config_option
@click.option(
    "--agent",
    "-a",
    type=click.Choice(BUILTIN_AGENTS),
    default=None,
    help="Generate only this agent (skips cleanup of disabled agents).",
)
@json_option
@click.pass_context
def generate(ctx: click.Context, config_path: Path | None, agent: str | None, as_json: bool) -> None:
    """Generate context files for every enabled agent."""
    from aictx.core.use_cases.generate import run_generate

    result = run_generate(config_path=config_path, agent=agent)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    quiet = ctx.obj.get("quiet", False)

    for agent_result in result.agents:
        if not agent_result.ok:
            click.secho(f"   ❌ {agent_result.name}: {agent_result.error}", fg="red")
            continue

        mode = agent_result.mode.value if agent_result.mode else "?"
        click.secho(f"   ✅ {agent_result.name}", fg="green", nl=False)
        click.echo(f" ({mode}, {len(agent_result.files)} file(s))")
        if not quiet:
            for path in agent_result.files:
                click.echo(f"      → {path}")
            for path in agent_result.removed:
                click.secho(f"      🗑  {path}", dim=True)

    if result.cleanup and result.cleanup.removed:
        click.echo()
        click.secho("   🧹 Cleaned up disabled agents:", fg="white", bold=True)
        for name, paths in result.cleanup.removed.items():
            click.echo(f"     • {name}: {len(paths)} path(s)")
            if not quiet:
                for path in paths:
                    click.secho(f"       {path}", dim=True)

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if result.failed:
        click.echo()
        click.secho(f"❌ {len(result.failed)} agent(s) failed", fg="red", bold=True)
        sys.exit(1)

    if result.agents:
        click.echo()
        click.secho(f"✅ Generated context for {len(result.agents)} agent(s)", fg="green", bold=True)


@cli.command()
@config_option
@json_option
def validate(config_path: Path | None, as_json: bool) -> None:
    """Validate ai-context.yaml and the paths it references."""
    from aictx.core.use_cases.validate import check_config

    result = check_config(config_path=config_path)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    config = result.config
    if result.valid and config is not None:
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Config: {result.config_path}")
        click.echo(f"   Docs: {result.docs_dir} ({result.document_count} Markdown file(s))")
        click.echo(f"   Output mode: {config.output_mode.value}")
        enabled = config.enabled_agents()
        click.echo(f"   Enabled agents: {', '.join(enabled) if enabled else '(none)'}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


@cli.command("list-agents")
@json_option
def list_agents(as_json: bool) -> None:
    """List supported agents and where they write."""
    from aictx.agents.registry import default_registry

    profiles = default_registry().profiles()

    if as_json:
        click.echo(json.dumps([p.info() for p in profiles], indent=2))
        return

    click.secho(f"\n🤖 Supported agents ({len(profiles)})", fg="cyan", bold=True)
    for profile in profiles:
        modes = "/".join(m.value for m in profile.modes)
        click.echo()
        click.secho(f"   {profile.name}", fg="white", bold=True, nl=False)
        click.echo(f"  {profile.label} [{modes}]")
        for path in profile.output_paths():
            click.echo(f"     → {path}")
    click.echo()


if __name__ == "__main__":
    cli()
