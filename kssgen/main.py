"""
kssgen — CLI entrypoint.

Usage:
    python -m kssgen.main --help
    python -m kssgen.main build --source css/ --destination styleguide/
    python -m kssgen.main generator check --generator my_theme:generator
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from kssgen import __version__
from kssgen.core.observability.logging_config import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="kssgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to kss-config.yml / .json (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """kssgen — build style guides from KSS-documented stylesheets."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    configure_logging(debug=debug, verbose=verbose, quiet=quiet)


@cli.command()
@click.option(
    "--source", "-s", "sources", multiple=True, type=click.Path(),
    help="Source directory to parse (repeatable).",
)
@click.option("--destination", "-d", type=click.Path(), default=None, help="Output directory.")
@click.option("--mask", "-m", default=None, help="File name mask, e.g. '*.css|*.scss'.")
@click.option("--custom", "customs", multiple=True, help="Custom KSS property name (repeatable).")
@click.option("--generator", "-g", "generator_spec", default=None, help="Generator import path (module:attribute).")
@click.option("--traverser", "traverser_spec", default=None, help="Traversal routine import path (module:function).")
@click.option("--init", "init_template", type=click.Path(), default=None, help="Clone this template into the destination first.")
@click.option(
    "--option", "-O", "option_pairs", multiple=True, metavar="KEY=VALUE",
    help="Generator-specific option (repeatable).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def build(
    ctx: click.Context,
    sources: tuple[str, ...],
    destination: str | None,
    mask: str | None,
    customs: tuple[str, ...],
    generator_spec: str | None,
    traverser_spec: str | None,
    init_template: str | None,
    option_pairs: tuple[str, ...],
    as_json: bool,
) -> None:
    """Parse sources and generate the style guide."""
    from kssgen.core.config.loader import ConfigError, load_config
    from kssgen.core.errors import GeneratorError
    from kssgen.core.services.generators.loader import load_generator
    from kssgen.core.use_cases.build import build_styleguide, parse_generator_options

    overrides = {
        "source": list(sources) or None,
        "destination": destination,
        "mask": mask,
        "custom": list(customs) or None,
        "generator": generator_spec,
        "traverser": traverser_spec,
        "verbose": True if ctx.obj.get("verbose") else None,
    }

    try:
        config = load_config(ctx.obj.get("config_path"), overrides=overrides)
        generator = load_generator(config.generator)
        options = parse_generator_options(getattr(generator, "options", {}), option_pairs)
    except (ConfigError, GeneratorError, ValueError) as e:
        if as_json:
            click.echo(json.dumps({"ok": False, "error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if not as_json and not ctx.obj.get("quiet"):
        click.echo(f"🔨 Generating style guide with {type(generator).__name__}...")

    result = build_styleguide(
        generator,
        config,
        init_template=init_template,
        generator_options=options,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif result.ok:
        click.secho("✅ Style guide generated", fg="green", bold=True)
        click.echo(f"   Output: {result.destination}")
        click.echo(f"   Duration: {result.duration_ms} ms")
    else:
        click.secho(f"❌ Build failed: {result.error}", fg="red", bold=True)

    if not result.ok:
        sys.exit(1)


@cli.command()
@click.option("--destination", "-d", type=click.Path(), default=None, help="Built style guide directory.")
@click.option("--host", default="127.0.0.1", help="Bind address.")
@click.option("--port", "-p", default=8000, type=int, help="Port number.")
@click.pass_context
def serve(ctx: click.Context, destination: str | None, host: str, port: int) -> None:
    """Preview a built style guide in the browser."""
    from kssgen.core.config.loader import ConfigError, load_config
    from kssgen.ui.web.server import create_app, run_server

    if destination is None:
        try:
            destination = load_config(ctx.obj.get("config_path")).destination
        except ConfigError as e:
            click.secho(f"❌ {e}", fg="red")
            sys.exit(1)

    site_root = Path(destination).resolve()
    if not site_root.is_dir():
        click.secho(f"❌ No built style guide at {site_root}. Run 'kssgen build' first.", fg="red")
        sys.exit(1)

    click.secho(f"🌐 Serving {site_root} at http://{host}:{port}/", fg="cyan")
    run_server(create_app(site_root), host=host, port=port, debug=ctx.obj.get("debug", False))


# ── Sub-groups ──────────────────────────────────────────────────

from kssgen.ui.cli.generator import generator

cli.add_command(generator)


if __name__ == "__main__":
    cli()
