"""
CLI commands for inspecting generators and cloning their templates.

Thin wrappers over ``kssgen.core.services.generators``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


def _resolve_generator_spec(ctx: click.Context, spec: str | None) -> str:
    """Use the explicit spec, else the one from the config file (or default)."""
    if spec:
        return spec
    from kssgen.core.config.loader import load_config

    return load_config(ctx.obj.get("config_path")).generator


@click.group()
def generator() -> None:
    """Generators — validate generators and clone templates."""


@generator.command("check")
@click.option("--generator", "-g", "generator_spec", default=None, help="Generator import path (module:attribute).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, generator_spec: str | None, as_json: bool) -> None:
    """Load a generator and verify it implements the generator API."""
    from kssgen.core.config.loader import ConfigError
    from kssgen.core.errors import GeneratorError
    from kssgen.core.services.generators import StyleguideGenerator, load_generator

    try:
        spec = _resolve_generator_spec(ctx, generator_spec)
        gen = load_generator(spec)
        StyleguideGenerator.check_generator(gen)
    except (ConfigError, GeneratorError) as e:
        if as_json:
            click.echo(json.dumps({"ok": False, "error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    info = {
        "ok": True,
        "generator": spec,
        "class": type(gen).__name__,
        "api": StyleguideGenerator.API,
        "instance_api": gen.instance_api,
        "compatible": gen.is_compatible(),
        "options": {name: opt.model_dump() for name, opt in gen.options.items()},
    }

    if as_json:
        click.echo(json.dumps(info, indent=2, default=str))
        return

    click.secho(f"✅ {info['class']} implements generator API {info['instance_api']}", fg="green", bold=True)
    if not info["compatible"]:
        click.secho(f"   ⚠️  Running API is {info['api']}", fg="yellow")
    if gen.options:
        click.secho(f"   Options ({len(gen.options)}):", fg="white", bold=True)
        for name, opt in gen.options.items():
            default = f" (default: {opt.default})" if opt.default is not None else ""
            click.echo(f"     • {name} [{opt.type}]{default}  {opt.describe}")


@generator.command("clone")
@click.argument("template", type=click.Path())
@click.argument("destination", type=click.Path())
@click.option("--generator", "-g", "generator_spec", default=None, help="Generator import path (module:attribute).")
@click.pass_context
def clone(ctx: click.Context, template: str, destination: str, generator_spec: str | None) -> None:
    """Copy a generator template to DESTINATION for customisation."""
    from kssgen.core.config.loader import ConfigError
    from kssgen.core.errors import GeneratorError
    from kssgen.core.services.generators import StyleguideGenerator, load_generator

    try:
        gen = load_generator(_resolve_generator_spec(ctx, generator_spec))
        StyleguideGenerator.check_generator(gen)
        gen.clone(template, destination)
    except (ConfigError, GeneratorError) as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    click.secho(f"✅ Template cloned to {Path(destination).resolve()}", fg="green", bold=True)
    click.echo("   Edit the copy, then point 'template' in kss-config.yml at it.")
