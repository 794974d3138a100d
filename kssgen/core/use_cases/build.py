"""
Build use case — drive one generator through a full style guide run.

    check_generator → clone (optional) → init → parse → generate

The host side of the generator contract: it owns the run config, wires
``generate()`` in as the parse callback, and records the outcome.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence

from kssgen.core.errors import GeneratorError
from kssgen.core.models.config import StyleguideConfig
from kssgen.core.models.option import OptionSpec
from kssgen.core.services.generators.base import GeneratorState, StyleguideGenerator

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Result of one generation run."""

    ok: bool = False
    generator: str = ""
    destination: str = ""
    state: str = GeneratorState.CONSTRUCTED.value
    duration_ms: int = 0
    cloned_template: str = ""
    error: str = ""

    def to_dict(self) -> dict:
        result: dict = {
            "ok": self.ok,
            "generator": self.generator,
            "destination": self.destination,
            "state": self.state,
            "duration_ms": self.duration_ms,
        }
        if self.cloned_template:
            result["cloned_template"] = self.cloned_template
        if self.error:
            result["error"] = self.error
        return result


def parse_generator_options(
    declared: Mapping[str, OptionSpec],
    pairs: Sequence[str],
) -> dict[str, Any]:
    """Turn ``key=value`` strings into typed values per the generator's declarations.

    Aliases resolve to the declared name. Only options given in ``pairs``
    are returned; defaults are applied later, by ``build_styleguide()``,
    so that values from the config file are not replaced.

    Raises:
        ValueError: Malformed pair, unknown option, or bad value.
    """
    by_name: dict[str, str] = {}
    for name, spec in declared.items():
        by_name[name] = name
        for alias in spec.alias:
            by_name[alias] = name

    values: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        if key not in by_name:
            known = ", ".join(sorted(declared)) or "none"
            raise ValueError(f"Unknown generator option '{key}' (declared: {known})")

        name = by_name[key]
        spec = declared[name]
        value = spec.coerce(raw)
        if spec.accumulates:
            values.setdefault(name, []).append(value)
        else:
            values[name] = value

    return values


def build_styleguide(
    generator: Any,
    config: StyleguideConfig | Mapping[str, Any],
    init_template: Path | str | None = None,
    generator_options: Mapping[str, Any] | None = None,
) -> BuildResult:
    """Run ``generator`` over the configured sources.

    Args:
        generator: A loaded generator (validated here, not trusted).
        config: Run configuration; models are dumped to a plain mapping.
        init_template: If given, clone this template into the
            destination before generating. Otherwise the config's
            ``template`` is cloned when the destination does not exist yet.
        generator_options: Values that override the run config. Declared
            option defaults then fill the keys still unset.

    Returns:
        BuildResult. Generator and traversal errors are recorded on it,
        never raised.
    """
    if isinstance(config, StyleguideConfig):
        run_config: dict[str, Any] = config.model_dump()
    else:
        run_config = dict(config)
    run_config.update(generator_options or {})
    declared = getattr(generator, "options", None)
    for name, spec in (declared.items() if isinstance(declared, Mapping) else ()):
        if isinstance(spec, OptionSpec) and spec.default is not None:
            run_config.setdefault(name, spec.default)

    if init_template is None and run_config.get("template"):
        if not Path(run_config.get("destination") or "styleguide").exists():
            init_template = run_config["template"]

    result = BuildResult(
        generator=type(generator).__name__,
        destination=str(run_config.get("destination", "")),
    )
    start = time.monotonic()

    try:
        StyleguideGenerator.check_generator(generator)

        if init_template is not None:
            generator.clone(init_template, run_config["destination"])
            result.cloned_template = str(init_template)

        generator.init(run_config)
        future = generator.parse(generator.generate)
        if future is not None:
            future.result()
        generator.state = GeneratorState.GENERATED
        result.ok = True
    except GeneratorError as e:
        result.error = str(e)
        logger.error("Style guide build failed: %s", e)
    except Exception as e:
        result.error = f"Unexpected error: {e}"
        logger.exception("Style guide build failed")
    finally:
        result.duration_ms = int((time.monotonic() - start) * 1000)
        state = getattr(generator, "state", None)
        if isinstance(state, GeneratorState):
            if not result.ok and state is not GeneratorState.CONSTRUCTED:
                state = GeneratorState.FAILED
                generator.state = state
            result.state = state.value

    if result.ok:
        logger.info("Style guide generated in %s (%d ms)", result.destination, result.duration_ms)
    return result
