"""
Style guide generator base — the contract every generator implements.

Lifecycle
─────────
A host process drives one generator through a single run:

    generator = load_generator("my_theme.generator:generator")
    StyleguideGenerator.check_generator(generator)
    generator.clone(template, destination)        # optional (--init)
    generator.init(config)
    generator.parse(generator.generate)

``parse()`` hands the traversal routine a one-shot completion callback.
On error the traversal's exception is re-raised as-is and ``generate()``
is never reached; on success the callback receives the style guide.

State per run:
    constructed → checked → configured → parsing → generated | failed
"""

from __future__ import annotations

import logging
import shutil
from abc import ABC, abstractmethod
from concurrent.futures import Future
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping

from kssgen.core.errors import (
    CloneError,
    ConfigurationError,
    ContractViolationError,
    DestinationExistsError,
    ParseError,
    TemplateNotFoundError,
    UnconfiguredVersionError,
)
from kssgen.core.models.option import OptionSpec
from kssgen.core.services.generators.loader import load_traverser
from kssgen.core.services.generators.traversal import TraverseOptions, Traverser

logger = logging.getLogger(__name__)

# Stored as ``instance_api`` when a generator does not declare a version
UNDEFINED_API = "undefined"


class GeneratorState(str, Enum):
    """Where a generator is in its run."""

    CONSTRUCTED = "constructed"
    CHECKED = "checked"
    CONFIGURED = "configured"
    PARSING = "parsing"
    GENERATED = "generated"
    FAILED = "failed"


def _major(version: str) -> str:
    return str(version).strip().split(".", 1)[0]


def _ignore_hidden(_directory: str, names: list[str]) -> set[str]:
    """``shutil.copytree`` ignore hook: skip dot-prefixed entries."""
    return {name for name in names if name.startswith(".")}


class StyleguideGenerator(ABC):
    """Abstract base for style guide generators.

    Generators must implement:
      - generate()          — render a parsed style guide

    Generators MAY override:
      - clone()             — copy a template somewhere new
      - init()              — must still store ``config``
      - parse()             — e.g. if sources were loaded another way

    Generators MUST NOT override:
      - check_generator()   — hosts rely on its checks
    """

    # Generator API revision implemented by this base class
    API = "3.0"

    def __init__(
        self,
        version: str | None = None,
        options: Mapping[str, OptionSpec | Mapping[str, Any]] | None = None,
        traverser: Traverser | None = None,
    ) -> None:
        """Create a generator.

        Args:
            version: The generator API version this generator targets.
                Required; leaving it out makes ``check_generator()`` fail.
            options: Command-line option declarations, by option name.
            traverser: Traversal routine used by the default ``parse()``.
                Falls back to the ``traverser`` key of the run config.
        """
        self.instance_api: str = UNDEFINED_API if version is None else str(version)
        self.options: dict[str, OptionSpec] = {
            name: spec if isinstance(spec, OptionSpec) else OptionSpec.model_validate(spec)
            for name, spec in (options or {}).items()
        }
        self.traverser = traverser
        self.config: Any = None
        self.state = GeneratorState.CONSTRUCTED

    # ── Validation ──────────────────────────────────────────────────

    def check_generator(self) -> None:
        """Check that this object is a generator with a declared API version.

        Hosts should call it unbound, ``StyleguideGenerator.check_generator(obj)``,
        so that objects which merely look like generators are rejected too.

        Raises:
            ContractViolationError: ``self`` is not a StyleguideGenerator.
            UnconfiguredVersionError: no API version was declared.
        """
        if not isinstance(self, StyleguideGenerator):
            raise ContractViolationError(self)
        if self.instance_api == UNDEFINED_API:
            raise UnconfiguredVersionError(StyleguideGenerator.API, self.instance_api)
        if not self.is_compatible():
            logger.warning(
                "Generator %s targets API %s; running API is %s",
                type(self).__name__,
                self.instance_api,
                StyleguideGenerator.API,
            )
        self.state = GeneratorState.CHECKED

    def is_compatible(self) -> bool:
        """True if the declared API shares the running API's major version."""
        if self.instance_api == UNDEFINED_API:
            return False
        return _major(self.instance_api) == _major(StyleguideGenerator.API)

    # ── Template cloning ────────────────────────────────────────────

    def clone(self, template_path: Path | str, destination_path: Path | str) -> None:
        """Copy a template directory to a new location, skipping hidden entries.

        Never merges into or overwrites an existing destination.

        Raises:
            DestinationExistsError: ``destination_path`` already exists.
            TemplateNotFoundError: ``template_path`` is not a directory.
            CloneError: the copy itself failed.
        """
        template = Path(template_path)
        destination = Path(destination_path)

        if destination.exists() or destination.is_symlink():
            raise DestinationExistsError(destination)
        if not template.is_dir():
            raise TemplateNotFoundError(template)

        logger.info("Cloning template %s → %s", template, destination)
        try:
            shutil.copytree(template, destination, ignore=_ignore_hidden)
        except FileExistsError as e:
            raise DestinationExistsError(destination) from e
        except OSError as e:
            raise CloneError(f"Cannot clone {template} to {destination}: {e}", destination) from e

    # ── Run ─────────────────────────────────────────────────────────

    def init(self, config: Any) -> None:
        """Store the run configuration.

        ``config`` is a mapping or a pydantic model such as
        ``StyleguideConfig``; models are read through ``model_dump()``.
        Subclasses that override this MUST still save ``config``.
        """
        self.config = config
        self.state = GeneratorState.CONFIGURED

    def parse(self, callback: Callable[[Any], Any]) -> Future:
        """Parse the configured sources and pass the style guide to ``callback``.

        Delegates to the traversal routine with multiline, markdown and
        markup support on, plus the config's ``mask`` and ``custom``.
        A traversal error is re-raised unchanged and ``callback`` is not
        called. A routine that finishes on another thread raises there.

        Returns:
            Future resolved with the style guide once ``callback`` returns,
            or failed with the traversal (or callback) error.

        Raises:
            ConfigurationError: ``init()`` was not called or no traversal
                routine is configured.
            ParseError: the traversal routine completed more than once.
        """
        if self.config is None:
            raise ConfigurationError("init() must be called before parse()")

        config = self._config_mapping()
        if config.get("verbose"):
            logger.info("...Parsing your style guide:")

        traverser = self._resolve_traverser(config)
        sources = config.get("source") or []
        if isinstance(sources, (str, Path)):
            sources = [sources]

        options: TraverseOptions = {
            "multiline": True,
            "markdown": True,
            "markup": True,
            "mask": config.get("mask"),
            "custom": config.get("custom"),
        }

        future: Future = Future()
        completed = False

        def done(error: Any, styleguide: Any) -> None:
            nonlocal completed
            if completed:
                raise ParseError("Traversal routine completed more than once")
            completed = True
            if error is not None:
                if not isinstance(error, BaseException):
                    error = ParseError(str(error))
                self.state = GeneratorState.FAILED
                future.set_exception(error)
                logger.error("Parsing the style guide failed: %s", error)
                raise error
            try:
                callback(styleguide)
            except BaseException as e:
                self.state = GeneratorState.FAILED
                future.set_exception(e)
                raise
            future.set_result(styleguide)

        self.state = GeneratorState.PARSING
        logger.debug("Traversing %d source path(s)", len(sources))
        try:
            traverser([str(s) for s in sources], options, done)
        except Exception:
            self.state = GeneratorState.FAILED
            raise
        return future

    @abstractmethod
    def generate(self, styleguide: Any) -> None:
        """Render the style guide into the generator's output.

        This is the callback given to ``parse()``. The base version does
        nothing.
        """

    # ── Helpers ─────────────────────────────────────────────────────

    def _config_mapping(self) -> Mapping[str, Any]:
        """The stored config as a mapping, dumping pydantic models."""
        if hasattr(self.config, "model_dump"):
            return self.config.model_dump()
        return self.config

    def _resolve_traverser(self, config: Mapping[str, Any]) -> Traverser:
        if self.traverser is not None:
            return self.traverser

        configured = config.get("traverser")
        if callable(configured):
            return configured
        if isinstance(configured, str) and configured:
            return load_traverser(configured)

        raise ConfigurationError(
            "No traversal routine configured: pass traverser= or set 'traverser' in the config"
        )
