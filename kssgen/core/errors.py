"""
Generator errors — the failure taxonomy shared by generators and hosts.

Library code raises these; only the CLI layer turns them into exit codes.
Errors surfaced by a traversal routine are not wrapped: ``parse()``
re-raises them unchanged.
"""

from __future__ import annotations

from pathlib import Path


class GeneratorError(Exception):
    """Base class for all style guide generator failures."""


# ── Contract / configuration ────────────────────────────────────────


class ConfigurationError(GeneratorError):
    """The generator is not usable as configured."""


class ContractViolationError(ConfigurationError):
    """The loaded object does not implement the generator contract."""

    def __init__(self, obj: object) -> None:
        self.obj = obj
        super().__init__(
            f"The loaded generator is not a StyleguideGenerator object: {type(obj).__name__}"
        )


class UnconfiguredVersionError(ConfigurationError):
    """The generator never declared which API version it implements."""

    def __init__(self, api: str, instance_api: str) -> None:
        self.api = api
        self.instance_api = instance_api
        super().__init__(
            f'This generator is incompatible with StyleguideGenerator API {api}: "{instance_api}"'
        )


# ── Template cloning ────────────────────────────────────────────────


class CloneError(GeneratorError):
    """Copying a template directory failed."""

    def __init__(self, message: str, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(message)


class DestinationExistsError(CloneError):
    """The clone destination is already present on disk."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Error! This folder already exists: {path}", path)


class TemplateNotFoundError(CloneError):
    """The template to clone is missing or not a directory."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Template directory not found: {path}", path)


# ── Parsing / loading ───────────────────────────────────────────────


class ParseError(GeneratorError):
    """The parse step was driven outside its single-shot contract."""


class GeneratorLoadError(GeneratorError):
    """A generator or traversal routine could not be imported."""
