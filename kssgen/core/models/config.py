"""
Run configuration model — what the host hands to ``generator.init()``.

Loaded from kss-config.yml (or .json) and overlaid with CLI flags.
Generators receive the plain ``model_dump()`` mapping; unknown keys
are kept so generator-specific settings travel through untouched.

``css``, ``js`` and ``title`` are not read by kssgen itself; they are the
stylesheets, scripts and page title that HTML generators put on the
pages they render. ``template`` is the directory a build clones into a
destination that does not exist yet.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MASK = "*.css|*.less|*.sass|*.scss|*.styl|*.stylus"

DEFAULT_GENERATOR = "kssgen.core.services.generators.json_generator:JsonGenerator"


class StyleguideConfig(BaseModel):
    """Configuration for one style guide generation run."""

    model_config = ConfigDict(extra="allow")

    source: list[str] = Field(default_factory=list)
    destination: str = "styleguide"
    template: str | None = None
    mask: str = DEFAULT_MASK
    custom: list[str] = Field(default_factory=list)
    css: list[str] = Field(default_factory=list)
    js: list[str] = Field(default_factory=list)
    title: str = "KSS Style Guide"
    verbose: bool = False
    generator: str = DEFAULT_GENERATOR
    traverser: str | None = None

    @field_validator("source", "custom", "css", "js", mode="before")
    @classmethod
    def _listify(cls, value: object) -> object:
        """Accept a single string where a list is expected."""
        if isinstance(value, str):
            return [value]
        if value is None:
            return []
        return value
