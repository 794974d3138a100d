"""
JSON generator — dumps the parsed style guide to ``styleguide.json``.

The built-in generator, used when no other generator is configured.
It is also the smallest complete example of a generator: declare the
API version and options, then implement ``generate()``.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path
from typing import Any

from kssgen.core.services.generators.base import StyleguideGenerator

logger = logging.getLogger(__name__)

OUTPUT_FILE = "styleguide.json"


def to_jsonable(value: Any) -> Any:
    """Convert a style guide object into JSON-serialisable data."""
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


class JsonGenerator(StyleguideGenerator):
    """Write the style guide document as JSON."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            "3.0",
            {
                "indent": {
                    "describe": "Indentation of the JSON output",
                    "type": "number",
                    "default": 2,
                },
            },
            **kwargs,
        )
        self.output_path: Path | None = None

    def generate(self, styleguide: Any) -> None:
        config = self._config_mapping()
        destination = Path(config.get("destination") or "styleguide")
        indent = config.get("indent", self.options["indent"].default)

        destination.mkdir(parents=True, exist_ok=True)
        output = destination / OUTPUT_FILE
        output.write_text(
            json.dumps(to_jsonable(styleguide), indent=indent, default=str) + "\n",
            encoding="utf-8",
        )
        self.output_path = output
        logger.info("Wrote %s", output)
