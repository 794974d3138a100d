"""
Option model — command-line option declarations made by generators.

A generator announces the extra options it understands through its
``options`` mapping. The host uses these declarations to validate and
coerce ``-O key=value`` pairs before merging them into the run config.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

OptionType = Literal["string", "boolean", "number", "array"]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class OptionSpec(BaseModel):
    """Declaration of a single generator option.

    Attributes:
        describe: Help text shown by ``kssgen generator check``.
        type:     Value type used to coerce raw strings.
        default:  Value used when the option is not given.
        multiple: Whether repeated values accumulate into a list.
        alias:    Alternative names accepted for the option.
    """

    describe: str = ""
    type: OptionType = "string"
    default: Any = None
    multiple: bool = False
    alias: list[str] = Field(default_factory=list)

    @property
    def accumulates(self) -> bool:
        return self.multiple or self.type == "array"

    def coerce(self, raw: str) -> Any:
        """Convert one raw command-line string to this option's type.

        Raises:
            ValueError: If the string cannot be read as the declared type.
        """
        if self.type == "boolean":
            lowered = raw.strip().lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            raise ValueError(f"Expected a boolean, got {raw!r}")
        if self.type == "number":
            try:
                number = float(raw)
            except ValueError as e:
                raise ValueError(f"Expected a number, got {raw!r}") from e
            return int(number) if number.is_integer() else number
        return raw
