"""
Domain models — Pydantic types for style guide generation.

    from kssgen.core.models import OptionSpec, StyleguideConfig
"""

from kssgen.core.models.config import DEFAULT_MASK, StyleguideConfig
from kssgen.core.models.option import OptionSpec, OptionType

__all__ = [
    # config.py
    "DEFAULT_MASK",
    "StyleguideConfig",
    # option.py
    "OptionSpec",
    "OptionType",
]
