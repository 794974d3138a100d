"""
Generators — render parsed style guides into browsable output.

Every generator subclasses ``StyleguideGenerator`` and implements
``generate()``. Hosts import them by path with ``load_generator()``.
"""

from kssgen.core.services.generators.base import (
    UNDEFINED_API,
    GeneratorState,
    StyleguideGenerator,
)
from kssgen.core.services.generators.loader import load_generator, load_traverser
from kssgen.core.services.generators.traversal import (
    TraverseCallback,
    TraverseOptions,
    Traverser,
    sync_traverser,
)

__all__ = [
    "GeneratorState",
    "StyleguideGenerator",
    "TraverseCallback",
    "TraverseOptions",
    "Traverser",
    "UNDEFINED_API",
    "load_generator",
    "load_traverser",
    "sync_traverser",
]
