"""
Generator loader — import generators and traversal routines by path.

Paths use the entry-point notation ``package.module:attribute``. A bare
``package.module`` looks up the conventional attribute name instead
(``generator`` for generators, ``traverse`` for traversal routines).
"""

from __future__ import annotations

import importlib
import inspect
import logging
from typing import Any

from kssgen.core.errors import GeneratorLoadError

logger = logging.getLogger(__name__)


def import_object(spec: str, default_attr: str) -> Any:
    """Import the object named by ``spec``.

    Raises:
        GeneratorLoadError: If the module or attribute cannot be found.
    """
    spec = spec.strip()
    if not spec:
        raise GeneratorLoadError("Empty import path")

    module_name, sep, attr_path = spec.partition(":")
    if not sep:
        attr_path = default_attr

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise GeneratorLoadError(f"Cannot import module '{module_name}': {e}") from e

    obj: Any = module
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise GeneratorLoadError(
                f"Module '{module_name}' has no attribute '{attr_path}'"
            ) from e

    logger.debug("Imported %s", spec)
    return obj


def load_generator(spec: str) -> Any:
    """Load a generator from an import path.

    The attribute may be a ready-made instance or a class; classes are
    instantiated without arguments. A class whose constructor requires
    arguments raises ``GeneratorLoadError``; errors raised while the
    constructor runs propagate unchanged. The result is NOT validated
    here; hosts must call ``StyleguideGenerator.check_generator()`` on it.
    """
    obj = import_object(spec, "generator")
    if inspect.isclass(obj):
        try:
            inspect.signature(obj).bind()
        except TypeError as e:
            raise GeneratorLoadError(f"Cannot instantiate generator class '{spec}': {e}") from e
        except ValueError:
            pass  # no introspectable signature; let the call decide
        obj = obj()
    logger.info("Loaded generator %s (%s)", spec, type(obj).__name__)
    return obj


def load_traverser(spec: str) -> Any:
    """Load a traversal routine from an import path."""
    obj = import_object(spec, "traverse")
    if not callable(obj):
        raise GeneratorLoadError(f"Traversal routine '{spec}' is not callable")
    return obj
