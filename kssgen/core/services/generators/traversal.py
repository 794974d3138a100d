"""
Traversal collaborator — the routine that turns source files into a style guide.

The generator contract only consumes this interface; walking source
trees, extracting KSS comments and building the document model are the
collaborator's job. A traversal routine reports completion through a
callback taking ``(error, styleguide)``: exactly one of the two is set.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Protocol, Sequence, TypedDict

TraverseCallback = Callable[[Any, Any], None]
"""Completion callback: ``callback(error, styleguide)``."""


class TraverseOptions(TypedDict):
    """Options the default ``parse()`` passes to the traversal routine."""

    multiline: bool
    markdown: bool
    markup: bool
    mask: Any
    custom: list[str] | None


class Traverser(Protocol):
    """Callable that walks ``sources`` and reports a style guide via ``callback``."""

    def __call__(
        self,
        sources: Sequence[str],
        options: TraverseOptions,
        callback: TraverseCallback,
    ) -> None: ...


def sync_traverser(
    func: Callable[[Sequence[str], TraverseOptions], Any],
) -> Traverser:
    """Adapt a plain ``func(sources, options) -> styleguide`` to the callback protocol.

    Exceptions raised by ``func`` are handed to the callback's error slot
    rather than propagated, so the caller sees them the same way it sees
    errors from a callback-native routine.
    """

    @functools.wraps(func)
    def traverse(
        sources: Sequence[str],
        options: TraverseOptions,
        callback: TraverseCallback,
    ) -> None:
        try:
            styleguide = func(sources, options)
        except Exception as e:
            callback(e, None)
            return
        callback(None, styleguide)

    return traverse
