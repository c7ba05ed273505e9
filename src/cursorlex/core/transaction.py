"""All-or-nothing execution of primitives over a Source.

A primitive decorated with ``atomic`` starts from a fresh cursor (no
pending lookahead) and either commits what it consumed or leaves the
committed position where it was. Rollback happens here, once, so that
the primitives themselves only raise.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Concatenate

from cursorlex.diagnostics import ErrorTemplate, ParseError

from .context import with_context

if TYPE_CHECKING:
    from cursorlex.source import Source

__all__ = ["atomic", "require_fresh"]

logger = logging.getLogger(__name__)


def require_fresh(source: Source) -> None:
    """Raise if source has uncommitted lookahead.

    Pending lookahead at the start of an operation means an earlier call
    was left half-finished. This is a caller error, reported as a GENERIC
    ParseError rather than an assertion so callers can recover.

    Raises:
        ParseError: CURSOR_IN_USE
    """
    pointer_loc = source.get_pointer_loc()
    if pointer_loc != 0:
        raise ParseError(ErrorTemplate.cursor_in_use(pointer_loc))


def atomic[S: Source, **P, R](
    label: str,
) -> Callable[[Callable[Concatenate[S, P], R]], Callable[Concatenate[S, P], R]]:
    """Make a primitive fresh-state, rollback-on-failure and labelled.

    Order of effects on failure:
        1. lookahead is reset (committed position untouched)
        2. ``label`` is attached to the error
    A CURSOR_IN_USE failure does not reset: the pending lookahead belongs
    to someone else.

    Args:
        label: Context label, may use ``{arg}`` fields (see with_context)
    """

    def decorator(
        func: Callable[Concatenate[S, P], R],
    ) -> Callable[Concatenate[S, P], R]:
        @with_context(label)
        @functools.wraps(func)
        def wrapper(source: S, *args: P.args, **kwargs: P.kwargs) -> R:
            require_fresh(source)
            try:
                return func(source, *args, **kwargs)
            except ParseError:
                logger.debug(
                    "%s: rolling back %d lookahead character(s)",
                    func.__name__,
                    source.get_pointer_loc(),
                )
                source.reset_pointer_loc()
                raise

        return wrapper

    return decorator
