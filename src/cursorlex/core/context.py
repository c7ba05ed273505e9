"""Breadcrumb attachment for fallible operations.

Every public primitive is wrapped so that a ParseError escaping it
carries a human-readable label. Nested calls build a chain, innermost
first:

    >>> @with_context("could not parse pair")
    ... def parse_pair(source):
    ...     return parse_num(source, I32), parse_num(source, I32)
    >>> try:
    ...     parse_pair(StrSource("1 x"))
    ... except ParseError as e:
    ...     print(e.context)
    ('could not parse num', 'could not parse pair')

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable

from cursorlex.diagnostics import ParseError

__all__ = ["attach_context", "call_with_context", "with_context"]


def attach_context[E: ParseError](error: E, label: str) -> E:
    """Add an outer breadcrumb to error and return the same error.

    Kind, cause and root message are left untouched.
    """
    return error.add_context(label)


def with_context[**P, R](label: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorate a fallible operation with a context label.

    Args:
        label: Breadcrumb text. ``str.format`` fields are filled from the
            decorated function's bound arguments, e.g.
            ``"could not match char {val}"``.

    Returns:
        Decorator that re-raises ParseError with the label attached.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(func) if "{" in label else None

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return func(*args, **kwargs)
            except ParseError as e:
                text = label
                if signature is not None:
                    bound = signature.bind(*args, **kwargs)
                    bound.apply_defaults()
                    text = label.format(**bound.arguments)
                attach_context(e, text)
                raise

        return wrapper

    return decorator


def call_with_context[**P, R](
    label: str, func: Callable[P, R], *args: P.args, **kwargs: P.kwargs
) -> R:
    """Call func once, attaching label to any ParseError it raises.

    Example:
        >>> call_with_context("could not read header", parse_word, source)
    """
    try:
        return func(*args, **kwargs)
    except ParseError as e:
        attach_context(e, label)
        raise
