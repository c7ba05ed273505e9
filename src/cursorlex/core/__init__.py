"""Core utilities shared across the source and syntax layers.

Exports:
    attach_context: Add a breadcrumb to a ParseError
    with_context: Decorator that attaches a breadcrumb on failure
    call_with_context: One-off call with breadcrumb attachment
    atomic: Fresh-state, rollback-on-failure decorator for primitives
    require_fresh: Explicit fresh-cursor check

Python 3.13+.
"""

from .context import attach_context, call_with_context, with_context
from .transaction import atomic, require_fresh

__all__ = [
    "atomic",
    "attach_context",
    "call_with_context",
    "require_fresh",
    "with_context",
]
