"""Return-type classification for guard dispatch.

The match is textual: the annotation text is never resolved as a type. A
generic close followed by an array or union bracket (``Observable<T>[]``)
does not count.
"""

from __future__ import annotations

import re

from guardgen.guard.models import DispatchStrategy

# JavaScript's "." excludes all four line terminators
_ANY = r"[^\n\r\u2028\u2029]"

STREAM_PATTERN = re.compile(rf"{_ANY}*Observable<{_ANY}+>[^\[|\]]*")
DEFERRED_PATTERN = re.compile(rf"{_ANY}*Promise<{_ANY}+>[^\[|\]]*")


def classify(return_type: str) -> DispatchStrategy:
    """Map a return-type text to its dispatch strategy. Stream wins ties."""
    if STREAM_PATTERN.fullmatch(return_type):
        return DispatchStrategy.STREAM
    if DEFERRED_PATTERN.fullmatch(return_type):
        return DispatchStrategy.DEFERRED
    return DispatchStrategy.DIRECT
