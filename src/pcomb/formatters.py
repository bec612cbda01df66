"""Ready-made formatters for the default tagged result shape.

Any callable taking one argument can be passed as a combinator's
``formatter``. The helpers here cover the common cases of discarding the
tag or flattening a subtree back into the text it matched.

Example:
    >>> from pcomb import char_class, parse, repetition
    >>> digits = repetition(char_class("0-9"), 1, matched_text)
    >>> parse(digits, "2017")
    '2017'
"""

from typing import Any

from pcomb.enums import ABSENT, MatchKind

__all__ = ["identity", "matched_text", "unwrap"]

_TAGS: frozenset[str] = frozenset(MatchKind)


def identity[T](value: T) -> T:
    """Return value unchanged (the default formatter)."""
    return value


def _tag_payload(value: Any) -> tuple[bool, Any]:
    if isinstance(value, dict) and len(value) == 1:
        ((key, payload),) = value.items()
        if key in _TAGS:
            return True, payload
    return False, value


def unwrap(value: Any) -> Any:
    """Strip one level of tagging.

    ``{"literal": "+"}`` becomes ``"+"`` and ``{"sequence": [...]}`` becomes
    the list. Values that are not a single-tag mapping pass through.
    """
    _, payload = _tag_payload(value)
    return payload


def matched_text(value: Any) -> str:
    """Flatten a result subtree into the text it matched.

    Tagged mappings are unwrapped, lists are concatenated in order and
    ABSENT contributes nothing. Values produced by custom formatters are
    rendered with ``str()``.

    Example:
        >>> matched_text({"sequence": [{"charClass": "2"}, {"literal": "+"}]})
        '2+'
    """
    if value is ABSENT:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, list | tuple):
        return "".join(matched_text(item) for item in value)
    tagged, payload = _tag_payload(value)
    if tagged:
        return matched_text(payload)
    return str(value)
