"""Packed SQLSTATE codes as carried on host log events.

The host stores the five-character SQLSTATE in a single integer, six bits per
character, first character in the lowest bits.
"""

from __future__ import annotations

_SQLSTATE_LENGTH = 5


def _sixbit(ch: str) -> int:
    return (ord(ch) - ord("0")) & 0x3F


def _unsixbit(value: int) -> str:
    return chr((value & 0x3F) + ord("0"))


def make_sqlstate(code: str) -> int:
    """Pack a five-character SQLSTATE such as ``"22012"`` into an integer.

    Examples
    --------
    >>> unpack_sqlstate(make_sqlstate("22012"))
    '22012'
    """

    if len(code) != _SQLSTATE_LENGTH:
        raise ValueError(f"SQLSTATE must have {_SQLSTATE_LENGTH} characters: {code!r}")
    packed = 0
    for index, ch in enumerate(code.upper()):
        packed += _sixbit(ch) << (6 * index)
    return packed


def unpack_sqlstate(packed: int) -> str:
    """Return the five-character SQLSTATE encoded in ``packed``."""

    chars: list[str] = []
    for _ in range(_SQLSTATE_LENGTH):
        chars.append(_unsixbit(packed))
        packed >>= 6
    return "".join(chars)


__all__ = ["make_sqlstate", "unpack_sqlstate"]
