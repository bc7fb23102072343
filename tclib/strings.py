"""String comparison, searching and integer conversion helpers.

Comparisons tolerate ``None`` the way a missing string is treated: two
missing strings are equal, a missing string never equals a present one.
"""

from __future__ import annotations

from collections.abc import Iterable

_UINT32_MASK = 0xFFFFFFFF
_HEX_DIGITS = "0123456789abcdef"
_NEWLINE = "\n"


def _lower(ch: str) -> str:
    """Lower-case a single ASCII letter, leaving everything else alone."""
    return chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch


def _fold(s: str) -> str:
    return "".join(map(_lower, s))


def strconcat(x: str | None, y: str | None) -> str | None:
    """Join two strings, treating a missing one as absent."""
    if x is None and y is None:
        return None
    if x is None:
        return y
    if y is None:
        return x
    return x + y


def _prefix_equal(x: str | None, y: str | None, n: int, ignore_case: bool) -> bool:
    if x is y:
        return True
    if x is None or y is None:
        return False
    if len(x) < n or len(y) < n:
        return False
    a, b = x[:n], y[:n]
    if ignore_case:
        a, b = _fold(a), _fold(b)
    return a == b


def _equal(x: str | None, y: str | None, ignore_case: bool) -> bool:
    if x is y:
        return True
    if x is None or y is None:
        return False
    if len(x) != len(y):
        return False
    if ignore_case:
        return _fold(x) == _fold(y)
    return x == y


def strneql(x: str | None, y: str | None, n: int) -> bool:
    """True if the first ``n`` characters of both strings match."""
    return _prefix_equal(x, y, n, ignore_case=False)


def strncaseeql(x: str | None, y: str | None, n: int) -> bool:
    """True if the first ``n`` characters match, ignoring ASCII case."""
    return _prefix_equal(x, y, n, ignore_case=True)


def streql(x: str | None, y: str | None) -> bool:
    """True if both strings are equal."""
    return _equal(x, y, ignore_case=False)


def strcaseeql(x: str | None, y: str | None) -> bool:
    """True if both strings are equal, ignoring ASCII case."""
    return _equal(x, y, ignore_case=True)


def _compare(
    x: str | None,
    y: str | None,
    ignore_case: bool,
    greater: int,
) -> int:
    if x == y:
        return 0
    if x is None:
        return -1
    if y is None:
        return 1
    if not x:
        return -1
    if not y:
        return 1
    left, right = (_fold(x), _fold(y)) if ignore_case else (x, y)
    for a, b in zip(left, right):
        if a > b:
            return greater
        if a < b:
            return -greater
    return len(x) - len(y)


def strcmp(x: str | None, y: str | None) -> int:
    """Compare two strings: 0 if equal, 1 if ``x`` sorts after ``y``, -1 if before.

    When one string is a prefix of the other, the length difference is returned.
    """
    return _compare(x, y, ignore_case=False, greater=1)


def strcasecmp(x: str | None, y: str | None) -> int:
    """Compare two strings without regard to ASCII case.

    On the first differing character this returns -1 when ``x``'s character
    is the greater one and 1 when it is the smaller one; a shared prefix
    yields the length difference.
    """
    return _compare(x, y, ignore_case=True, greater=-1)


def itoa(n: int) -> str:
    """Decimal text of a signed integer."""
    return str(n)


def utoa(n: int) -> str:
    """Decimal text of ``n`` taken as an unsigned 32-bit integer."""
    return str(n & _UINT32_MASK)


def atoi(s: str | None) -> int:
    """Parse an optional leading ``-`` and the digits that follow it.

    Parsing stops at the first non-digit; no whitespace or ``+`` is accepted.
    """
    if not s:
        return 0
    negative = s[0] == "-"
    value = 0
    for ch in s[1:] if negative else s:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return -value if negative else value


def itox(i: int) -> str:
    """Lower-case hex digit for the low four bits of ``i``."""
    return _HEX_DIGITS[i & 0xF]


def ctoi(ch: str) -> int:
    """Value of a decimal digit character, or 0 for anything else."""
    if len(ch) == 1 and "0" <= ch <= "9":
        return ord(ch) - ord("0")
    return 0


def strchr(s: str | None, c: str) -> int:
    """Index of the first occurrence of ``c`` in ``s``, or -1."""
    if not s:
        return -1
    return s.find(c)


def strrchr(s: str | None, c: str) -> int:
    """Index of the last occurrence of ``c`` in ``s``, or -1."""
    if not s:
        return -1
    return s.rfind(c)


def chompd(s: str, delimiter: str) -> str:
    """Drop one trailing ``delimiter`` from ``s`` if present."""
    if s and s[-1] == delimiter:
        return s[:-1]
    return s


def chomp(s: str) -> str:
    """Drop one trailing newline from ``s`` if present."""
    return chompd(s, _NEWLINE)


def strlist_includes(haystack: Iterable[str | None], needle: str | None) -> bool:
    """True if any entry of ``haystack`` equals ``needle``."""
    return any(streql(item, needle) for item in haystack)


def strstr(haystack: str | None, needle: str | None) -> str | None:
    """The tail of ``haystack`` starting at the first ``needle``, or None."""
    if haystack is None or needle is None:
        return None
    index = haystack.find(needle)
    if index < 0:
        return None
    return haystack[index:]