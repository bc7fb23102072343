"""A small regular-expression matcher for simple search patterns.

Supported syntax: literal characters, ``.``, ``?``, ``*``, ``+``, the
anchors ``^`` and ``$``, backslash escapes, bracketed sets with ranges
(``[a-z]``) and the POSIX class names such as ``[:digit:]`` written on
their own.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field

_NUL = 0
_CLASS_LIMIT = 255


class _Kind(enum.Enum):
    ORD = "c"
    LANCHOR = "^"
    RANCHOR = "$"
    DOT = "."
    STAR = "*"
    PLUS = "+"
    QUEST = "?"


@dataclass
class _Token:
    kind: _Kind | None = None
    chars: set[int] = field(default_factory=set)

    def accepts(self, kind: _Kind, code: int) -> bool:
        return self.kind is kind and code in self.chars


_EMPTY = _Token()


def _is_upper(k: int) -> bool:
    return 65 <= k <= 90


def _is_lower(k: int) -> bool:
    return 97 <= k <= 122


def _is_alpha(k: int) -> bool:
    return _is_upper(k) or _is_lower(k)


def _is_digit(k: int) -> bool:
    return 48 <= k <= 57


def _is_alnum(k: int) -> bool:
    return _is_alpha(k) or _is_digit(k)


def _is_graph(k: int) -> bool:
    return 33 <= k <= 126


def _is_xdigit(k: int) -> bool:
    return _is_digit(k) or 65 <= k <= 70 or 97 <= k <= 102


_CLASSES: dict[str, Callable[[int], bool]] = {
    "[:alnum:]": _is_alnum,
    "[:alpha:]": _is_alpha,
    "[:blank:]": lambda k: k in (9, 32),
    "[:cntrl:]": lambda k: k < 32 or k == 127,
    "[:digit:]": _is_digit,
    "[:graph:]": _is_graph,
    "[:lower:]": _is_lower,
    "[:print:]": lambda k: 32 <= k <= 126,
    "[:punct:]": lambda k: _is_graph(k) and not _is_alnum(k),
    "[:space:]": lambda k: 9 <= k <= 13 or k == 32,
    "[:upper:]": _is_upper,
    "[:xdigit:]": _is_xdigit,
}

_SIMPLE = {
    "?": _Kind.QUEST,
    "+": _Kind.PLUS,
    "*": _Kind.STAR,
    ".": _Kind.DOT,
    "^": _Kind.LANCHOR,
    "$": _Kind.RANCHOR,
}


def _char_at(text: str, i: int) -> str:
    return text[i] if i < len(text) else "\0"


def _code_at(text: str, i: int) -> int:
    return ord(text[i]) if i < len(text) else _NUL


def _compile(pattern: str) -> list[_Token]:
    text = pattern + "\0"
    size = len(text)
    tokens = [_Token() for _ in range(size)]
    invert = False
    i = j = 0
    while i < size:
        ch = text[i]
        token = tokens[j]
        if ch == "[":
            token.kind = _Kind.ORD
            name = next((n for n in _CLASSES if text.startswith(n, i)), None)
            if name is not None:
                test = _CLASSES[name]
                token.chars.update(k for k in range(_CLASS_LIMIT) if test(k))
                i += len(name) - 1
            else:
                i += 1
                if _char_at(text, i) == "^":
                    invert = True
                while _char_at(text, i) != "]":
                    if i >= len(pattern):
                        raise ValueError(f"unterminated character set in {pattern!r}")
                    if _char_at(text, i + 1) == "-" and _char_at(text, i + 2) != "]":
                        token.chars.update(range(ord(text[i]), _code_at(text, i + 2) + 1))
                        i += 2
                    else:
                        token.chars.add(ord(text[i]))
                        i += 1
                if invert:
                    token.chars.symmetric_difference_update(range(_CLASS_LIMIT))
        elif ch in _SIMPLE:
            token.kind = _SIMPLE[ch]
            token.chars.add(ord(ch))
        elif ch == "\\":
            token.kind = _Kind.ORD
            i += 1
            token.chars.add(_code_at(text, i))
        else:
            token.kind = _Kind.ORD
            token.chars.add(ord(ch))
        i += 1
        j += 1
    return tokens


def _token(tokens: list[_Token], t: int) -> _Token:
    return tokens[t] if t < len(tokens) else _EMPTY


def _smatch(subject: str, p: int, tokens: list[_Token], t: int) -> bool:
    return any(_amatch(subject, p, tokens, t + k) for k in range(len(subject) - p))


def _amatch(subject: str, p: int, tokens: list[_Token], t: int) -> bool:
    while True:
        node = _token(tokens, t)
        after = _token(tokens, t + 1)
        if node.accepts(_Kind.ORD, _NUL):
            return True
        if after.accepts(_Kind.QUEST, ord("?")):
            if node.accepts(_Kind.ORD, _code_at(subject, p)):
                p += 1
            t += 2
            continue
        if after.accepts(_Kind.PLUS, ord("+")):
            if not node.accepts(_Kind.ORD, _code_at(subject, p)):
                return False
            return _smatch(subject, p, tokens, t + 2)
        if after.accepts(_Kind.STAR, ord("*")):
            return _smatch(subject, p, tokens, t + 2)
        if after.accepts(_Kind.ORD, _NUL) and node.accepts(_Kind.RANCHOR, ord("$")):
            return p >= len(subject)
        if p < len(subject) and (
            node.accepts(_Kind.DOT, ord(".")) or node.accepts(_Kind.ORD, ord(subject[p]))
        ):
            p += 1
            t += 1
            continue
        return False


def match(subject: str | None, pattern: str | None) -> bool:
    """True if ``pattern`` matches somewhere in ``subject``.

    A missing subject or pattern never matches. ``ValueError`` is raised for
    a bracketed set that is never closed.
    """
    if pattern is None:
        return False
    tokens = _compile(pattern)
    if subject is None:
        return False
    first = _token(tokens, 0)
    second = _token(tokens, 1)
    if not subject and first.accepts(_Kind.ORD, _NUL):
        return True
    if second.accepts(_Kind.ORD, _NUL) and (
        first.accepts(_Kind.LANCHOR, ord("^")) or first.accepts(_Kind.RANCHOR, ord("$"))
    ):
        return True
    if first.accepts(_Kind.LANCHOR, ord("^")):
        return _amatch(subject, 0, tokens, 1)
    return any(_amatch(subject, p, tokens, 0) for p in range(len(subject)))