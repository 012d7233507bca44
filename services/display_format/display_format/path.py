"""Property-path tokenizer and resolver for nested display data."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from .values import NodeKind, classify, is_valid

__all__ = ["PLACEHOLDER", "tokenize_path", "resolve_path", "format_value"]

PLACEHOLDER = "--"

_SEPARATORS = ".[]"
_QUOTES = "\"'"

# Token produced at a position and the index where scanning resumes.
_Match = Tuple[str, int]


def tokenize_path(path: str) -> List[str]:
    """
    Split a path such as ``a.b[0]["c.d"]`` into its property tokens.

    Positions are scanned left to right. At each position a bare segment,
    an unquoted bracket segment, a quoted bracket segment and finally an
    empty segment between two separators are tried in that order. Positions
    where nothing matches are skipped.
    """

    tokens: List[str] = []
    length = len(path)
    pos = 0
    while pos < length:
        match = (
            _match_bare(path, pos)
            or _match_unquoted(path, pos)
            or _match_quoted(path, pos)
            or _match_empty(path, pos)
        )
        if match is None:
            pos += 1
            continue
        token, end = match
        tokens.append(token)
        pos = end if end > pos else pos + 1
    return tokens


def _match_bare(path: str, pos: int) -> Optional[_Match]:
    end = pos
    while end < len(path) and path[end] not in _SEPARATORS:
        end += 1
    if end == pos:
        return None
    return path[pos:end], end


def _match_unquoted(path: str, pos: int) -> Optional[_Match]:
    start = pos + 1
    if path[pos] != "[" or start >= len(path) or path[start] in _QUOTES:
        return None
    # content may not contain "[" after its first character; it ends at the
    # last "]" before the next "[".
    stop = path.find("[", start + 1)
    if stop == -1:
        stop = len(path)
    close = path.rfind("]", start + 1, stop)
    if close == -1:
        return None
    return path[start:close].strip(), close + 1


def _match_quoted(path: str, pos: int) -> Optional[_Match]:
    start = pos + 1
    if path[pos] != "[" or start >= len(path) or path[start] not in _QUOTES:
        return None
    quote = path[start]
    length = len(path)
    index = start + 1
    while index < length:
        char = path[index]
        if char == quote:
            if index + 1 < length and path[index + 1] == "]":
                return _unescape(path[start + 1:index]), index + 2
            return None
        if char == "\\":
            if index + 1 >= length or path[index + 1] == "\n":
                return None
            index += 2
            continue
        index += 1
    return None


def _match_empty(path: str, pos: int) -> Optional[_Match]:
    after = _separator_end(path, pos)
    if after is None:
        return None
    if after == len(path) or _separator_end(path, after) is not None:
        return "", pos
    return None


def _separator_end(path: str, pos: int) -> Optional[int]:
    if path.startswith(".", pos):
        return pos + 1
    if path.startswith("[]", pos):
        return pos + 2
    return None


def _unescape(text: str) -> str:
    """Drop escaping backslashes; a doubled backslash keeps one."""
    chars: List[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char == "\\":
            if index + 1 < len(text) and text[index + 1] == "\\":
                chars.append("\\")
                index += 2
            else:
                index += 1
            continue
        chars.append(char)
        index += 1
    return "".join(chars)


def _get_member(value: Any, key: str) -> Any:
    kind = classify(value)
    if kind is NodeKind.MAPPING:
        return value.get(key)
    if kind is NodeKind.SEQUENCE:
        if not key.isdigit() or not key.isascii() or (len(key) > 1 and key[0] == "0"):
            return None
        index = int(key)
        return value[index] if index < len(value) else None
    if kind is NodeKind.OBJECT:
        if not key or key.startswith("__"):
            return None
        return getattr(value, key, None)
    return None


def resolve_path(data: Any, tokens: List[str]) -> Any:
    """Walk ``data`` along ``tokens``; None once any step is missing."""
    value = data
    for token in tokens:
        if not is_valid(value):
            return None
        value = _get_member(value, token)
    return value


def format_value(data: Any, path: str, default: Any = None) -> Any:
    """
    Return the value found at ``path`` inside ``data``.

    Missing data, a missing intermediate value or a missing final value
    gives ``default``, or ``"--"`` when no default is supplied.
    """

    fallback = default if is_valid(default) else PLACEHOLDER
    if not is_valid(data):
        return fallback
    value = resolve_path(data, tokenize_path(path))
    if is_valid(value):
        return value
    return fallback
