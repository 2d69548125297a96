"""Media type parsing and selection of the most specific content types."""

from __future__ import annotations

import logging
import re
from typing import Any

_log = logging.getLogger(__name__)

_TSPECIALS = frozenset('()<>@,;:\\"/[]?=')


def _is_token_char(c: str) -> bool:
    return " " < c < "\x7f" and c not in _TSPECIALS


def _consume_token(v: str) -> tuple[str, str]:
    end = 0
    while end < len(v) and _is_token_char(v[end]):
        end += 1
    return v[:end], v[end:]


def _consume_value(v: str) -> tuple[str, str]:
    if not v:
        return "", v
    if v[0] != '"':
        return _consume_token(v)
    out: list[str] = []
    i = 1
    while i < len(v):
        c = v[i]
        if c == '"':
            return "".join(out), v[i + 1 :]
        if c == "\\" and i + 1 < len(v) and v[i + 1] in _TSPECIALS:
            out.append(v[i + 1])
            i += 2
            continue
        if c in "\r\n":
            return "", v
        out.append(c)
        i += 1
    return "", v


def _consume_param(v: str) -> tuple[str, str, str]:
    rest = v.lstrip()
    if not rest.startswith(";"):
        return "", "", v
    rest = rest[1:].lstrip()
    param, rest = _consume_token(rest)
    param = param.lower()
    if not param:
        return "", "", v
    rest = rest.lstrip()
    if not rest.startswith("="):
        return "", "", v
    rest = rest[1:].lstrip()
    value, rest2 = _consume_value(rest)
    if value == "" and rest2 == rest:
        return "", "", v
    return param, value, rest2


def _check_media_type(mediatype: str) -> None:
    kind, rest = _consume_token(mediatype)
    if not kind:
        raise ValueError("mime: no media type")
    if not rest:
        return
    if not rest.startswith("/"):
        raise ValueError("mime: expected slash after first token")
    subtype, rest = _consume_token(rest[1:])
    if not subtype:
        raise ValueError("mime: expected token after slash")
    if rest:
        raise ValueError("mime: unexpected content after media subtype")


def parse_media_type(value: str) -> tuple[str, dict[str, str]]:
    """Split a media type into its lower-cased base and its parameters.

    Raises ``ValueError`` on malformed input or duplicate parameters.
    """
    base = value.split(";", 1)[0]
    mediatype = base.strip().lower()
    _check_media_type(mediatype)
    params: dict[str, str] = {}
    v = value[len(base) :]
    while v:
        v = v.lstrip()
        if not v:
            break
        key, val, rest = _consume_param(v)
        if not key:
            if rest.strip() == ";":
                break
            raise ValueError("mime: invalid media parameter")
        if key in params:
            raise ValueError("mime: duplicate parameter name")
        params[key] = val
        v = rest
    return mediatype, params


def _translate_pattern(pattern: str) -> re.Pattern[str]:
    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "*":
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c == "\\":
            i += 1
            if i >= n:
                raise ValueError("syntax error in pattern")
            out.append(re.escape(pattern[i]))
        elif c == "[":
            i += 1
            negate = i < n and pattern[i] == "^"
            if negate:
                i += 1
            parts: list[str] = []
            first = True
            while True:
                if i >= n:
                    raise ValueError("syntax error in pattern")
                if pattern[i] == "]" and not first:
                    break
                first = False
                lo, i = _class_char(pattern, i)
                if i < n and pattern[i] == "-":
                    hi, i = _class_char(pattern, i + 1)
                    if hi < lo:
                        raise ValueError("syntax error in pattern")
                    parts.append(f"{re.escape(lo)}-{re.escape(hi)}")
                else:
                    parts.append(re.escape(lo))
            body = "".join(parts)
            out.append(f"[^/{body}]" if negate else f"[{body}]")
        else:
            out.append(re.escape(c))
        i += 1
    return re.compile("".join(out), re.DOTALL)


def _class_char(pattern: str, i: int) -> tuple[str, int]:
    if i >= len(pattern) or pattern[i] in "-]":
        raise ValueError("syntax error in pattern")
    if pattern[i] == "\\":
        i += 1
        if i >= len(pattern):
            raise ValueError("syntax error in pattern")
    return pattern[i], i + 1


def _path_match(pattern: str, name: str) -> bool:
    try:
        return _translate_pattern(pattern).fullmatch(name) is not None
    except ValueError:
        return False


def _more_specific(contents: dict[str, Any], current: str, mask: str) -> str | None:
    others = (k for k in contents if k != current)
    if all(c == "*" for c in mask):
        return next(others, None)
    return next((k for k in others if _path_match(mask, k)), None)


def filter_most_specific(contents: dict[str, Any]) -> dict[str, str]:
    """Remove media-type masks that a more specific entry already covers.

    ``contents`` is changed in place. Returns the removed masks mapped to
    the entries that replaced them. Raises ``ValueError`` if a key is not
    a valid media type.
    """
    removed: dict[str, str] = {}
    for key in list(contents):
        try:
            mask, _ = parse_media_type(key)
        except ValueError as exc:
            raise ValueError(f"parse content type {key!r}: {exc}") from exc
        replacement = _more_specific(contents, key, mask)
        if replacement is not None:
            _log.info("Filter common content type: mask=%s replacement=%s", key, replacement)
            del contents[key]
            removed[key] = replacement
    return removed