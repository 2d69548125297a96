"""Converters from the string form of parameters to Python values.

Each function raises ``ValueError`` when the input is not a valid
representation of the requested type or does not fit its range.
"""

from __future__ import annotations

import datetime as _dt
import ipaddress
import math
import re
import struct
import uuid
from decimal import Decimal
from typing import Callable, Iterable, TypeVar
from urllib.parse import SplitResult, urlsplit

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")
_DEC_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOATS = {
    "inf": math.inf,
    "+inf": math.inf,
    "-inf": -math.inf,
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
    "nan": math.nan,
}
_TIME_RE = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})")
_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_DATE_TIME_RE = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?(Z|[+-][0-9]{2}:[0-9]{2})"
)
_DURATION_PART_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?(ns|us|\u00b5s|\u03bcs|ms|s|m|h)")
_DURATION_UNITS = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,
    "\u03bcs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}
_INT64_MAX = (1 << 63) - 1
_EPOCH = _dt.datetime(1970, 1, 1, tzinfo=_dt.timezone.utc)


def _parse_int(s: str, bits: int) -> int:
    if not _INT_RE.fullmatch(s):
        raise ValueError(f"invalid syntax: {s!r}")
    value = int(s)
    if not -(1 << (bits - 1)) <= value < (1 << (bits - 1)):
        raise ValueError(f"value out of range for int{bits}: {s!r}")
    return value


def _parse_uint(s: str, bits: int) -> int:
    if not _UINT_RE.fullmatch(s):
        raise ValueError(f"invalid syntax: {s!r}")
    value = int(s)
    if value >= (1 << bits):
        raise ValueError(f"value out of range for uint{bits}: {s!r}")
    return value


def _parse_float(s: str) -> float:
    special = _SPECIAL_FLOATS.get(s.lower())
    if special is not None:
        return special
    if _DEC_FLOAT_RE.fullmatch(s):
        value = float(s)
    elif _HEX_FLOAT_RE.fullmatch(s):
        try:
            value = float.fromhex(s)
        except OverflowError as exc:
            raise ValueError(f"value out of range: {s!r}") from exc
    else:
        raise ValueError(f"invalid syntax: {s!r}")
    if math.isinf(value):
        raise ValueError(f"value out of range: {s!r}")
    return value


def to_int(s: str) -> int:
    return _parse_int(s, 64)


def to_int8(s: str) -> int:
    return _parse_int(s, 8)


def to_int16(s: str) -> int:
    return _parse_int(s, 16)


def to_int32(s: str) -> int:
    return _parse_int(s, 32)


def to_int64(s: str) -> int:
    return _parse_int(s, 64)


def to_uint(s: str) -> int:
    return _parse_uint(s, 64)


def to_uint8(s: str) -> int:
    return _parse_uint(s, 8)


def to_uint16(s: str) -> int:
    return _parse_uint(s, 16)


def to_uint32(s: str) -> int:
    return _parse_uint(s, 32)


def to_uint64(s: str) -> int:
    return _parse_uint(s, 64)


def to_float32(s: str) -> float:
    value = _parse_float(s)
    if math.isinf(value) or math.isnan(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as exc:
        raise ValueError(f"value out of range for float32: {s!r}") from exc


def to_float64(s: str) -> float:
    return _parse_float(s)


def to_string(s: str) -> str:
    """Return the value as a plain ``str``; any string is accepted."""
    if not isinstance(s, str):
        raise ValueError(f"not a string: {s!r}")
    return str(s)


def to_bytes(s: str) -> bytes:
    return s.encode("utf-8")


def to_time(s: str) -> _dt.time:
    """Parse a ``HH:MM:SS`` time of day."""
    m = _TIME_RE.fullmatch(s)
    if not m:
        raise ValueError(f"cannot parse {s!r} as time")
    h, mi, sec = (int(x) for x in m.groups())
    return _dt.time(h, mi, sec)


def to_date(s: str) -> _dt.date:
    """Parse a ``YYYY-MM-DD`` date."""
    m = _DATE_RE.fullmatch(s)
    if not m:
        raise ValueError(f"cannot parse {s!r} as date")
    y, mo, d = (int(x) for x in m.groups())
    return _dt.date(y, mo, d)


def to_date_time(s: str) -> _dt.datetime:
    """Parse an RFC 3339 date-time into an aware datetime."""
    m = _DATE_TIME_RE.fullmatch(s)
    if not m:
        raise ValueError(f"cannot parse {s!r} as RFC 3339 date-time")
    y, mo, d, h, mi, sec = (int(x) for x in m.groups()[:6])
    frac, zone = m.group(7), m.group(8)
    micro = int((frac or "0")[:6].ljust(6, "0"))
    if zone == "Z":
        tz = _dt.timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        zh, zm = int(zone[1:3]), int(zone[4:6])
        if zh > 23 or zm > 59:
            raise ValueError(f"time zone offset out of range: {s!r}")
        tz = _dt.timezone(sign * _dt.timedelta(hours=zh, minutes=zm))
    return _dt.datetime(y, mo, d, h, mi, sec, micro, tzinfo=tz)


def _from_epoch(value: int, per_second: int) -> _dt.datetime:
    seconds, rest = divmod(value, per_second)
    micros = rest * 1_000_000 // per_second
    return _EPOCH + _dt.timedelta(seconds=seconds, microseconds=micros)


def to_unix_seconds(s: str) -> _dt.datetime:
    return _from_epoch(to_int64(s), 1)


def to_unix_nano(s: str) -> _dt.datetime:
    return _from_epoch(to_int64(s), 1_000_000_000)


def to_unix_micro(s: str) -> _dt.datetime:
    return _from_epoch(to_int64(s), 1_000_000)


def to_unix_milli(s: str) -> _dt.datetime:
    return _from_epoch(to_int64(s), 1_000)


_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def to_bool(s: str) -> bool:
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {s!r}")


def to_uuid(s: str) -> uuid.UUID:
    try:
        return uuid.UUID(s)
    except ValueError as exc:
        raise ValueError(f"invalid UUID: {s!r}") from exc


def to_mac(s: str) -> bytes:
    """Parse an IEEE 802 MAC-48, EUI-48, EUI-64 or 20-octet address."""
    if len(s) < 14:
        raise ValueError(f"invalid MAC address: {s!r}")
    hexdigits = "0123456789abcdefABCDEF"
    if s[2] in ":-":
        sep = s[2]
        if (len(s) + 1) % 3:
            raise ValueError(f"invalid MAC address: {s!r}")
        groups = s.split(sep)
        width = 2
    elif s[4] == ".":
        if (len(s) + 1) % 5:
            raise ValueError(f"invalid MAC address: {s!r}")
        groups = s.split(".")
        width = 4
    else:
        raise ValueError(f"invalid MAC address: {s!r}")
    if any(len(g) != width or any(c not in hexdigits for c in g) for g in groups):
        raise ValueError(f"invalid MAC address: {s!r}")
    addr = bytes.fromhex("".join(groups))
    if len(addr) not in (6, 8, 20):
        raise ValueError(f"invalid MAC address: {s!r}")
    return addr


def to_addr(s: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    return ipaddress.ip_address(s)


def to_url(s: str) -> SplitResult:
    return urlsplit(s)


def to_duration(s: str) -> _dt.timedelta:
    """Parse a duration such as ``1h30m`` or ``-1.5s``."""
    rest = s
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return _dt.timedelta(0)
    if not rest:
        raise ValueError(f"invalid duration: {s!r}")
    total = Decimal(0)
    pos = 0
    while pos < len(rest):
        m = _DURATION_PART_RE.match(rest, pos)
        if not m or not (m.group(1) or m.group(2)):
            raise ValueError(f"invalid duration: {s!r}")
        number = Decimal(f"{m.group(1) or '0'}.{m.group(2) or '0'}")
        total += number * _DURATION_UNITS[m.group(3)]
        pos = m.end()
    nanos = int(total)
    if nanos > _INT64_MAX + (1 if negative else 0):
        raise ValueError(f"invalid duration: {s!r}")
    if negative:
        nanos = -nanos
    return _dt.timedelta(microseconds=nanos // 1000)


to_string_int = to_int
to_string_int8 = to_int8
to_string_int16 = to_int16
to_string_int32 = to_int32
to_string_int64 = to_int64
to_string_uint = to_uint
to_string_uint8 = to_uint8
to_string_uint16 = to_uint16
to_string_uint32 = to_uint32
to_string_uint64 = to_uint64
to_string_float32 = to_float32
to_string_float64 = to_float64


def _decode_array(values: Iterable[str], decode: Callable[[str], T]) -> list[T]:
    return [decode(v) for v in values]


def to_int32_array(a: Iterable[str]) -> list[int]:
    return _decode_array(a, to_int32)


def to_int64_array(a: Iterable[str]) -> list[int]:
    return _decode_array(a, to_int64)


def to_float32_array(a: Iterable[str]) -> list[float]:
    return _decode_array(a, to_float32)


def to_float64_array(a: Iterable[str]) -> list[float]:
    return _decode_array(a, to_float64)


def to_string_array(a: Iterable[str]) -> list[str]:
    return list(a)


def to_bytes_array(a: Iterable[str]) -> list[bytes]:
    return _decode_array(a, to_bytes)


def to_time_array(a: Iterable[str]) -> list[_dt.time]:
    return _decode_array(a, to_time)


def to_bool_array(a: Iterable[str]) -> list[bool]:
    return _decode_array(a, to_bool)


def to_uuid_array(a: Iterable[str]) -> list[uuid.UUID]:
    return _decode_array(a, to_uuid)


def to_mac_array(a: Iterable[str]) -> list[bytes]:
    return _decode_array(a, to_mac)


def date_part(t: _dt.datetime) -> _dt.datetime:
    """Return ``t`` truncated to midnight, keeping its time zone."""
    return t.replace(hour=0, minute=0, second=0, microsecond=0)


def time_part(t: _dt.datetime) -> _dt.time:
    """Return the time of day of ``t`` without sub-second precision."""
    return _dt.time(t.hour, t.minute, t.second, tzinfo=t.tzinfo)


def date_time_part(t: _dt.datetime) -> _dt.datetime:
    """Return ``t`` with sub-second precision dropped."""
    return t.replace(microsecond=0)