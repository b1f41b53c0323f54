"""Duration literals in the ``1h30m`` / ``250ms`` / ``1.5s`` form.

A literal is an optional sign followed by one or more decimal numbers,
each with an optional fraction and a mandatory unit suffix. The bare
literal ``0`` is also accepted. Values resolve to microsecond precision.
"""

from __future__ import annotations

from datetime import timedelta

_NANOS_PER_UNIT: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_DIGITS = frozenset("0123456789")
_NUMERIC = _DIGITS | {"."}

# Largest magnitude representable, in nanoseconds.
_MAX_NANOS = 2**63 - 1


class DurationError(ValueError):
    """Raised when a duration literal cannot be parsed."""


def parse_duration(text: str) -> timedelta:
    """Parse a duration literal such as ``"1h"`` or ``"2m30.5s"``.

    Raises:
        DurationError: If *text* is not a well-formed literal. The message
            quotes the original input.
    """
    quoted = f'"{text}"'
    s = text
    negative = False
    if s and s[0] in "+-":
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise DurationError(f"invalid duration {quoted}")

    total_ns = 0
    while s:
        i = 0
        while i < len(s) and s[i] in _DIGITS:
            i += 1
        whole_digits = s[:i]
        s = s[i:]

        frac_digits = ""
        if s.startswith("."):
            s = s[1:]
            i = 0
            while i < len(s) and s[i] in _DIGITS:
                i += 1
            frac_digits = s[:i]
            s = s[i:]

        if not whole_digits and not frac_digits:
            raise DurationError(f"invalid duration {quoted}")

        i = 0
        while i < len(s) and s[i] not in _NUMERIC:
            i += 1
        unit = s[:i]
        s = s[i:]
        if not unit:
            raise DurationError(f"missing unit in duration {quoted}")
        scale = _NANOS_PER_UNIT.get(unit)
        if scale is None:
            raise DurationError(f'unknown unit "{unit}" in duration {quoted}')

        total_ns += int(whole_digits or "0") * scale
        if frac_digits:
            total_ns += int(frac_digits) * scale // 10 ** len(frac_digits)

    if total_ns > _MAX_NANOS:
        raise DurationError(f"invalid duration {quoted}")
    micros = total_ns // 1_000
    return timedelta(microseconds=-micros if negative else micros)


def _with_fraction(whole: int, remainder: int, width: int) -> str:
    if not remainder:
        return str(whole)
    return f"{whole}.{remainder:0{width}d}".rstrip("0")


def format_duration(value: timedelta) -> str:
    """Render *value* in the literal form accepted by :func:`parse_duration`.

    >>> format_duration(timedelta(hours=1))
    '1h0m0s'
    >>> format_duration(timedelta(milliseconds=1500))
    '1.5s'
    """
    micros = value // timedelta(microseconds=1)
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_with_fraction(micros // 1_000, micros % 1_000, 3)}ms"

    total_seconds, sub_second = divmod(micros, 1_000_000)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    secs = _with_fraction(seconds, sub_second, 6)
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"
