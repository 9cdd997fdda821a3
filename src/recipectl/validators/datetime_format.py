"""Exact-match parsing of custom date/time patterns.

Recipes describe dates with custom patterns such as ``yyyyMMdd`` or
``dd/MM/yyyy HH:mm:ss.fff``. A pattern is compiled once into an anchored
regular expression plus a list of components; parsing succeeds only if
the whole text matches and the components form a real calendar date and
time. Month and day names use the invariant English names so results
never depend on the process locale.

Supported specifiers:

=========  ===========================================================
``y``      year: ``y``/``yy`` two-digit (pivot 2049), ``yyy+`` full year
``M``      month: ``M``, ``MM``, ``MMM`` abbreviated, ``MMMM`` full name
``d``      day: ``d``, ``dd``, ``ddd`` abbreviated, ``dddd`` full weekday
``H``      hour 0-23; ``h`` hour 1-12 (with ``t``/``tt``)
``m``      minute; ``s`` second
``f``      fraction digits (exact count); ``F`` optional fraction digits
``t``      ``A``/``P``; ``tt`` ``AM``/``PM``
``z``      UTC offset: ``z``/``zz`` hours, ``zzz`` hours and minutes
``K``      ``Z``, an ``+HH:mm`` offset, or nothing
=========  ===========================================================

Quoted text (``'...'`` or ``"..."``), backslash escapes and any other
character match literally and case-sensitively; only month, day and
AM/PM names ignore case. Digits are ASCII only. A leading ``%`` marks
a single-specifier pattern and is ignored.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

TWO_DIGIT_YEAR_MAX = 2049

# Components default to this date when the pattern omits them.
_DEFAULT_YEAR = 2000


class InvalidPatternError(ValueError):
    """A date/time pattern uses a specifier repetition that has no meaning."""


@dataclass(frozen=True)
class _Component:
    kind: str


def _names_regex(names: tuple[str, ...], *, abbreviated: bool) -> str:
    options = [n[:3] if abbreviated else n for n in names]
    return "(?i:" + "|".join(options) + ")"


def _component_regex(letter: str, count: int) -> tuple[str, str]:
    """Return ``(component kind, regex)`` for a run of *count* *letter*."""
    if letter == "y":
        if count <= 2:
            return "year2", r"\d{2}" if count == 2 else r"\d{1,2}"
        return "year", r"\d{3,4}" if count == 3 else rf"\d{{{count}}}"
    if letter == "M":
        if count == 3:
            return "month_abbr", _names_regex(MONTH_NAMES, abbreviated=True)
        if count >= 4:
            return "month_name", _names_regex(MONTH_NAMES, abbreviated=False)
        return "month", r"\d{2}" if count == 2 else r"\d{1,2}"
    if letter == "d":
        if count == 3:
            return "weekday_abbr", _names_regex(DAY_NAMES, abbreviated=True)
        if count >= 4:
            return "weekday_name", _names_regex(DAY_NAMES, abbreviated=False)
        return "day", r"\d{2}" if count == 2 else r"\d{1,2}"
    if letter in "Hhms":
        if count > 2:
            msg = f"Specifier {letter * count!r} is not valid"
            raise InvalidPatternError(msg)
        kind = {"H": "hour", "h": "hour12", "m": "minute", "s": "second"}[letter]
        return kind, r"\d{2}" if count == 2 else r"\d{1,2}"
    if letter == "f":
        if count > 7:
            raise InvalidPatternError("At most 7 'f' specifiers are allowed")
        return "fraction", rf"\d{{{count}}}"
    if letter == "F":
        if count > 7:
            raise InvalidPatternError("At most 7 'F' specifiers are allowed")
        return "fraction", rf"\d{{0,{count}}}"
    if letter == "t":
        return ("ampm1", "(?i:[AP])") if count == 1 else ("ampm", "(?i:AM|PM)")
    if letter == "z":
        if count == 1:
            return "offset_hours", r"[+-]\d{1,2}"
        if count == 2:
            return "offset_hours", r"[+-]\d{2}"
        return "offset", r"[+-]\d{2}:\d{2}"
    if letter == "K":
        return "offset_k", r"(?:Z|[+-]\d{2}:\d{2})?"
    raise InvalidPatternError(f"Unsupported specifier {letter!r}")  # pragma: no cover


_SPECIFIERS = frozenset("yMdHhmsfFtzK")


@dataclass(frozen=True)
class DateTimePattern:
    """A compiled custom date/time pattern."""

    pattern: str
    regex: re.Pattern[str]
    components: tuple[_Component, ...]

    def matches(self, text: str) -> bool:
        return self.parse(text) is not None

    def parse(self, text: str) -> datetime | None:
        """Parse *text* exactly, or return None."""
        match = self.regex.fullmatch(text)
        if match is None:
            return None
        values: dict[str, str] = {}
        for index, component in enumerate(self.components):
            raw = match.group(f"c{index}")
            previous = values.get(component.kind)
            if previous is not None and previous.casefold() != raw.casefold():
                return None
            values[component.kind] = raw
        return _build(values)


def _build(values: dict[str, str]) -> datetime | None:
    year = _DEFAULT_YEAR
    if "year" in values:
        year = int(values["year"])
    elif "year2" in values:
        short = int(values["year2"])
        century = TWO_DIGIT_YEAR_MAX // 100 * 100
        year = century + short if century + short <= TWO_DIGIT_YEAR_MAX else century - 100 + short

    month = 1
    if "month" in values:
        month = int(values["month"])
    elif "month_name" in values:
        month = _name_index(MONTH_NAMES, values["month_name"], abbreviated=False) + 1
    elif "month_abbr" in values:
        month = _name_index(MONTH_NAMES, values["month_abbr"], abbreviated=True) + 1

    day = int(values.get("day", "1"))

    hour = int(values.get("hour", "0"))
    if "hour12" in values:
        hour12 = int(values["hour12"])
        if not 1 <= hour12 <= 12:
            return None
        designator = (values.get("ampm") or values.get("ampm1") or "A").upper()
        hour = hour12 % 12 + (12 if designator.startswith("P") else 0)
    elif "ampm" in values or "ampm1" in values:
        designator = (values.get("ampm") or values.get("ampm1") or "").upper()
        if "hour" in values and hour != 0 and (hour >= 12) != designator.startswith("P"):
            return None

    minute = int(values.get("minute", "0"))
    second = int(values.get("second", "0"))
    fraction = values.get("fraction", "")
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0

    tzinfo = None
    offset = values.get("offset") or values.get("offset_k") or values.get("offset_hours")
    if offset and offset != "Z":
        sign = -1 if offset[0] == "-" else 1
        hours_part, _, minutes_part = offset[1:].partition(":")
        offset_hours = int(hours_part)
        offset_minutes = int(minutes_part or "0")
        if offset_hours > 14 or offset_minutes > 59:
            return None
        delta = timedelta(hours=offset_hours, minutes=offset_minutes)
        tzinfo = timezone(sign * delta)
    elif offset == "Z":
        tzinfo = timezone.utc

    try:
        result = datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tzinfo)
    except ValueError:
        return None

    for key, abbreviated in (("weekday_name", False), ("weekday_abbr", True)):
        if key in values:
            if _name_index(DAY_NAMES, values[key], abbreviated=abbreviated) != result.weekday():
                return None
    return result


def _name_index(names: tuple[str, ...], value: str, *, abbreviated: bool) -> int:
    folded = value.casefold()
    for index, name in enumerate(names):
        candidate = name[:3] if abbreviated else name
        if candidate.casefold() == folded:
            return index
    raise ValueError(value)  # pragma: no cover - regex only admits known names


@functools.lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> DateTimePattern:
    """Compile a custom date/time *pattern* into a :class:`DateTimePattern`.

    Raises:
        InvalidPatternError: If the pattern is empty or malformed.
    """
    if not pattern:
        raise InvalidPatternError("Date/time pattern is empty")

    parts: list[str] = []
    components: list[_Component] = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char in _SPECIFIERS:
            j = i
            while j < n and pattern[j] == char:
                j += 1
            kind, regex = _component_regex(char, j - i)
            parts.append(f"(?P<c{len(components)}>{regex})")
            components.append(_Component(kind=kind))
            i = j
        elif char in "'\"":
            end = pattern.find(char, i + 1)
            if end == -1:
                raise InvalidPatternError(f"Unterminated quote in pattern {pattern!r}")
            parts.append(re.escape(pattern[i + 1 : end]))
            i = end + 1
        elif char == "\\":
            if i + 1 >= n:
                raise InvalidPatternError(f"Dangling escape in pattern {pattern!r}")
            parts.append(re.escape(pattern[i + 1]))
            i += 2
        elif char == "%" and i == 0 and n > 1:
            i += 1
        else:
            parts.append(re.escape(char))
            i += 1

    regex = re.compile("".join(parts), re.ASCII)
    return DateTimePattern(pattern=pattern, regex=regex, components=tuple(components))


def parse_exact(text: str, pattern: str) -> datetime | None:
    """Parse *text* exactly against *pattern*; None if it does not match.

    A malformed pattern never matches.
    """
    try:
        compiled = compile_pattern(pattern)
    except InvalidPatternError:
        return None
    return compiled.parse(text)
