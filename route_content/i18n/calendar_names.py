"""Localized weekday and month names.

Derived metrics carry English names ("Monday", "January"); generated
copy shows them in the page language. Names that are not recognized are
returned unchanged.
"""

from __future__ import annotations

from typing import Union

from ..domain.models import Locale
from .locales import normalize

WEEKDAYS: tuple[str, ...] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MONTHS: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_WEEKDAY_NAMES: dict[Locale, tuple[str, ...]] = {
    Locale.EN: WEEKDAYS,
    Locale.ES: ("lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"),
    Locale.RU: ("понедельник", "вторник", "среда", "четверг", "пятница", "суббота", "воскресенье"),
    Locale.FR: ("lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"),
}

_MONTH_NAMES: dict[Locale, tuple[str, ...]] = {
    Locale.EN: MONTHS,
    Locale.ES: (
        "enero", "febrero", "marzo", "abril", "mayo", "junio",
        "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
    ),
    Locale.RU: (
        "январь", "февраль", "март", "апрель", "май", "июнь",
        "июль", "август", "сентябрь", "октябрь", "ноябрь", "декабрь",
    ),
    Locale.FR: (
        "janvier", "février", "mars", "avril", "mai", "juin",
        "juillet", "août", "septembre", "octobre", "novembre", "décembre",
    ),
}


def _index(name: str, names: tuple[str, ...]) -> int:
    wanted = name.strip().lower()
    for i, candidate in enumerate(names):
        if candidate.lower() == wanted or candidate[:3].lower() == wanted:
            return i
    return -1


def canonical_weekday(name: str) -> str:
    """Map "mon", "MONDAY", ... to "Monday"; unknown names pass through."""
    i = _index(name, WEEKDAYS)
    return WEEKDAYS[i] if i >= 0 else name


def canonical_month(name: str) -> str:
    """Map "jan", "JANUARY", ... to "January"; unknown names pass through."""
    i = _index(name, MONTHS)
    return MONTHS[i] if i >= 0 else name


def weekday_name(locale: Union[str, Locale, None], name: str) -> str:
    i = _index(name, WEEKDAYS)
    if i < 0:
        return name
    return _WEEKDAY_NAMES[normalize(locale)][i]


def month_name(locale: Union[str, Locale, None], name: str) -> str:
    i = _index(name, MONTHS)
    if i < 0:
        return name
    return _MONTH_NAMES[normalize(locale)][i]
