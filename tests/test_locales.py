import pytest

from route_content.domain.models import Locale
from route_content.i18n import (
    PHRASE_KEYS,
    SUPPORTED_LOCALES,
    is_supported,
    language_id,
    locale_from_language_id,
    month_name,
    normalize,
    phrase,
    phrases_for,
    weekday_name,
)


@pytest.mark.parametrize("tag, expected", [
    ("en", Locale.EN),
    ("es", Locale.ES),
    ("ru", Locale.RU),
    ("fr", Locale.FR),
    ("FR", Locale.FR),
    (" es ", Locale.ES),
    ("de", Locale.EN),
    ("fr-FR", Locale.EN),
    ("", Locale.EN),
    (None, Locale.EN),
])
def test_normalize_is_total(tag, expected):
    assert normalize(tag) == expected


def test_normalize_is_idempotent():
    for tag in ("en", "es", "ru", "fr", "xx", None):
        once = normalize(tag)
        assert normalize(once) is once
        assert normalize(once.value) is once


def test_language_ids_are_a_fixed_bijection():
    assert [language_id(l) for l in ("en", "es", "ru", "fr")] == [1, 2, 3, 4]
    for locale in SUPPORTED_LOCALES:
        assert locale_from_language_id(locale.language_id) is locale
    assert locale_from_language_id(99) is Locale.EN


def test_is_supported_is_exact():
    assert is_supported("ru")
    assert not is_supported("ru-RU")
    assert not is_supported(None)


@pytest.mark.parametrize("locale", list(Locale))
def test_phrase_tables_are_complete(locale):
    table = phrases_for(locale)

    assert set(table) == set(PHRASE_KEYS)
    for key in PHRASE_KEYS:
        assert isinstance(table[key], str)
        assert table[key].strip()


def test_phrase_tables_are_read_only():
    with pytest.raises(TypeError):
        phrases_for("en")["book_now"] = "x"  # type: ignore[index]


def test_phrase_lookup_and_english_fallback():
    assert phrase("es", "book_now") == "Reservar Ahora"
    assert phrase("xx", "book_now") == "Book Now"
    with pytest.raises(KeyError):
        phrase("en", "no_such_phrase")


def test_calendar_names_are_localized():
    assert weekday_name("fr", "Tuesday") == "mardi"
    assert weekday_name("ru", "mon") == "понедельник"
    assert month_name("es", "January") == "enero"
    assert month_name("en", "Feb") == "February"
    assert weekday_name("fr", "Someday") == "Someday"
