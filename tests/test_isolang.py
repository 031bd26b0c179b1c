import pytest

from advcache.locale.isolang import IsoLang, iso_list, try_iso_lang_from_string


def test_iso_list_is_unique():
    langs = iso_list()
    assert len(set(langs)) == len(langs)


def test_iso_list_covers_every_member():
    assert set(iso_list()) == set(IsoLang)


def test_iso_list_order_starts_and_ends_as_source():
    langs = iso_list()
    assert langs[0] is IsoLang.AFAR
    assert langs[-1] is IsoLang.ZULU


def test_iso_list_returns_fresh_copy():
    first = iso_list()
    first.clear()
    assert iso_list()[0] is IsoLang.AFAR


@pytest.mark.parametrize("lang", list(IsoLang))
def test_round_trip_through_string(lang):
    assert try_iso_lang_from_string(lang.value) is lang


@pytest.mark.parametrize(
    "code, expected",
    [
        ("en", IsoLang.ENGLISH),
        ("sp", IsoLang.SERBIAN_LATIN),
        ("km", IsoLang.CAMBODIA),
        ("nb", IsoLang.NORWEGIAN_BOKMAL),
    ],
)
def test_known_codes(code, expected):
    assert try_iso_lang_from_string(code) is expected


@pytest.mark.parametrize("code", ["", "xx", "EN", "en_GB", "english"])
def test_unknown_codes_return_none(code):
    assert try_iso_lang_from_string(code) is None


def test_str_gives_code():
    lang = try_iso_lang_from_string("ru")
    assert lang is IsoLang.RUSSIAN
    assert str(lang) == "ru"