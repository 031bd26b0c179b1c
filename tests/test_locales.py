import pytest

from advcache.locale.isolang import IsoLang, iso_list
from advcache.locale.locales import (
    Locale,
    locale_iso_lang,
    locales_list,
    try_locale_from_string,
)


def test_locales_list_is_unique_and_complete():
    locales = locales_list()
    assert len(set(locales)) == len(locales)
    assert set(locales) == set(Locale)


def test_locales_list_order_follows_source():
    locales = locales_list()
    assert locales[0] is Locale.AFAR_ETHIOPIA
    assert locales[11] is Locale.AFAR_ERITREA
    assert locales[-1] is Locale.TAMIL_SRILANKA


@pytest.mark.parametrize("locale", list(Locale))
def test_round_trip_through_string(locale):
    assert try_locale_from_string(locale.value) is locale


@pytest.mark.parametrize("value", ["", "en", "en-GB", "xx_XX", "EN_gb"])
def test_unknown_locale_strings(value):
    assert try_locale_from_string(value) is None


@pytest.mark.parametrize("locale", list(Locale))
def test_every_locale_has_a_language(locale):
    assert locale_iso_lang(locale) in iso_list()


@pytest.mark.parametrize(
    "locale, expected",
    [
        (Locale.AFAR_ERITREA, IsoLang.CHINESE),
        (Locale.TAMIL_SRILANKA, IsoLang.SINHALA),
        (Locale.SERBIAN_SERBIA_LATIN, IsoLang.SERBIAN_LATIN),
        (Locale.CENTRAL_KHMER, IsoLang.CAMBODIA),
        (Locale.PERUVIAN_SPANISH, IsoLang.SPANISH),
        (Locale.KURDISH_SORANI, IsoLang.KURDISH),
    ],
)
def test_iso_lang_mapping(locale, expected):
    assert locale_iso_lang(locale) is expected


def test_iso_lang_accepts_string():
    assert locale_iso_lang("en_GB") is IsoLang.ENGLISH
    assert locale_iso_lang("pt_BR") is IsoLang.PORTUGUESE


def test_iso_lang_of_unknown_is_none():
    assert locale_iso_lang("xx_XX") is None


@pytest.mark.parametrize(
    "locale",
    [
        loc
        for loc in Locale
        if loc
        not in (Locale.AFAR_ERITREA, Locale.TAMIL_SRILANKA, Locale.SERBIAN_SERBIA_LATIN)
    ],
)
def test_language_prefix_matches_iso_code(locale):
    assert locale.value.split("_")[0] == locale_iso_lang(locale).value


def test_chinese_locales_share_language():
    chinese = {Locale.CHINESE_CHINA, Locale.CHINESE_HONG_KONG, Locale.CHINESE_TAIWAN}
    assert {locale_iso_lang(loc) for loc in chinese} == {IsoLang.CHINESE}