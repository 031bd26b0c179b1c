import pytest

from advcache.locale.locales import Locale, locales_list
from advcache.locale.translators import (
    TranslatorsName,
    translators_list,
    translators_name_locale,
    try_translators_name_from_string,
)

UNLISTED = {
    TranslatorsName.TAJIK_TAJIKISTAN,
    TranslatorsName.UZBEK_LATIN,
    TranslatorsName.UZBEK_LATIN_UZBEKISTAN,
}


def test_list_starts_in_canonical_order():
    assert translators_list()[:4] == [
        TranslatorsName.CANTONESE,
        TranslatorsName.AMHARIC,
        TranslatorsName.ALBANIAN,
        TranslatorsName.ARABIC_UAE,
    ]
    assert translators_list()[-1] == TranslatorsName.TAMIL_SRI_LANKA


def test_list_has_no_duplicates_and_omits_unlisted():
    names = translators_list()
    assert len(names) == len(set(names))
    assert set(names) == set(TranslatorsName) - UNLISTED


def test_list_is_a_fresh_copy():
    names = translators_list()
    names.clear()
    assert translators_list()[0] == TranslatorsName.CANTONESE


@pytest.mark.parametrize("name", translators_list())
def test_listed_names_round_trip(name):
    assert try_translators_name_from_string(name.value) is name


@pytest.mark.parametrize("name", sorted(UNLISTED, key=lambda n: n.value))
def test_unlisted_names_are_rejected_by_try(name):
    assert try_translators_name_from_string(name.value) is None


@pytest.mark.parametrize("value", ["", "xx_XX", "en", "EN_GB"])
def test_unknown_strings_are_rejected(value):
    assert try_translators_name_from_string(value) is None
    assert translators_name_locale(value) is None


@pytest.mark.parametrize("name", list(TranslatorsName))
def test_every_name_has_a_locale(name):
    assert translators_name_locale(name) in locales_list()


@pytest.mark.parametrize(
    "value, expected",
    [
        ("aa_ER", Locale.AFAR_ERITREA),
        ("aa_ET", Locale.AMHARIC_ETHIOPIA),
        ("am_ET", Locale.KURDISH_BADINI),
        ("ne_NP", Locale.KURDISH_TURKEY),
        ("sd_IN", Locale.NEPALI_NEPAL),
        ("ku_TR", Locale.KURDISH_SORANI),
        ("zu_ZA", Locale.KURDISH_ZAZA),
        ("tj_TJ", Locale.TAJIK_TAJIKISTAN),
        ("uz_Latn", Locale.UZBEK_UZBEKISTAN),
        ("uz_Latn_UZ", Locale.UZBEK_UZBEKISTAN),
    ],
)
def test_locale_mapping_from_source(value, expected):
    assert translators_name_locale(value) is expected
    assert translators_name_locale(TranslatorsName(value)) is expected


def test_str_is_the_code():
    assert str(TranslatorsName.ENGLISH) == "en_GB"
    assert translators_name_locale(str(TranslatorsName.ENGLISH)) is Locale.ENGLISH_UNITED_KINGDOM