"""Locale names used by translators and the locales they map to."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Union

from advcache.locale.locales import Locale


class TranslatorsName(str, Enum):
    """A locale name as used by translators, such as ``en_GB``."""

    ALBANIAN = "sq_AL"
    AMHARIC = "aa_ET"
    ARABIC_UAE = "ar_AE"
    ARMENIAN = "hy_AM"
    AZERBAIJANI = "az_AZ"
    BELARUSIAN = "be_BY"
    BENGALI = "bn_BD"
    BOSNIAN = "bs_BA"
    BULGARIAN = "bg_BG"
    BURMESE = "my_MM"
    CANADIAN_ENGLISH = "en_CA"
    CANTONESE = "aa_ER"
    CANTONESE_KATON = "zh_HK"
    CHINESE = "zh_CN"
    CROATIAN = "hr_HR"
    CZECH_CZECHIA = "cs_CZ"
    DANISH = "da_DK"
    DUTCH = "nl_NL"
    ENGLISH = "en_GB"
    ESTONIAN = "et_EE"
    FINNISH = "fi_FI"
    FRENCH = "fr_FR"
    GEORGIAN_GEORGIA = "ka_GE"
    GERMAN = "de_DE"
    GREEK = "el_GR"
    HAITIAN_CREOLE = "ht_HT"
    HEBREW = "he_IL"
    HINDI = "hi_IN"
    HUNGARIAN = "hu_HU"
    ICELANDIC = "is_IS"
    INDIAN_ENGLISH = "en_IN"
    INDONESIAN = "id_ID"
    ITALIAN = "it_IT"
    JAPANESE = "ja_JP"
    KAZAKH = "kk_KZ"
    KHMER = "km_KH"
    KOREAN = "ko_KR"
    KURDISH_ZAZA = "zu_ZA"
    KURDISH_BADINI = "am_ET"
    KURMANJI_KURDISH = "ne_NP"
    KYRGYZ = "ky_KG"
    LAO = "lo_LA"
    LATVIAN = "lv_LV"
    LINGALA = "ln_CD"
    LITHUANIAN = "lt_LT"
    MACEDONIAN = "mk_MK"
    MALAY = "ms_MY"
    MEXICAN_SPANISH = "es_MX"
    MONGOLIAN = "mn_MN"
    NEPALI = "sd_IN"
    NEW_ZEALAND_ENGLISH = "en_NZ"
    NORWEGIAN = "nb_NO"
    PERSIAN_IRAN = "fa_IR"
    PERUVIAN_SPANISH = "es_PE"
    POLISH = "pl_PL"
    PORTUGUESE = "pt_PT"
    PORTUGUESE_BRAZIL = "pt_BR"
    ROMANIAN = "ro_RO"
    RUSSIAN = "ru_RU"
    SERBIAN_SERBIA = "sr_RS"
    SERBIAN_SERBIA_LATIN = "sr_SP"
    SINHALA = "si_LK"
    SLOVAK = "sk_SK"
    SLOVENIAN = "sl_SI"
    SOMALI = "so_SO"
    SORANI_KURDISH = "ku_TR"
    SPANISH = "es_ES"
    SWAHILI = "sw_KE"
    SWEDISH_SWEDEN = "sv_SE"
    TAGALOG = "tl_PH"
    TAJIK = "tg_TJ"
    TAJIK_TAJIKISTAN = "tj_TJ"
    TAMIL_SRI_LANKA = "ta_LK"
    THAI = "th_TH"
    TELUGU = "te_TE"
    TRADITIONAL_CHINESE = "zh_TW"
    TURKISH = "tr_TR"
    UKRAINIAN = "uk_UA"
    URDU = "ur_PK"
    UZBEK = "uz_UZ"
    UZBEK_LATIN = "uz_Latn"
    UZBEK_LATIN_UZBEKISTAN = "uz_Latn_UZ"
    VIETNAMESE = "vi_VN"

    def __str__(self) -> str:
        return self.value


_T = TranslatorsName

_LISTED = (
    _T.CANTONESE, _T.AMHARIC, _T.ALBANIAN, _T.ARABIC_UAE,
    _T.ARMENIAN, _T.AZERBAIJANI, _T.BELARUSIAN, _T.BENGALI,
    _T.BOSNIAN, _T.BULGARIAN, _T.BURMESE, _T.KHMER,
    _T.CHINESE, _T.CANTONESE_KATON, _T.TRADITIONAL_CHINESE,
    _T.CROATIAN, _T.CZECH_CZECHIA, _T.DANISH, _T.DUTCH,
    _T.CANADIAN_ENGLISH, _T.INDIAN_ENGLISH, _T.NEW_ZEALAND_ENGLISH,
    _T.ENGLISH, _T.ESTONIAN, _T.FINNISH, _T.FRENCH,
    _T.GEORGIAN_GEORGIA, _T.GERMAN, _T.GREEK,
    _T.HAITIAN_CREOLE, _T.HEBREW, _T.HINDI, _T.HUNGARIAN,
    _T.ICELANDIC, _T.INDONESIAN, _T.ITALIAN, _T.JAPANESE,
    _T.KAZAKH, _T.KOREAN, _T.KURMANJI_KURDISH,
    _T.KURDISH_ZAZA, _T.KURDISH_BADINI, _T.SORANI_KURDISH,
    _T.KYRGYZ, _T.LAO, _T.LATVIAN, _T.LINGALA,
    _T.LITHUANIAN, _T.MACEDONIAN, _T.MALAY, _T.MONGOLIAN,
    _T.NEPALI, _T.NORWEGIAN, _T.PERSIAN_IRAN,
    _T.PERUVIAN_SPANISH, _T.POLISH, _T.PORTUGUESE_BRAZIL,
    _T.PORTUGUESE, _T.ROMANIAN, _T.RUSSIAN,
    _T.SERBIAN_SERBIA, _T.SERBIAN_SERBIA_LATIN, _T.SINHALA,
    _T.SLOVAK, _T.SLOVENIAN, _T.SOMALI,
    _T.MEXICAN_SPANISH, _T.SPANISH, _T.SWAHILI,
    _T.SWEDISH_SWEDEN, _T.TAGALOG, _T.TAJIK, _T.THAI,
    _T.TELUGU, _T.TURKISH, _T.UKRAINIAN, _T.URDU,
    _T.UZBEK, _T.VIETNAMESE, _T.TAMIL_SRI_LANKA,
)

_LISTED_SET = frozenset(_LISTED)

_LOCALE: Dict[TranslatorsName, Locale] = {
    _T.CANTONESE: Locale.AFAR_ERITREA,
    _T.AMHARIC: Locale.AMHARIC_ETHIOPIA,
    _T.ALBANIAN: Locale.ALBANIAN_ALBANIA,
    _T.KURDISH_BADINI: Locale.KURDISH_BADINI,
    _T.ARABIC_UAE: Locale.ARABIC_UAE,
    _T.ARMENIAN: Locale.ARMENIAN_ARMENIA,
    _T.AZERBAIJANI: Locale.AZERBAIJANI_AZERBAIJAN,
    _T.BELARUSIAN: Locale.BELARUSIAN_BELARUS,
    _T.BENGALI: Locale.BENGALI_BANGLADESH,
    _T.BOSNIAN: Locale.BOSNIAN_BOSNIA,
    _T.BULGARIAN: Locale.BULGARIAN_BULGARIA,
    _T.BURMESE: Locale.BURMESE_MYANMAR,
    _T.KHMER: Locale.CENTRAL_KHMER,
    _T.CHINESE: Locale.CHINESE_CHINA,
    _T.CANTONESE_KATON: Locale.CHINESE_HONG_KONG,
    _T.TRADITIONAL_CHINESE: Locale.CHINESE_TAIWAN,
    _T.CROATIAN: Locale.CROATIAN_CROATIA,
    _T.CZECH_CZECHIA: Locale.CZECH_CZECH_REPUBLIC,
    _T.DANISH: Locale.DANISH_DENMARK,
    _T.DUTCH: Locale.DUTCH_NETHERLANDS,
    _T.CANADIAN_ENGLISH: Locale.ENGLISH_CANADA,
    _T.INDIAN_ENGLISH: Locale.ENGLISH_INDIA,
    _T.NEW_ZEALAND_ENGLISH: Locale.ENGLISH_NEW_ZEALAND,
    _T.ENGLISH: Locale.ENGLISH_UNITED_KINGDOM,
    _T.ESTONIAN: Locale.ESTONIAN_ESTONIA,
    _T.FINNISH: Locale.FINNISH_FINLAND,
    _T.FRENCH: Locale.FRENCH_FRANCE,
    _T.GEORGIAN_GEORGIA: Locale.GEORGIAN_GEORGIA,
    _T.GERMAN: Locale.GERMAN_GERMANY,
    _T.GREEK: Locale.GREEK_GREECE,
    _T.HAITIAN_CREOLE: Locale.HAITIAN_HAITI,
    _T.HEBREW: Locale.HEBREW_ISRAEL,
    _T.HINDI: Locale.HINDI_INDIA,
    _T.HUNGARIAN: Locale.HUNGARIAN_HUNGARY,
    _T.ICELANDIC: Locale.ICELANDIC_ICELAND,
    _T.INDONESIAN: Locale.INDONESIAN_INDONESIA,
    _T.ITALIAN: Locale.ITALIAN_ITALY,
    _T.JAPANESE: Locale.JAPANESE_JAPAN,
    _T.KAZAKH: Locale.KAZAKH_KAZAKHSTAN,
    _T.KOREAN: Locale.KOREAN_SOUTH_KOREA,
    _T.SORANI_KURDISH: Locale.KURDISH_SORANI,
    _T.KYRGYZ: Locale.KYRGYZ,
    _T.LAO: Locale.LAO,
    _T.LATVIAN: Locale.LATVIAN_LATVIA,
    _T.LINGALA: Locale.LINGALA_CONGO,
    _T.LITHUANIAN: Locale.LITHUANIAN_LITHUANIA,
    _T.MACEDONIAN: Locale.MACEDONIAN_MACEDONIA,
    _T.MALAY: Locale.MALAY_MALAYSIA,
    _T.MONGOLIAN: Locale.MONGOLIAN_MONGOLIA,
    _T.KURMANJI_KURDISH: Locale.KURDISH_TURKEY,
    _T.NORWEGIAN: Locale.NORWEGIAN_BOKMAL_NORWAY,
    _T.PERSIAN_IRAN: Locale.PERSIAN_IRAN,
    _T.PERUVIAN_SPANISH: Locale.PERUVIAN_SPANISH,
    _T.POLISH: Locale.POLISH_POLAND,
    _T.PORTUGUESE_BRAZIL: Locale.PORTUGUESE_BRAZIL,
    _T.PORTUGUESE: Locale.PORTUGUESE_PORTUGAL,
    _T.ROMANIAN: Locale.ROMANIAN_ROMANIA,
    _T.RUSSIAN: Locale.RUSSIAN_RUSSIA,
    _T.SERBIAN_SERBIA: Locale.SERBIAN_SERBIA,
    _T.SERBIAN_SERBIA_LATIN: Locale.SERBIAN_SERBIA_LATIN,
    _T.NEPALI: Locale.NEPALI_NEPAL,
    _T.SINHALA: Locale.SINHALA_SRILANKA,
    _T.SLOVAK: Locale.SLOVAK_SLOVAKIA,
    _T.SLOVENIAN: Locale.SLOVENIAN_SLOVENIA,
    _T.SOMALI: Locale.SOMALI_SOMALIA,
    _T.MEXICAN_SPANISH: Locale.SPANISH_MEXICO,
    _T.SPANISH: Locale.SPANISH_SPAIN,
    _T.SWAHILI: Locale.SWAHILI_KENYA,
    _T.SWEDISH_SWEDEN: Locale.SWEDISH_SWEDEN,
    _T.TAGALOG: Locale.TAGALOG_PHILIPPINES,
    _T.TAJIK: Locale.TAJIK_TAJIKISTAN,
    _T.THAI: Locale.THAI_THAILAND,
    _T.TELUGU: Locale.TELUGU,
    _T.TURKISH: Locale.TURKISH_TURKEY,
    _T.UKRAINIAN: Locale.UKRAINIAN_UKRAINE,
    _T.URDU: Locale.URDU_PAKISTAN,
    _T.UZBEK: Locale.UZBEK_UZBEKISTAN,
    _T.VIETNAMESE: Locale.VIETNAMESE_VIETNAM,
    _T.KURDISH_ZAZA: Locale.KURDISH_ZAZA,
    _T.TAJIK_TAJIKISTAN: Locale.TAJIK_TAJIKISTAN,
    _T.TAMIL_SRI_LANKA: Locale.TAMIL_SRILANKA,
    _T.UZBEK_LATIN: Locale.UZBEK_UZBEKISTAN,
    _T.UZBEK_LATIN_UZBEKISTAN: Locale.UZBEK_UZBEKISTAN,
}


def _lookup(value: Union[TranslatorsName, str]) -> Optional[TranslatorsName]:
    try:
        return TranslatorsName(value)
    except ValueError:
        return None


def try_translators_name_from_string(value: str) -> Optional[TranslatorsName]:
    """Return the translators name for ``value`` if it is one of the listed names.

    The Tajik (``tj_TJ``) and Latin Uzbek variants are not accepted here.
    """
    name = _lookup(value)
    if name is None or name not in _LISTED_SET:
        return None
    return name


def translators_list() -> List[TranslatorsName]:
    """Return the listed translators names in their canonical order."""
    return list(_LISTED)


def translators_name_locale(name: Union[TranslatorsName, str]) -> Optional[Locale]:
    """Return the locale a translators name maps to, or None if it is unknown."""
    known = _lookup(name)
    if known is None:
        return None
    return _LOCALE.get(known)