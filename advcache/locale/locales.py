"""Locale identifiers and their language."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Union

from advcache.locale.isolang import IsoLang


class Locale(str, Enum):
    """A language and region identifier such as ``en_GB``."""

    AFAR_ETHIOPIA = "aa_ET"
    ALBANIAN_ALBANIA = "sq_AL"
    AMHARIC_ETHIOPIA = "am_ET"
    ARABIC_UAE = "ar_AE"
    ARMENIAN_ARMENIA = "hy_AM"
    AZERBAIJANI_AZERBAIJAN = "az_AZ"
    BELARUSIAN_BELARUS = "be_BY"
    BENGALI_BANGLADESH = "bn_BD"
    BOSNIAN_BOSNIA = "bs_BA"
    BULGARIAN_BULGARIA = "bg_BG"
    BURMESE_MYANMAR = "my_MM"
    AFAR_ERITREA = "aa_ER"
    CENTRAL_KHMER = "km_KH"
    CHINESE_CHINA = "zh_CN"
    CHINESE_HONG_KONG = "zh_HK"
    CHINESE_TAIWAN = "zh_TW"
    CROATIAN_CROATIA = "hr_HR"
    CZECH_CZECH_REPUBLIC = "cs_CZ"
    DANISH_DENMARK = "da_DK"
    DUTCH_NETHERLANDS = "nl_NL"
    ENGLISH_CANADA = "en_CA"
    ENGLISH_INDIA = "en_IN"
    ENGLISH_NEW_ZEALAND = "en_NZ"
    ENGLISH_UNITED_KINGDOM = "en_GB"
    ESTONIAN_ESTONIA = "et_EE"
    FINNISH_FINLAND = "fi_FI"
    FRENCH_FRANCE = "fr_FR"
    GEORGIAN_GEORGIA = "ka_GE"
    GERMAN_GERMANY = "de_DE"
    GREEK_GREECE = "el_GR"
    HAITIAN_HAITI = "ht_HT"
    HEBREW_ISRAEL = "he_IL"
    HINDI_INDIA = "hi_IN"
    HUNGARIAN_HUNGARY = "hu_HU"
    ICELANDIC_ICELAND = "is_IS"
    INDONESIAN_INDONESIA = "id_ID"
    ITALIAN_ITALY = "it_IT"
    JAPANESE_JAPAN = "ja_JP"
    KAZAKH_KAZAKHSTAN = "kk_KZ"
    KOREAN_SOUTH_KOREA = "ko_KR"
    KURDISH_TURKEY = "ku_TR"
    KURDISH_ZAZA = "ku_GE"
    KURDISH_BADINI = "ku_IQ"
    KURDISH_SORANI = "ku_IR"
    KYRGYZ = "ky_KG"
    LAO = "lo_LA"
    LATVIAN_LATVIA = "lv_LV"
    LINGALA_CONGO = "ln_CD"
    LITHUANIAN_LITHUANIA = "lt_LT"
    MACEDONIAN_MACEDONIA = "mk_MK"
    MALAY_MALAYSIA = "ms_MY"
    MONGOLIAN_MONGOLIA = "mn_MN"
    NEPALI_NEPAL = "ne_NP"
    NORWEGIAN_BOKMAL_NORWAY = "nb_NO"
    PERSIAN_IRAN = "fa_IR"
    PERUVIAN_SPANISH = "es_PE"
    POLISH_POLAND = "pl_PL"
    PORTUGUESE_BRAZIL = "pt_BR"
    PORTUGUESE_PORTUGAL = "pt_PT"
    ROMANIAN_ROMANIA = "ro_RO"
    RUSSIAN_RUSSIA = "ru_RU"
    SERBIAN_SERBIA = "sr_RS"
    SERBIAN_SERBIA_LATIN = "sr_SP"
    SINDHI_INDIA = "sd_IN"
    SINHALA_SRILANKA = "si_LK"
    SLOVAK_SLOVAKIA = "sk_SK"
    SLOVENIAN_SLOVENIA = "sl_SI"
    SOMALI_SOMALIA = "so_SO"
    SPANISH_MEXICO = "es_MX"
    SPANISH_SPAIN = "es_ES"
    SWAHILI_KENYA = "sw_KE"
    SWEDISH_SWEDEN = "sv_SE"
    TAGALOG_PHILIPPINES = "tl_PH"
    TAJIK_TAJIKISTAN = "tg_TJ"
    THAI_THAILAND = "th_TH"
    TELUGU = "te_TE"
    TURKISH_TURKEY = "tr_TR"
    UKRAINIAN_UKRAINE = "uk_UA"
    URDU_PAKISTAN = "ur_PK"
    UZBEK_UZBEKISTAN = "uz_UZ"
    VIETNAMESE_VIETNAM = "vi_VN"
    ZULU_SOUTHAFRICA = "zu_ZA"
    TAMIL_SRILANKA = "ta_LK"

    def __str__(self) -> str:
        return self.value


_ISO_LANG: Dict[Locale, IsoLang] = {
    Locale.AFAR_ERITREA: IsoLang.CHINESE,
    Locale.AFAR_ETHIOPIA: IsoLang.AFAR,
    Locale.ALBANIAN_ALBANIA: IsoLang.ALBANIAN,
    Locale.AMHARIC_ETHIOPIA: IsoLang.AMHARIC,
    Locale.ARABIC_UAE: IsoLang.ARABIC,
    Locale.ARMENIAN_ARMENIA: IsoLang.ARMENIAN,
    Locale.AZERBAIJANI_AZERBAIJAN: IsoLang.AZERBAIJANI,
    Locale.BELARUSIAN_BELARUS: IsoLang.BELARUSIAN,
    Locale.BENGALI_BANGLADESH: IsoLang.BENGALI,
    Locale.BOSNIAN_BOSNIA: IsoLang.BOSNIAN,
    Locale.BULGARIAN_BULGARIA: IsoLang.BULGARIAN,
    Locale.BURMESE_MYANMAR: IsoLang.BURMESE,
    Locale.CENTRAL_KHMER: IsoLang.CAMBODIA,
    Locale.CHINESE_CHINA: IsoLang.CHINESE,
    Locale.CHINESE_HONG_KONG: IsoLang.CHINESE,
    Locale.CHINESE_TAIWAN: IsoLang.CHINESE,
    Locale.CROATIAN_CROATIA: IsoLang.CROATIAN,
    Locale.CZECH_CZECH_REPUBLIC: IsoLang.CZECH,
    Locale.DANISH_DENMARK: IsoLang.DANISH,
    Locale.DUTCH_NETHERLANDS: IsoLang.DUTCH,
    Locale.ENGLISH_CANADA: IsoLang.ENGLISH,
    Locale.ENGLISH_INDIA: IsoLang.ENGLISH,
    Locale.ENGLISH_NEW_ZEALAND: IsoLang.ENGLISH,
    Locale.ENGLISH_UNITED_KINGDOM: IsoLang.ENGLISH,
    Locale.ESTONIAN_ESTONIA: IsoLang.ESTONIAN,
    Locale.FINNISH_FINLAND: IsoLang.FINNISH,
    Locale.FRENCH_FRANCE: IsoLang.FRENCH,
    Locale.GEORGIAN_GEORGIA: IsoLang.GEORGIAN,
    Locale.GERMAN_GERMANY: IsoLang.GERMAN,
    Locale.GREEK_GREECE: IsoLang.GREEK,
    Locale.HAITIAN_HAITI: IsoLang.HAITIAN,
    Locale.HEBREW_ISRAEL: IsoLang.HEBREW,
    Locale.HINDI_INDIA: IsoLang.HINDI,
    Locale.HUNGARIAN_HUNGARY: IsoLang.HUNGARIAN,
    Locale.ICELANDIC_ICELAND: IsoLang.ICELANDIC,
    Locale.INDONESIAN_INDONESIA: IsoLang.INDONESIAN,
    Locale.ITALIAN_ITALY: IsoLang.ITALIAN,
    Locale.JAPANESE_JAPAN: IsoLang.JAPANESE,
    Locale.KAZAKH_KAZAKHSTAN: IsoLang.KAZAKH,
    Locale.KOREAN_SOUTH_KOREA: IsoLang.KOREAN,
    Locale.KURDISH_TURKEY: IsoLang.KURDISH,
    Locale.KURDISH_ZAZA: IsoLang.KURDISH,
    Locale.KURDISH_BADINI: IsoLang.KURDISH,
    Locale.KURDISH_SORANI: IsoLang.KURDISH,
    Locale.KYRGYZ: IsoLang.KYRGYZ,
    Locale.LAO: IsoLang.LAO,
    Locale.LATVIAN_LATVIA: IsoLang.LATVIAN,
    Locale.LINGALA_CONGO: IsoLang.LINGALA,
    Locale.LITHUANIAN_LITHUANIA: IsoLang.LITHUANIAN,
    Locale.MACEDONIAN_MACEDONIA: IsoLang.MACEDONIAN,
    Locale.MALAY_MALAYSIA: IsoLang.MALAY,
    Locale.MONGOLIAN_MONGOLIA: IsoLang.MONGOLIAN,
    Locale.NEPALI_NEPAL: IsoLang.NEPALI,
    Locale.NORWEGIAN_BOKMAL_NORWAY: IsoLang.NORWEGIAN_BOKMAL,
    Locale.PERSIAN_IRAN: IsoLang.PERSIAN,
    Locale.PERUVIAN_SPANISH: IsoLang.SPANISH,
    Locale.SPANISH_MEXICO: IsoLang.SPANISH,
    Locale.SPANISH_SPAIN: IsoLang.SPANISH,
    Locale.POLISH_POLAND: IsoLang.POLISH,
    Locale.PORTUGUESE_BRAZIL: IsoLang.PORTUGUESE,
    Locale.PORTUGUESE_PORTUGAL: IsoLang.PORTUGUESE,
    Locale.ROMANIAN_ROMANIA: IsoLang.ROMANIAN,
    Locale.RUSSIAN_RUSSIA: IsoLang.RUSSIAN,
    Locale.SERBIAN_SERBIA: IsoLang.SERBIAN,
    Locale.SERBIAN_SERBIA_LATIN: IsoLang.SERBIAN_LATIN,
    Locale.SINDHI_INDIA: IsoLang.SINDHI,
    Locale.SINHALA_SRILANKA: IsoLang.SINHALA,
    Locale.SLOVAK_SLOVAKIA: IsoLang.SLOVAK,
    Locale.SLOVENIAN_SLOVENIA: IsoLang.SLOVENIAN,
    Locale.SOMALI_SOMALIA: IsoLang.SOMALI,
    Locale.SWAHILI_KENYA: IsoLang.SWAHILI,
    Locale.SWEDISH_SWEDEN: IsoLang.SWEDISH,
    Locale.TAGALOG_PHILIPPINES: IsoLang.TAGALOG,
    Locale.TAJIK_TAJIKISTAN: IsoLang.TAJIK,
    Locale.THAI_THAILAND: IsoLang.THAI,
    Locale.TELUGU: IsoLang.TELUGU,
    Locale.TURKISH_TURKEY: IsoLang.TURKISH,
    Locale.UKRAINIAN_UKRAINE: IsoLang.UKRAINIAN,
    Locale.URDU_PAKISTAN: IsoLang.URDU,
    Locale.UZBEK_UZBEKISTAN: IsoLang.UZBEK,
    Locale.VIETNAMESE_VIETNAM: IsoLang.VIETNAMESE,
    Locale.ZULU_SOUTHAFRICA: IsoLang.ZULU,
    Locale.TAMIL_SRILANKA: IsoLang.SINHALA,
}


def try_locale_from_string(value: str) -> Optional[Locale]:
    """Return the locale for ``value``, or None if it is unknown."""
    try:
        return Locale(value)
    except ValueError:
        return None


def locales_list() -> List[Locale]:
    """Return every known locale in its canonical listing order."""
    return list(Locale)


def locale_iso_lang(locale: Union[Locale, str]) -> Optional[IsoLang]:
    """Return the language of ``locale``, or None if the locale is unknown."""
    known = try_locale_from_string(locale)
    if known is None:
        return None
    return _ISO_LANG.get(known)