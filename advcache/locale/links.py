"""Cross-links from locales to translators names and from languages to locales."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from advcache.locale.isolang import IsoLang, try_iso_lang_from_string
from advcache.locale.locales import Locale, try_locale_from_string
from advcache.locale.translators import TranslatorsName

_L = Locale
_T = TranslatorsName
_I = IsoLang

_TRANSLATORS: Dict[Locale, TranslatorsName] = {
    _L.AFAR_ERITREA: _T.CANTONESE,
    _L.AFAR_ETHIOPIA: _T.AMHARIC,
    _L.ALBANIAN_ALBANIA: _T.ALBANIAN,
    _L.AMHARIC_ETHIOPIA: _T.AMHARIC,
    _L.ARABIC_UAE: _T.ARABIC_UAE,
    _L.ARMENIAN_ARMENIA: _T.ARMENIAN,
    _L.AZERBAIJANI_AZERBAIJAN: _T.AZERBAIJANI,
    _L.BELARUSIAN_BELARUS: _T.BELARUSIAN,
    _L.BENGALI_BANGLADESH: _T.BENGALI,
    _L.BOSNIAN_BOSNIA: _T.BOSNIAN,
    _L.BULGARIAN_BULGARIA: _T.BULGARIAN,
    _L.BURMESE_MYANMAR: _T.BURMESE,
    _L.CENTRAL_KHMER: _T.KHMER,
    _L.CHINESE_CHINA: _T.CHINESE,
    _L.CHINESE_HONG_KONG: _T.CANTONESE_KATON,
    _L.CHINESE_TAIWAN: _T.TRADITIONAL_CHINESE,
    _L.CROATIAN_CROATIA: _T.CROATIAN,
    _L.CZECH_CZECH_REPUBLIC: _T.CZECH_CZECHIA,
    _L.DANISH_DENMARK: _T.DANISH,
    _L.DUTCH_NETHERLANDS: _T.DUTCH,
    _L.ENGLISH_CANADA: _T.CANADIAN_ENGLISH,
    _L.ENGLISH_INDIA: _T.INDIAN_ENGLISH,
    _L.ENGLISH_NEW_ZEALAND: _T.NEW_ZEALAND_ENGLISH,
    _L.ENGLISH_UNITED_KINGDOM: _T.ENGLISH,
    _L.ESTONIAN_ESTONIA: _T.ESTONIAN,
    _L.FINNISH_FINLAND: _T.FINNISH,
    _L.FRENCH_FRANCE: _T.FRENCH,
    _L.GEORGIAN_GEORGIA: _T.GEORGIAN_GEORGIA,
    _L.GERMAN_GERMANY: _T.GERMAN,
    _L.GREEK_GREECE: _T.GREEK,
    _L.HAITIAN_HAITI: _T.HAITIAN_CREOLE,
    _L.HEBREW_ISRAEL: _T.HEBREW,
    _L.HINDI_INDIA: _T.HINDI,
    _L.HUNGARIAN_HUNGARY: _T.HUNGARIAN,
    _L.ICELANDIC_ICELAND: _T.ICELANDIC,
    _L.INDONESIAN_INDONESIA: _T.INDONESIAN,
    _L.ITALIAN_ITALY: _T.ITALIAN,
    _L.JAPANESE_JAPAN: _T.JAPANESE,
    _L.KAZAKH_KAZAKHSTAN: _T.KAZAKH,
    _L.KOREAN_SOUTH_KOREA: _T.KOREAN,
    _L.KURDISH_TURKEY: _T.KURMANJI_KURDISH,
    _L.KURDISH_ZAZA: _T.KURDISH_ZAZA,
    _L.KURDISH_BADINI: _T.KURDISH_BADINI,
    _L.KURDISH_SORANI: _T.SORANI_KURDISH,
    _L.KYRGYZ: _T.KYRGYZ,
    _L.LAO: _T.LAO,
    _L.LATVIAN_LATVIA: _T.LATVIAN,
    _L.LINGALA_CONGO: _T.LINGALA,
    _L.LITHUANIAN_LITHUANIA: _T.LITHUANIAN,
    _L.MACEDONIAN_MACEDONIA: _T.MACEDONIAN,
    _L.MALAY_MALAYSIA: _T.MALAY,
    _L.MONGOLIAN_MONGOLIA: _T.MONGOLIAN,
    _L.NEPALI_NEPAL: _T.NEPALI,
    _L.NORWEGIAN_BOKMAL_NORWAY: _T.NORWEGIAN,
    _L.PERSIAN_IRAN: _T.PERSIAN_IRAN,
    _L.PERUVIAN_SPANISH: _T.PERUVIAN_SPANISH,
    _L.POLISH_POLAND: _T.POLISH,
    _L.PORTUGUESE_BRAZIL: _T.PORTUGUESE_BRAZIL,
    _L.PORTUGUESE_PORTUGAL: _T.PORTUGUESE,
    _L.ROMANIAN_ROMANIA: _T.ROMANIAN,
    _L.RUSSIAN_RUSSIA: _T.RUSSIAN,
    _L.SERBIAN_SERBIA: _T.SERBIAN_SERBIA,
    _L.SERBIAN_SERBIA_LATIN: _T.SERBIAN_SERBIA_LATIN,
    _L.SINDHI_INDIA: _T.NEPALI,
    _L.SINHALA_SRILANKA: _T.SINHALA,
    _L.SLOVAK_SLOVAKIA: _T.SLOVAK,
    _L.SLOVENIAN_SLOVENIA: _T.SLOVENIAN,
    _L.SOMALI_SOMALIA: _T.SOMALI,
    _L.SPANISH_MEXICO: _T.MEXICAN_SPANISH,
    _L.SPANISH_SPAIN: _T.SPANISH,
    _L.SWAHILI_KENYA: _T.SWAHILI,
    _L.SWEDISH_SWEDEN: _T.SWEDISH_SWEDEN,
    _L.TAGALOG_PHILIPPINES: _T.TAGALOG,
    _L.TAJIK_TAJIKISTAN: _T.TAJIK,
    _L.THAI_THAILAND: _T.THAI,
    _L.TELUGU: _T.TELUGU,
    _L.TURKISH_TURKEY: _T.TURKISH,
    _L.UKRAINIAN_UKRAINE: _T.UKRAINIAN,
    _L.URDU_PAKISTAN: _T.URDU,
    _L.UZBEK_UZBEKISTAN: _T.UZBEK,
    _L.VIETNAMESE_VIETNAM: _T.VIETNAMESE,
    _L.ZULU_SOUTHAFRICA: _T.KURDISH_ZAZA,
    _L.TAMIL_SRILANKA: _T.TAMIL_SRI_LANKA,
}

_LOCALES: Dict[IsoLang, Tuple[Locale, ...]] = {
    _I.AFAR: (_L.AFAR_ETHIOPIA,),
    _I.AMHARIC: (_L.AMHARIC_ETHIOPIA,),
    _I.ARABIC: (_L.ARABIC_UAE,),
    _I.AZERBAIJANI: (_L.AZERBAIJANI_AZERBAIJAN,),
    _I.BELARUSIAN: (_L.BELARUSIAN_BELARUS,),
    _I.BULGARIAN: (_L.BULGARIAN_BULGARIA,),
    _I.BENGALI: (_L.BENGALI_BANGLADESH,),
    _I.BOSNIAN: (_L.BOSNIAN_BOSNIA,),
    _I.CZECH: (_L.CZECH_CZECH_REPUBLIC,),
    _I.DANISH: (_L.DANISH_DENMARK,),
    _I.GERMAN: (_L.GERMAN_GERMANY,),
    _I.GREEK: (_L.GREEK_GREECE,),
    _I.ENGLISH: (
        _L.ENGLISH_UNITED_KINGDOM,
        _L.ENGLISH_CANADA,
        _L.ENGLISH_INDIA,
        _L.ENGLISH_NEW_ZEALAND,
    ),
    _I.SPANISH: (_L.SPANISH_SPAIN, _L.SPANISH_MEXICO),
    _I.ESTONIAN: (_L.ESTONIAN_ESTONIA,),
    _I.PERSIAN: (_L.PERSIAN_IRAN,),
    _I.FINNISH: (_L.FINNISH_FINLAND,),
    _I.FRENCH: (_L.FRENCH_FRANCE,),
    _I.HEBREW: (_L.HEBREW_ISRAEL,),
    _I.HINDI: (_L.HINDI_INDIA,),
    _I.CROATIAN: (_L.CROATIAN_CROATIA,),
    _I.HAITIAN: (_L.HAITIAN_HAITI,),
    _I.HUNGARIAN: (_L.HUNGARIAN_HUNGARY,),
    _I.ARMENIAN: (_L.ARMENIAN_ARMENIA,),
    _I.INDONESIAN: (_L.INDONESIAN_INDONESIA,),
    _I.ICELANDIC: (_L.ICELANDIC_ICELAND,),
    _I.ITALIAN: (_L.ITALIAN_ITALY,),
    _I.JAPANESE: (_L.JAPANESE_JAPAN,),
    _I.GEORGIAN: (_L.GEORGIAN_GEORGIA,),
    _I.KAZAKH: (_L.KAZAKH_KAZAKHSTAN,),
    _I.CAMBODIA: (_L.CENTRAL_KHMER,),
    _I.KOREAN: (_L.KOREAN_SOUTH_KOREA,),
    _I.KURDISH: (_L.KURDISH_TURKEY,),
    _I.LINGALA: (_L.LINGALA_CONGO,),
    _I.KYRGYZ: (_L.KYRGYZ,),
    _I.LAO: (_L.LAO,),
    _I.LITHUANIAN: (_L.LITHUANIAN_LITHUANIA,),
    _I.LATVIAN: (_L.LATVIAN_LATVIA,),
    _I.MACEDONIAN: (_L.MACEDONIAN_MACEDONIA,),
    _I.MONGOLIAN: (_L.MONGOLIAN_MONGOLIA,),
    _I.MALAY: (_L.MALAY_MALAYSIA,),
    _I.BURMESE: (_L.BURMESE_MYANMAR,),
    _I.NORWEGIAN_BOKMAL: (_L.NORWEGIAN_BOKMAL_NORWAY,),
    _I.NEPALI: (_L.NEPALI_NEPAL,),
    _I.DUTCH: (_L.DUTCH_NETHERLANDS,),
    _I.POLISH: (_L.POLISH_POLAND,),
    _I.PORTUGUESE: (_L.PORTUGUESE_BRAZIL, _L.PORTUGUESE_PORTUGAL),
    _I.ROMANIAN: (_L.ROMANIAN_ROMANIA,),
    _I.RUSSIAN: (_L.RUSSIAN_RUSSIA,),
    _I.SINDHI: (_L.SINDHI_INDIA,),
    _I.SINHALA: (_L.SINHALA_SRILANKA,),
    _I.SLOVAK: (_L.SLOVAK_SLOVAKIA,),
    _I.SLOVENIAN: (_L.SLOVENIAN_SLOVENIA,),
    _I.SOMALI: (_L.SOMALI_SOMALIA,),
    _I.ALBANIAN: (_L.ALBANIAN_ALBANIA,),
    _I.SERBIAN: (_L.SERBIAN_SERBIA,),
    _I.SERBIAN_LATIN: (_L.SERBIAN_SERBIA_LATIN,),
    _I.SWEDISH: (_L.SWEDISH_SWEDEN,),
    _I.SWAHILI: (_L.SWAHILI_KENYA,),
    _I.TAJIK: (_L.TAJIK_TAJIKISTAN,),
    _I.THAI: (_L.THAI_THAILAND,),
    _I.TELUGU: (_L.TELUGU,),
    _I.TAGALOG: (_L.TAGALOG_PHILIPPINES,),
    _I.TURKISH: (_L.TURKISH_TURKEY,),
    _I.UKRAINIAN: (_L.UKRAINIAN_UKRAINE,),
    _I.URDU: (_L.URDU_PAKISTAN,),
    # Listed twice on purpose: the table names the same locale for both variants.
    _I.UZBEK: (_L.UZBEK_UZBEKISTAN, _L.UZBEK_UZBEKISTAN),
    _I.VIETNAMESE: (_L.VIETNAMESE_VIETNAM,),
    _I.CHINESE: (_L.CHINESE_CHINA, _L.CHINESE_HONG_KONG, _L.CHINESE_TAIWAN),
    _I.ZULU: (_L.ZULU_SOUTHAFRICA,),
}


def locale_translators_name(locale: Union[Locale, str]) -> Optional[TranslatorsName]:
    """Return the translators name for ``locale``, or None if it is unknown."""
    known = try_locale_from_string(locale)
    if known is None:
        return None
    return _TRANSLATORS.get(known)


def iso_lang_locales(lang: Union[IsoLang, str]) -> Optional[List[Locale]]:
    """Return the locales of a language in preference order, or None if unknown."""
    known = try_iso_lang_from_string(lang)
    if known is None or known not in _LOCALES:
        return None
    return list(_LOCALES[known])