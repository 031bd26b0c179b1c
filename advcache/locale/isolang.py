"""ISO 639-1 language codes known to the cache."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional


class IsoLang(str, Enum):
    """A two-letter ISO language code."""

    AFAR = "aa"
    ALBANIAN = "sq"
    AMHARIC = "am"
    ARABIC = "ar"
    ARMENIAN = "hy"
    AZERBAIJANI = "az"
    BELARUSIAN = "be"
    BENGALI = "bn"
    BOSNIAN = "bs"
    BULGARIAN = "bg"
    BURMESE = "my"
    CHINESE = "zh"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    ESTONIAN = "et"
    FINNISH = "fi"
    FRENCH = "fr"
    GEORGIAN = "ka"
    GERMAN = "de"
    GREEK = "el"
    HAITIAN = "ht"
    HEBREW = "he"
    HINDI = "hi"
    HUNGARIAN = "hu"
    ICELANDIC = "is"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAPANESE = "ja"
    KAZAKH = "kk"
    CAMBODIA = "km"
    KOREAN = "ko"
    KURDISH = "ku"
    KYRGYZ = "ky"
    LAO = "lo"
    LATVIAN = "lv"
    LINGALA = "ln"
    LITHUANIAN = "lt"
    MACEDONIAN = "mk"
    MALAY = "ms"
    MONGOLIAN = "mn"
    NEPALI = "ne"
    NORWEGIAN_BOKMAL = "nb"
    PERSIAN = "fa"
    POLISH = "pl"
    PORTUGUESE = "pt"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SERBIAN = "sr"
    SERBIAN_LATIN = "sp"
    SINDHI = "sd"
    SINHALA = "si"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SOMALI = "so"
    SPANISH = "es"
    SWAHILI = "sw"
    SWEDISH = "sv"
    TAGALOG = "tl"
    TAJIK = "tg"
    THAI = "th"
    TELUGU = "te"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    URDU = "ur"
    UZBEK = "uz"
    VIETNAMESE = "vi"
    ZULU = "zu"

    def __str__(self) -> str:
        return self.value


_ISO_ORDER = (
    IsoLang.AFAR, IsoLang.ALBANIAN, IsoLang.AMHARIC, IsoLang.ARABIC, IsoLang.ARMENIAN,
    IsoLang.AZERBAIJANI, IsoLang.BELARUSIAN, IsoLang.BENGALI, IsoLang.BOSNIAN,
    IsoLang.BULGARIAN, IsoLang.BURMESE, IsoLang.CAMBODIA, IsoLang.CHINESE,
    IsoLang.CROATIAN, IsoLang.CZECH, IsoLang.DANISH, IsoLang.DUTCH, IsoLang.ENGLISH,
    IsoLang.ESTONIAN, IsoLang.FINNISH, IsoLang.FRENCH, IsoLang.GEORGIAN, IsoLang.GERMAN,
    IsoLang.GREEK, IsoLang.HAITIAN, IsoLang.HEBREW, IsoLang.HINDI, IsoLang.HUNGARIAN,
    IsoLang.ICELANDIC, IsoLang.INDONESIAN, IsoLang.ITALIAN, IsoLang.JAPANESE,
    IsoLang.KAZAKH, IsoLang.KOREAN, IsoLang.KURDISH, IsoLang.KYRGYZ, IsoLang.LAO,
    IsoLang.LATVIAN, IsoLang.LINGALA, IsoLang.LITHUANIAN, IsoLang.MACEDONIAN,
    IsoLang.MALAY, IsoLang.MONGOLIAN, IsoLang.NEPALI, IsoLang.NORWEGIAN_BOKMAL,
    IsoLang.PERSIAN, IsoLang.SPANISH, IsoLang.POLISH, IsoLang.PORTUGUESE,
    IsoLang.ROMANIAN, IsoLang.RUSSIAN, IsoLang.SERBIAN, IsoLang.SERBIAN_LATIN,
    IsoLang.SINDHI, IsoLang.SINHALA, IsoLang.SLOVAK, IsoLang.SLOVENIAN, IsoLang.SOMALI,
    IsoLang.SWAHILI, IsoLang.SWEDISH, IsoLang.TAGALOG, IsoLang.TAJIK, IsoLang.THAI,
    IsoLang.TELUGU, IsoLang.TURKISH, IsoLang.UKRAINIAN, IsoLang.URDU, IsoLang.UZBEK,
    IsoLang.VIETNAMESE, IsoLang.ZULU,
)


def try_iso_lang_from_string(value: str) -> Optional[IsoLang]:
    """Return the language for ``value``, or None if the code is unknown."""
    try:
        return IsoLang(value)
    except ValueError:
        return None


def iso_list() -> List[IsoLang]:
    """Return every known language in its canonical listing order."""
    return list(_ISO_ORDER)