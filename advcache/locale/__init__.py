"""Language, locale and translators-name enumerations and the lookups between them."""