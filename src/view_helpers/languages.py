"""Built-in translation strings.

Only the keys the bundled templates and helpers need; deployments pass
their own tables to DictTranslator.
"""

LANGUAGE_COOKIE = "language"

STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "number_decimal_point": ".",
        "number_thousands_separator": ",",
        "home_title": "Library search",
        "record_count": "%%count%% records",
        "feedback": "Feedback",
        "share": "Share",
        "contact": "Contact",
    },
    "de": {
        "number_decimal_point": ",",
        "number_thousands_separator": ".",
        "home_title": "Bibliothekssuche",
        "record_count": "%%count%% Datensätze",
        "feedback": "Feedback",
        "share": "Teilen",
        "contact": "Kontakt",
    },
    "fi": {
        "number_decimal_point": ",",
        "number_thousands_separator": " ",
        "home_title": "Kirjastohaku",
        "record_count": "%%count%% tietuetta",
        "feedback": "Palaute",
        "share": "Jaa",
        "contact": "Yhteystiedot",
    },
}
