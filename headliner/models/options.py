from enum import Enum


class Category(str, Enum):
    """The category to get headlines for. Cannot be mixed with sources."""

    ALL = ""
    BUSINESS = "business"
    ENTERTAINMENT = "entertainment"
    GENERAL = "general"
    HEALTH = "health"
    SCIENCE = "science"
    SPORTS = "sports"
    TECHNOLOGY = "technology"


class Language(str, Enum):
    """2-letter ISO-639-1 language codes."""

    ALL = ""
    ARABIC = "ar"
    GERMAN = "de"
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    HEBREW = "he"
    ITALIAN = "it"
    DUTCH = "nl"
    NORWEGIAN = "no"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    SWEDISH = "sv"
    UNDEFINED = "ud"
    CHINESE = "zh"


class Country(str, Enum):
    """2-letter ISO 3166-1 country codes."""

    ALL = ""
    UAE = "ae"
    ARGENTINA = "ar"
    AUSTRIA = "at"
    AUSTRALIA = "au"
    BELGIUM = "be"
    BULGARIA = "bg"
    BRAZIL = "br"
    CANADA = "ca"
    SWITZERLAND = "ch"
    CHINA = "cn"
    COLOMBIA = "co"
    CUBA = "cu"
    CZECHIA = "cz"
    GERMANY = "de"
    EGYPT = "eg"
    FRANCE = "fr"
    UK = "gb"
    GREECE = "gr"
    HONG_KONG = "hk"
    HUNGARY = "hu"
    INDONESIA = "id"
    IRELAND = "ie"
    ISRAEL = "il"
    INDIA = "in"
    ITALY = "it"
    JAPAN = "jp"
    SOUTH_KOREA = "kr"
    LITHUANIA = "lt"
    LATVIA = "lv"
    MOROCCO = "ma"
    MEXICO = "mx"
    MALAYSIA = "my"
    NIGERIA = "ng"
    NETHERLANDS = "nl"
    NORWAY = "no"
    NEW_ZEALAND = "nz"
    PHILIPPINES = "ph"
    POLAND = "pl"
    PORTUGAL = "pt"
    ROMANIA = "ro"
    SERBIA = "rs"
    RUSSIA = "ru"
    SAUDI_ARABIA = "sa"
    SWEDEN = "se"
    SINGAPORE = "sg"
    SLOVENIA = "si"
    SLOVAKIA = "sk"
    THAILAND = "th"
    TURKEY = "tr"
    TAIWAN = "tw"
    UKRAINE = "ua"
    USA = "us"
    VENEZUELA = "ve"
    SOUTH_AFRICA = "za"


class SearchIn(str, Enum):
    """The fields to restrict keyword search to."""

    DEFAULT = ""
    TITLE = "title"
    DESCRIPTION = "description"
    CONTENT = "content"


class SortBy(str, Enum):
    DEFAULT = ""
    RELEVANCY = "relevancy"
    POPULARITY = "popularity"
    PUBLISHED_AT = "publishedAt"
