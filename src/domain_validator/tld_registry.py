from __future__ import annotations

import bisect
import enum
import string
from typing import Iterable

# The tables are a curated subset of the IANA root zone: every delegated ASCII
# ccTLD, the legacy gTLDs and a selection of new gTLDs. XN-- entries are not
# tracked. `domain-validator missing-tlds` lists what the live list adds.

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class TldCategory(enum.Enum):
    INFRASTRUCTURE = "infrastructure"
    GENERIC = "generic"
    GENERIC_RESTRICTED = "generic-restricted"
    COUNTRY_CODE = "country-code"


def _freeze(entries: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted({e.translate(_ASCII_LOWER) for e in entries}))


_INFRASTRUCTURE_TLDS = _freeze(("arpa",))

_GENERIC_TLDS = _freeze(
    (
        "abc", "abudhabi", "academy", "accountant", "ads", "adult", "aero", "africa",
        "agency", "airforce", "allianz", "alsace", "amazon", "amsterdam", "android",
        "apartments", "app", "apple", "archi", "army", "art", "asia", "attorney",
        "audi", "audio", "auto", "autos", "aws", "axa", "azure", "band", "bank",
        "bar", "barcelona", "barclays", "bargains", "bayern", "bbc", "beer", "berlin",
        "best", "bet", "bid", "bike", "bing", "bingo", "bio", "black", "blog", "blue",
        "bmw", "bond", "boo", "boston", "boutique", "brussels", "build", "builders",
        "business", "buzz", "bzh", "cafe", "camera", "capetown", "capital", "car",
        "care", "careers", "cars", "cash", "casino", "cat", "cbs", "center", "cern",
        "cfd", "channel", "charity", "cheap", "chrome", "church", "cisco", "citi",
        "city", "cleaning", "clinic", "cloud", "club", "codes", "coffee", "college",
        "com", "community", "company", "computer", "condos", "construction",
        "consulting", "contractors", "cool", "coop", "corsica", "country", "coupons",
        "courses", "credit", "creditcard", "cricket", "cruises", "cymru", "cyou",
        "dad", "date", "dating", "day", "deals", "degree", "delivery", "dell",
        "dental", "dentist", "design", "dev", "diamonds", "digital", "directory",
        "discount", "docs", "doctor", "dog", "domains", "download", "drive", "dubai",
        "durban", "earth", "eat", "eco", "edu", "education", "email", "energy",
        "engineer", "engineering", "enterprises", "equipment", "esq", "estate",
        "eus", "events", "exchange", "expert", "express", "faith", "family",
        "farm", "fashion", "ferrari", "film", "finance", "financial", "fish",
        "fit", "fitness", "flights", "fly", "foo", "football", "ford", "foundation",
        "frl", "fun", "fund", "furniture", "gal", "gallery", "game", "games",
        "garden", "gent", "gift", "gives", "gle", "global", "gmail", "gmbh", "gold",
        "golf", "goog", "google", "gov", "graphics", "green", "group", "guge",
        "guide", "guru", "hamburg", "hangout", "hbo", "health", "healthcare",
        "helsinki", "here", "hockey", "holdings", "holiday", "homes", "honda",
        "horse", "hospital", "host", "hosting", "hotels", "house", "how", "hsbc",
        "hyundai", "ibm", "icu", "ieee", "ikea", "inc", "industries", "info",
        "ing", "institute", "insurance", "int", "international", "investments",
        "irish", "istanbul", "java", "jeep", "jewelry", "jobs", "joburg", "kia",
        "kim", "kitchen", "kiwi", "koeln", "krd", "kyoto", "land", "lat", "law",
        "lawyer", "legal", "lexus", "lgbt", "life", "limited", "link", "live",
        "llc", "llp", "loan", "loans", "lol", "london", "lotto", "love", "ltd",
        "ltda", "madrid", "management", "market", "marketing", "markets", "mba",
        "media", "melbourne", "meme", "memorial", "men", "menu", "miami",
        "microsoft", "mil", "mit", "mobi", "mobile", "moe", "money", "monster",
        "mortgage", "moscow", "motorcycles", "mov", "movie", "museum", "music",
        "nagoya", "navy", "nba", "net", "netflix", "network", "new", "news",
        "nexus", "nfl", "ngo", "nike", "ninja", "nissan", "nrw", "nyc", "office",
        "okinawa", "one", "ong", "online", "ooo", "oracle", "org", "organic",
        "osaka", "page", "paris", "partners", "parts", "party", "pet", "pharmacy",
        "phd", "photo", "photography", "photos", "pics", "pictures", "pink",
        "pizza", "place", "play", "plumbing", "plus", "poker", "porn", "post",
        "press", "productions", "prof", "properties", "property", "pub", "quebec",
        "quest", "racing", "radio", "realty", "recipes", "red", "rehab", "reise",
        "rentals", "repair", "report", "restaurant", "review", "reviews", "rio",
        "rip", "rocks", "rsvp", "ruhr", "rugby", "run", "ryukyu", "saarland",
        "sale", "samsung", "sap", "sbs", "school", "science", "scot", "search",
        "security", "server", "services", "sex", "sexy", "shoes", "shop", "show",
        "singles", "site", "ski", "soccer", "social", "software", "solar",
        "solutions", "sony", "soy", "space", "sport", "srl", "stockholm", "store",
        "stream", "studio", "study", "style", "supply", "support", "surf",
        "surgery", "swiss", "sydney", "systems", "taipei", "tax", "taxi", "team",
        "tech", "technology", "tel", "tennis", "theater", "tips", "tires",
        "tirol", "today", "tokyo", "tools", "top", "tours", "town", "toyota",
        "toys", "trade", "trading", "training", "travel", "university", "uno",
        "vacations", "vegas", "ventures", "vet", "video", "vip", "visa", "vision",
        "vlaanderen", "vodka", "volvo", "voyage", "wales", "watch", "website",
        "wedding", "wien", "wiki", "win", "windows", "wine", "work", "works",
        "world", "wtf", "xbox", "xin", "xxx", "xyz", "yahoo", "yoga", "yokohama",
        "youtube", "zip", "zone", "zuerich",
    )
)

_GENERIC_RESTRICTED_TLDS = _freeze(("biz", "name", "pro"))

_COUNTRY_CODE_TLDS = _freeze(
    (
        "ac", "ad", "ae", "af", "ag", "ai", "al", "am", "ao", "aq", "ar", "as",
        "at", "au", "aw", "ax", "az", "ba", "bb", "bd", "be", "bf", "bg", "bh",
        "bi", "bj", "bm", "bn", "bo", "br", "bs", "bt", "bv", "bw", "by", "bz",
        "ca", "cc", "cd", "cf", "cg", "ch", "ci", "ck", "cl", "cm", "cn", "co",
        "cr", "cu", "cv", "cw", "cx", "cy", "cz", "de", "dj", "dk", "dm", "do",
        "dz", "ec", "ee", "eg", "er", "es", "et", "eu", "fi", "fj", "fk", "fm",
        "fo", "fr", "ga", "gb", "gd", "ge", "gf", "gg", "gh", "gi", "gl", "gm",
        "gn", "gp", "gq", "gr", "gs", "gt", "gu", "gw", "gy", "hk", "hm", "hn",
        "hr", "ht", "hu", "id", "ie", "il", "im", "in", "io", "iq", "ir", "is",
        "it", "je", "jm", "jo", "jp", "ke", "kg", "kh", "ki", "km", "kn", "kp",
        "kr", "kw", "ky", "kz", "la", "lb", "lc", "li", "lk", "lr", "ls", "lt",
        "lu", "lv", "ly", "ma", "mc", "md", "me", "mg", "mh", "mk", "ml", "mm",
        "mn", "mo", "mp", "mq", "mr", "ms", "mt", "mu", "mv", "mw", "mx", "my",
        "mz", "na", "nc", "ne", "nf", "ng", "ni", "nl", "no", "np", "nr", "nu",
        "nz", "om", "pa", "pe", "pf", "pg", "ph", "pk", "pl", "pm", "pn", "pr",
        "ps", "pt", "pw", "py", "qa", "re", "ro", "rs", "ru", "rw", "sa", "sb",
        "sc", "sd", "se", "sg", "sh", "si", "sj", "sk", "sl", "sm", "sn", "so",
        "sr", "ss", "st", "su", "sv", "sx", "sy", "sz", "tc", "td", "tf", "tg",
        "th", "tj", "tk", "tl", "tm", "tn", "to", "tr", "tt", "tv", "tw", "tz",
        "ua", "ug", "uk", "us", "uy", "uz", "va", "vc", "ve", "vg", "vi", "vn",
        "vu", "wf", "ws", "ye", "yt", "za", "zm", "zw",
    )
)

# Only honoured by validators that allow local names.
_LOCAL_TLDS = _freeze(("localdomain", "localhost"))

_TABLES: dict[TldCategory, tuple[str, ...]] = {
    TldCategory.INFRASTRUCTURE: _INFRASTRUCTURE_TLDS,
    TldCategory.GENERIC: _GENERIC_TLDS,
    TldCategory.GENERIC_RESTRICTED: _GENERIC_RESTRICTED_TLDS,
    TldCategory.COUNTRY_CODE: _COUNTRY_CODE_TLDS,
}


def ascii_lower(value: str) -> str:
    """Lowercase A-Z only; every other character is left untouched."""
    return value.translate(_ASCII_LOWER)


def tlds(category: TldCategory) -> tuple[str, ...]:
    try:
        return _TABLES[category]
    except KeyError:
        raise ValueError(f"unknown TLD category: {category!r}") from None


def local_tlds() -> tuple[str, ...]:
    return _LOCAL_TLDS


def is_valid_tld(token: str | None) -> bool:
    return classify_tld(token) is not None


def classify_tld(token: str | None) -> TldCategory | None:
    key = _lookup_key(token)
    if key is None:
        return None
    for category, table in _TABLES.items():
        if _contains(table, key):
            return category
    return None


def is_valid_infrastructure_tld(token: str | None) -> bool:
    return _in_table(_INFRASTRUCTURE_TLDS, token)


def is_valid_generic_tld(token: str | None) -> bool:
    """Generic in the IANA sense, so generic-restricted TLDs count too."""
    key = _lookup_key(token)
    if key is None:
        return False
    return _contains(_GENERIC_TLDS, key) or _contains(_GENERIC_RESTRICTED_TLDS, key)


def is_valid_generic_restricted_tld(token: str | None) -> bool:
    return _in_table(_GENERIC_RESTRICTED_TLDS, token)


def is_valid_country_code_tld(token: str | None) -> bool:
    return _in_table(_COUNTRY_CODE_TLDS, token)


def is_valid_local_tld(token: str | None) -> bool:
    return _in_table(_LOCAL_TLDS, token)


def _in_table(table: tuple[str, ...], token: str | None) -> bool:
    key = _lookup_key(token)
    return key is not None and _contains(table, key)


def _lookup_key(token: str | None) -> str | None:
    if not isinstance(token, str) or not token:
        return None
    key = ascii_lower(token)
    if key.startswith("."):
        key = key[1:]
    return key or None


def _contains(table: tuple[str, ...], key: str) -> bool:
    i = bisect.bisect_left(table, key)
    return i < len(table) and table[i] == key
