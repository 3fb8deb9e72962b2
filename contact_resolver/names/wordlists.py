"""Curated word lists used to reject non-person strings scraped as names."""

from __future__ import annotations

JOB_TITLE_WORDS = frozenset(
    {
        "senior", "junior", "lead", "chief", "head", "principal", "assistant",
        "manager", "director", "officer", "specialist", "coordinator",
        "administrator", "executive", "supervisor", "receptionist", "nurse",
        "practice", "office", "clinic", "dental", "medical", "sales",
        "marketing", "hr", "it", "tech", "support", "team", "staff",
        "associate", "partner", "consultant", "analyst", "engineer",
        "developer", "designer", "architect", "technician", "therapist",
        "hygienist", "surgeon", "physician", "doctor", "professor",
        "management", "certified", "chartered", "operators", "protection",
        "commercial", "structural", "financial", "professional",
    }
)

COMMON_WORDS = frozenset(
    {
        "there", "here", "hello", "welcome", "contact", "about", "info",
        "web", "website", "pixels", "banner", "logo", "icon",
        "image", "photo", "header", "footer", "menu", "navigation",
        "button", "link", "page", "home", "our", "team", "the",
        "meet", "visit", "call", "email", "phone", "address",
        "location", "directions", "hours", "services", "products",
        "client", "cosmetic", "law", "bank", "employment", "independent",
        "case", "general", "enquiries", "help",
        # business and industry words
        "accountancy", "accounting", "insurance", "structural", "consulting",
        "community", "engineering", "recruitment", "construction", "architectural",
        "digital", "response", "approaches", "solutions", "associates",
        "partnership", "enterprises", "holdings", "group", "limited", "ltd",
        "plc", "inc", "corp", "company", "llp", "llc",
        # page furniture picked up by scrapers
        "attach", "files", "survey", "socials", "recurring", "mixed",
        "cutter", "elimination", "diet", "managed", "businesses",
        "choose", "select", "submit", "download", "upload", "subscribe",
        "my", "su", "pl", "bh",
        # venues
        "aviator", "sanctuary", "salon", "gourmet", "lounge", "heaven",
        "trunk", "opus", "cafe", "restaurant", "bar", "pub", "inn", "hotel",
    }
)

BAD_LAST_NAME_WORDS = frozenset(
    {
        "accountancy", "accounting", "insurance", "structural", "response",
        "approaches", "protection", "diet", "law", "operators", "businesses",
        "management", "certified", "files", "su", "pl", "bh",
        "client", "survey", "consulting", "solutions", "services",
        "recruitment", "engineering", "construction", "commercial",
        "community", "digital", "financial", "professional",
        "associates", "partnership", "enterprises", "holdings", "group",
        "limited", "ltd", "plc", "inc", "corp", "company", "team",
    }
)

LOCATION_WORDS = frozenset(
    {
        "birmingham", "manchester", "london", "stockport", "bramhall",
        "cheadle", "cheshire", "yorkshire", "lancashire", "aldridge",
        "alderley", "poynton", "wilmslow", "macclesfield", "buxton",
        "hazel", "grove", "marple", "hyde", "glossop", "whaley",
        "edinburgh", "glasgow", "bristol", "liverpool", "leeds",
        "sheffield", "nottingham", "derby", "leicester", "coventry",
    }
)

# words that turn an all-caps multi-word string into a business name
BUSINESS_WORDS = frozenset(
    {
        "ltd", "limited", "plc", "inc", "llp", "llc", "corp", "co", "company",
        "group", "holdings", "services", "solutions", "associates", "partners",
        "dental", "clinic", "practice", "salon", "studio", "cafe", "restaurant",
        "bar", "hotel", "garage", "motors", "builders", "accountants", "surgery",
        "pharmacy", "store", "shop", "centre", "center", "and", "&",
    }
)

KNOWN_SHORT_FIRST_NAMES = frozenset({"al", "bo", "ed", "jo", "li", "mo", "ty", "ai", "lu", "yi"})

KNOWN_SHORT_SURNAMES = frozenset(
    {
        "li", "wu", "xu", "ye", "ma", "he", "hu", "lu", "ng",
        "ho", "lo", "ko", "do", "le", "ly", "qi", "yu", "ai",
    }
)

# words that never form a team name on their own ("Meet the Team")
TEAM_FILLER_WORDS = frozenset({"our", "the", "meet", "my", "your", "a", "whole", "full", "entire"})

TITLE_PREFIXES = ("Dr.", "Dr", "Mr.", "Mr", "Mrs.", "Mrs", "Ms.", "Ms", "Miss", "Rev.", "Rev", "Prof.", "Prof", "Professor")

GENERIC_USERNAMES = frozenset(
    {
        "info", "contact", "hello", "admin", "support", "enquiries",
        "mail", "sales", "office", "reception", "help", "team",
        "enquiry", "general", "main", "service", "booking", "bookings",
        "appointments", "marketing", "accounts", "billing", "orders", "hr",
        "jobs", "careers", "press", "media", "news", "webmaster",
        "postmaster", "noreply", "no-reply", "donotreply",
    }
)

# substrings that mark an email local part as a business or place, not a person
BAD_EMAIL_WORDS = (
    "sandwich", "bramhall", "manchester", "london", "alderley", "cheadle",
    "stockport", "cheshire", "yorkshire", "cafe", "restaurant", "salon",
    "hairdressing", "beauty", "dental", "accountants", "chartered",
    "enquiries", "bookings", "reservations",
)

NON_NAME_WORDS = JOB_TITLE_WORDS | COMMON_WORDS | LOCATION_WORDS
