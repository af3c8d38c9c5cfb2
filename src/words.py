"""
Static word lists used by the text moderator.

Every entry is lowercase. The three blocklist tiers are kept as separate
ordered tuples and are concatenated per context in ``mod``; a term may
appear in more than one tier.
"""

# multi-character substitutions, applied in order before LEET_MAP
LEET_MULTI = (
    ("ph", "f"),
    ("|)", "d"),
)

LEET_MAP = {
    "@": "a", "4": "a", "^": "a",
    "8": "b",
    "(": "c", "<": "c",
    "3": "e",
    "6": "g", "9": "g",
    "#": "h",
    "1": "i", "!": "i", "|": "i",
    "7": "t",
    "0": "o",
    "5": "s", "$": "s",
    "+": "t",
    "2": "z",
}

# slurs and hate speech, blocked in every context
ALWAYS_BLOCKED = (
    "nigger", "nigga", "niggers", "niggas", "chink", "chinks", "spic", "spics",
    "wetback", "wetbacks", "kike", "kikes", "gook", "gooks", "beaner", "beaners",
    "coon", "coons", "darkie", "darkies", "jigaboo", "raghead", "ragheads",
    "towelhead", "towelheads", "zipperhead",
    "faggot", "faggots", "fag", "fags", "dyke", "dykes", "tranny", "trannies",
    "retard", "retards", "retarded",
    "nazi", "nazis", "hitler",
    # non-english
    "marica", "maricon", "nègre", "enculé",
)

# general profanity, blocked in usernames only
PROFANITY = (
    "fuck", "fucker", "fuckers", "fucking", "fucked", "motherfucker", "motherfuckers",
    "shit", "shits", "shitty", "bullshit",
    "bitch", "bitches",
    "ass", "asshole", "assholes",
    "dick", "dicks",
    "cock", "cocks",
    "pussy", "pussies",
    "cunt", "cunts",
    "whore", "whores", "slut", "sluts",
    # spanish
    "puta", "putas", "pendejo", "pendejos", "cabron", "cabrones",
    "joder", "mierda", "coño",
    # french
    "putain", "merde", "salaud", "salope", "connard", "connasse", "enculé",
    "nique",
    # german
    "scheiße", "scheisse", "arschloch", "hurensohn", "fotze", "wichser",
    # portuguese
    "caralho", "porra", "viado", "buceta",
    # italian
    "cazzo", "stronzo", "puttana", "vaffanculo", "minchia",
)

# profanity aimed at a person, blocked in every context
TARGETED_INSULTS = (
    "shithead", "shitheads",
    "dickhead", "dickheads",
    "asshead",
    "dumbass", "dumbasses",
    "jackass", "jackasses",
    "fatass",
    "douchebag", "douchebags",
    "dipshit", "dipshits",
    "fuckface",
    "fuckhead", "fuckheads",
    "cockhead",
    "bitchass",
    "asswipe", "asswipes",
    "shitbag", "shitbags",
    "scumbag", "scumbags",
    "pisshead",
    "dick", "bitch", "cock", "asshole",
)

# benign words that contain a blocked term
WHITELIST = frozenset((
    "scunthorpe", "cockburn", "cocktail", "cockatoo", "cockatiel",
    "peacock", "hancock", "dickens", "dickson", "assassin", "assassins",
    "classic", "classics", "bassist", "therapist", "psychotherapist",
    "shitake", "shiitake", "pushit", "buttress", "butterscotch",
    "sextant", "essex", "sussex", "middlesex", "bisexual",
    "titular", "constitution", "prostitute", "restitution",
    "grape", "drape", "scrape", "trapeze",
    "nigeria", "nigerian", "nigerians", "niger",
    "blackcock", "woodcock", "stopcock", "gamecock",
    "coonhound", "raccoon", "cocoon",
    "analytic", "analytics", "analysis", "analog", "analogy",
    "peniston", "dickerson", "hitchcock",
    "pass", "mass", "grass", "brass", "class", "glass", "lass",
    "assume", "assault",
))

RESERVED_USERNAMES = (
    "admin", "administrator", "playedit", "played_it", "played-it",
    "support", "help", "info", "contact", "team", "staff", "mod", "moderator",
    "system", "official", "root", "superuser", "null", "undefined",
    "api", "bot", "test", "demo", "example", "guest",
    "noreply", "no-reply", "no_reply", "postmaster", "webmaster",
    "abuse", "security", "privacy", "legal", "copyright",
    "everyone", "all", "here", "channel",
)
