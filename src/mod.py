import re
from dataclasses import dataclass
from enum import Enum

from words import (
    ALWAYS_BLOCKED,
    LEET_MAP,
    LEET_MULTI,
    PROFANITY,
    RESERVED_USERNAMES,
    TARGETED_INSULTS,
    WHITELIST,
)

RESERVED_MSG = "This username is reserved. Please choose a different one."
USERNAME_MSG = (
    "This username contains inappropriate language. Please choose a different one."
)
TEXT_MSG = (
    "Your message contains language that isn't allowed. Please revise and try again."
)

_zero_width_re = re.compile("[\u00ad\u200b-\u200d\u2060\ufeff]")
_repeat_re = re.compile(r"(.)\1{2,}", re.DOTALL)
# a lone separator between two single-character tokens, e.g. "f-u-c-k"
_spelled_re = re.compile(r"(?<=\b\w)[.\-_\s](?=\w\b)", re.ASCII)
_leet = str.maketrans(LEET_MAP)


class Context(str, Enum):
    USERNAME = "username"
    COMMENT = "comment"
    NOTE = "note"


@dataclass(frozen=True)
class Verdict:
    allowed: bool
    reason: str | None = None
    flagged_word: str | None = None

    def to_dict(self):
        """Return the public shape of the verdict, without the flagged word."""
        return {"allowed": self.allowed, "reason": self.reason}


OK = Verdict(True)


def _lead_rx(term):
    """Compile a regex matching term at a leading word boundary."""
    return re.compile(r"\b" + re.escape(term), re.IGNORECASE | re.ASCII)


_rxs = {t: _lead_rx(t) for t in ALWAYS_BLOCKED + PROFANITY + TARGETED_INSULTS}

_USERNAME_TERMS = ALWAYS_BLOCKED + PROFANITY + TARGETED_INSULTS
_TEXT_TERMS = ALWAYS_BLOCKED + TARGETED_INSULTS


def _pass(s):
    s = s.casefold()
    s = _zero_width_re.sub("", s)
    for src, dst in LEET_MULTI:
        s = s.replace(src, dst)
    s = s.translate(_leet)
    s = _repeat_re.sub(r"\1\1", s)
    return _spelled_re.sub("", s)


def normalize(text):
    """
    Reduce text to the canonical form used for matching

    Case-folds, strips invisible characters, undoes leetspeak, collapses
    runs of 3+ identical characters to 2 and rejoins spelled-out letters.
    The pass is repeated until the output is stable.

    :param text: Input string
    :return: Normalized string
    """
    prev, s = None, text or ""
    while s != prev:
        prev, s = s, _pass(s)
    return s


def is_whitelisted(term, normalized):
    """Check if a whitelisted word containing term occurs anywhere in the text."""
    return any(w in normalized for w in WHITELIST if term in w)


def match_blocked(normalized, terms):
    """
    Find the first blocked term in a normalized string

    :param normalized: Output of normalize()
    :param terms: Ordered blocklist
    :return: The first matching term not suppressed by the whitelist, or None
    """
    for t in terms:
        rx = _rxs.get(t) or _lead_rx(t)
        if rx.search(normalized) and not is_whitelisted(t, normalized):
            return t
    return None


def blocklist_for(context):
    """Return the ordered blocklist for a context."""
    if Context(context) is Context.USERNAME:
        return _USERNAME_TERMS
    return _TEXT_TERMS


def message_for(context):
    """Return the denial message for a context."""
    if Context(context) is Context.USERNAME:
        return USERNAME_MSG
    return TEXT_MSG


def check_reserved(username):
    """Check if a username is, or contains, a reserved name."""
    lower = (username or "").casefold().strip()
    if lower in RESERVED_USERNAMES:
        return True
    return any(r in lower for r in RESERVED_USERNAMES)


def check_text(text, context):
    """
    Moderate text for a context, without the reserved-name check

    :param text: Input string
    :param context: Context or its string value
    :return: Verdict
    """
    if not text or not text.strip():
        return OK
    hit = match_blocked(normalize(text), blocklist_for(context))
    if hit is None:
        return OK
    return Verdict(False, message_for(context), hit)


def check_username(username):
    """Reject reserved names, then moderate as a username."""
    if check_reserved(username):
        return Verdict(False, RESERVED_MSG)
    return check_text(username, Context.USERNAME)


def evaluate(text, context):
    """
    Decide whether text is allowed in a context

    :param text: Input string
    :param context: 'username', 'comment' or 'note'
    :return: Verdict; reason and flagged_word are set only when rejected
    """
    ctx = Context(context)
    if not text or not text.strip():
        return OK
    if ctx is Context.USERNAME:
        return check_username(text)
    return check_text(text, ctx)
