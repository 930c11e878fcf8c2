"""
Activity Description Formatting

Aggregator descriptions arrive in shouting upper case ("WHOLE FOODS #123").
Feeds render them in sentence case, except retirement-plan and goal-style
deposits which read better in title case ("Emergency Fund Deposit").
Words repeating the entry's category are dropped afterwards, so a
Groceries entry does not also say "groceries".
"""

import re
from typing import Optional

from src.categories import CanonicalCategory

RETIREMENT_KEYWORDS = ("401k", "roth ira")

GOAL_KEYWORDS = (
    "emergency fund",
    "college fund",
    "house",
    "wedding",
    "vacation",
    "529",
    "deposit",
)

# Brand and product spellings restored after case folding
SPECIAL_SPELLINGS = {
    "whole foods": "Whole Foods",
    "trader joe's": "Trader Joe's",
    "trader joes": "Trader Joe's",
    "starbucks": "Starbucks",
    "walmart": "Walmart",
    "costco": "Costco",
    "uber eats": "Uber Eats",
    "uber": "Uber",
    "lyft": "Lyft",
    "netflix": "Netflix",
    "spotify": "Spotify",
    "amazon": "Amazon",
    "paypal": "PayPal",
    "venmo": "Venmo",
    "zelle": "Zelle",
    "capital one": "Capital One",
    "charles schwab": "Charles Schwab",
    "roth ira": "Roth IRA",
    "401k": "401k",
}

# Category -> extra words considered redundant besides the category name
REDUNDANT_TERMS: dict[str, tuple[str, ...]] = {
    CanonicalCategory.GROCERIES.value: ("grocery", "groceries"),
    CanonicalCategory.TRANSFER.value: ("transfer", "transfers"),
    CanonicalCategory.DEBTS.value: ("debt", "debts"),
    CanonicalCategory.EATING_OUT.value: ("dining", "restaurant", "restaurants"),
    CanonicalCategory.SHOPPING.value: ("shopping", "retail"),
    CanonicalCategory.TRANSPORTATION.value: ("transportation", "transport"),
    CanonicalCategory.UTILITIES.value: ("utilities", "utility"),
    CanonicalCategory.HEALTHCARE.value: ("healthcare", "medical"),
    CanonicalCategory.SUBSCRIPTIONS.value: ("subscription", "subscriptions"),
    CanonicalCategory.HOUSING.value: ("housing",),
    CanonicalCategory.INCOME.value: ("income",),
}

_STORE_NUMBER = re.compile(r"\s*#\d+\s*$")
_WHITESPACE = re.compile(r"\s+")


def _restore_spellings(text: str) -> str:
    for phrase, spelling in SPECIAL_SPELLINGS.items():
        text = re.sub(rf"\b{re.escape(phrase)}\b", spelling, text, flags=re.IGNORECASE)
    return text


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def to_title_case(text: Optional[str]) -> str:
    """Capitalize every word, e.g. "EMERGENCY FUND DEPOSIT" -> "Emergency Fund Deposit"."""
    if not text:
        return ""
    words = [word[:1].upper() + word[1:].lower() for word in text.split(" ")]
    return _restore_spellings(" ".join(words))


def to_sentence_case(text: Optional[str]) -> str:
    """
    Capitalize only the first word, e.g. "COFFEE SHOP" -> "Coffee shop".

    Trailing store numbers ("#1234") are removed and known brand
    spellings restored.
    """
    if not text:
        return ""
    result = _STORE_NUMBER.sub("", text).lower()
    result = _capitalize_first(result)
    return _capitalize_first(_restore_spellings(result))


def strip_redundant_terms(description: str, category: Optional[str]) -> str:
    """
    Drop words that merely repeat the category.

    Returns the description unchanged when stripping would leave nothing.
    """
    if not description or not category:
        return description

    terms = (category.lower(),) + REDUNDANT_TERMS.get(category, ())
    result = description
    for term in terms:
        result = re.sub(rf"\b{re.escape(term)}\b", "", result, flags=re.IGNORECASE)
    result = _WHITESPACE.sub(" ", result).strip()

    if not result:
        return description
    return _capitalize_first(result)


def describe_linked(raw_description: Optional[str], category: Optional[str]) -> str:
    """Apply the casing policy for synced transactions, then strip redundancy."""
    text = raw_description or ""
    lowered = text.lower()

    if any(keyword in lowered for keyword in RETIREMENT_KEYWORDS):
        cased = to_title_case(text)
    elif any(keyword in lowered for keyword in GOAL_KEYWORDS):
        cased = to_title_case(text)
    else:
        cased = to_sentence_case(text)

    return strip_redundant_terms(cased, category)


def describe_manual(description: Optional[str]) -> str:
    """Manual entries are always sentence case."""
    return to_sentence_case(description)
