"""
Category Normalizer

Maps raw aggregator category tags and free-text descriptions onto one
canonical, user-facing category, and each category onto an icon key.

Resolution order (first match wins):
1. Grocery retailer named in the description
2. Payment-like wording in the description
3. First raw tag, cleaned, looked up in CATEGORY_BY_TAG
4. First word of the cleaned tag, else "Other"

The function is total: any input, including None, resolves to a category.
"""

import re
from enum import Enum
from typing import Optional, Sequence


class CanonicalCategory(str, Enum):
    """Known canonical categories. Fallback tags may produce others."""
    DEBTS = "Debts"
    EATING_OUT = "Eating Out"
    GROCERIES = "Groceries"
    SHOPPING = "Shopping"
    ENTERTAINMENT = "Entertainment"
    TRANSPORTATION = "Transportation"
    GAS = "Gas"
    UTILITIES = "Utilities"
    RENT = "Rent"
    HOUSING = "Housing"
    HEALTHCARE = "Healthcare"
    FITNESS = "Fitness"
    EDUCATION = "Education"
    TRAVEL = "Travel"
    SUBSCRIPTIONS = "Subscriptions"
    INSURANCE = "Insurance"
    TRANSFER = "Transfer"
    INCOME = "Income"
    OTHER = "Other"


GROCERY_KEYWORDS = (
    "whole foods",
    "safeway",
    "kroger",
    "trader joe",
    "albertsons",
    "publix",
    "wegmans",
    "costco",
    "walmart",
    "target",
    "grocery",
)

PAYMENT_KEYWORDS = (
    "payment",
    "loan payment",
    "credit card payment",
    "student loan",
    "auto loan",
    "personal loan",
)

CATEGORY_BY_TAG: dict[str, CanonicalCategory] = {
    "food and drink": CanonicalCategory.EATING_OUT,
    "restaurants": CanonicalCategory.EATING_OUT,
    "groceries": CanonicalCategory.GROCERIES,
    "shops": CanonicalCategory.SHOPPING,
    "shopping": CanonicalCategory.SHOPPING,
    "retail": CanonicalCategory.SHOPPING,
    "entertainment": CanonicalCategory.ENTERTAINMENT,
    "transportation": CanonicalCategory.TRANSPORTATION,
    "gas": CanonicalCategory.GAS,
    "utilities": CanonicalCategory.UTILITIES,
    "rent": CanonicalCategory.RENT,
    "housing": CanonicalCategory.HOUSING,
    "healthcare": CanonicalCategory.HEALTHCARE,
    "fitness": CanonicalCategory.FITNESS,
    "education": CanonicalCategory.EDUCATION,
    "travel": CanonicalCategory.TRAVEL,
    "subscriptions": CanonicalCategory.SUBSCRIPTIONS,
    "insurance": CanonicalCategory.INSURANCE,
    "payroll": CanonicalCategory.INCOME,
    "income": CanonicalCategory.INCOME,
    "payments": CanonicalCategory.DEBTS,
    "payment": CanonicalCategory.DEBTS,
    "loan payment": CanonicalCategory.DEBTS,
    "credit card payment": CanonicalCategory.DEBTS,
    "student loan": CanonicalCategory.DEBTS,
    "auto loan": CanonicalCategory.DEBTS,
    "personal loan": CanonicalCategory.DEBTS,
    "transfer": CanonicalCategory.TRANSFER,
    "other": CanonicalCategory.OTHER,
}

DEFAULT_ICON = "category"

ICON_BY_CATEGORY: dict[str, str] = {
    CanonicalCategory.DEBTS.value: "account_balance",
    CanonicalCategory.EATING_OUT.value: "restaurant_menu",
    CanonicalCategory.GROCERIES.value: "shopping_cart",
    CanonicalCategory.SHOPPING.value: "shopping_bag",
    CanonicalCategory.ENTERTAINMENT.value: "movie",
    CanonicalCategory.TRANSPORTATION.value: "directions_car",
    CanonicalCategory.GAS.value: "local_gas_station",
    CanonicalCategory.UTILITIES.value: "electrical_services",
    CanonicalCategory.RENT.value: "home",
    CanonicalCategory.HOUSING.value: "home",
    CanonicalCategory.HEALTHCARE.value: "local_hospital",
    CanonicalCategory.FITNESS.value: "fitness_center",
    CanonicalCategory.EDUCATION.value: "school",
    CanonicalCategory.TRAVEL.value: "flight",
    CanonicalCategory.SUBSCRIPTIONS.value: "subscriptions",
    CanonicalCategory.INSURANCE.value: "security",
    CanonicalCategory.TRANSFER.value: "sync_alt",
    CanonicalCategory.INCOME.value: "savings",
    CanonicalCategory.OTHER.value: DEFAULT_ICON,
}

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")


def clean_tag(tag: Optional[str]) -> str:
    """Lower-case a raw tag and strip everything but letters, digits and spaces."""
    return _NON_ALNUM.sub("", (tag or "").lower()).strip()


def category_of(raw_tags: Optional[Sequence[str]], free_text: Optional[str]) -> str:
    """
    Resolve the canonical category for a movement.

    Args:
        raw_tags: Aggregator category tags, most general first. May be None.
        free_text: Description or merchant text.

    Returns:
        Canonical category name (a CanonicalCategory value, or the first
        word of an unmapped tag).
    """
    tags = list(raw_tags or [])
    text = (free_text or "").lower()

    if any(keyword in text for keyword in GROCERY_KEYWORDS) or "Groceries" in tags:
        return CanonicalCategory.GROCERIES.value

    if any(keyword in text for keyword in PAYMENT_KEYWORDS):
        return CanonicalCategory.DEBTS.value

    cleaned = clean_tag(tags[0] if tags else "other")
    mapped = CATEGORY_BY_TAG.get(cleaned)
    if mapped is not None:
        return mapped.value

    words = cleaned.split()
    return words[0] if words else CanonicalCategory.OTHER.value


def icon_for(category: Optional[str]) -> str:
    """Icon key for a canonical category; unknown categories get the generic icon."""
    return ICON_BY_CATEGORY.get(category or "", DEFAULT_ICON)
