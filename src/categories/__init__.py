"""Category normalization package."""

from src.categories.normalizer import (
    DEFAULT_ICON,
    CanonicalCategory,
    category_of,
    clean_tag,
    icon_for,
)

__all__ = [
    "DEFAULT_ICON",
    "CanonicalCategory",
    "category_of",
    "clean_tag",
    "icon_for",
]
