"""Fluent CSS selector builder."""

from .fragment import COMBINATORS, ROOT, Category, SelectorFragment, combine, stringify
from .selector_builder import (
    PART_KINDS,
    SelectorBuilder,
    css_selector_builder,
    describe_categories,
)

__all__ = [
    "COMBINATORS",
    "ROOT",
    "Category",
    "SelectorFragment",
    "combine",
    "stringify",
    "PART_KINDS",
    "SelectorBuilder",
    "css_selector_builder",
    "describe_categories",
]
