"""Immutable CSS selector fragments.

A compound selector is written in a fixed order::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may repeat

Every append returns a new :class:`SelectorFragment`; nothing is ever mutated,
so a fragment can be reused as the start of several chains.
"""

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Dict, Tuple

from ..utils.errors import DuplicateNotAllowed, OrderViolation
from ..utils.logging_config import get_logger

logger = get_logger("builder")

COMBINATORS: Tuple[str, ...] = (" ", "+", "~", ">")


class Category(IntEnum):
    """Kinds of compound selector parts, ranked by required position."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def unique(self) -> bool:
        """Whether the part may occur at most once per selector."""
        return self in _FLAG_FIELDS

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    def render(self, value: str) -> str:
        """Render ``value`` with this category's delimiters."""
        return _TEMPLATES[self].format(value)


_TEMPLATES: Dict[Category, str] = {
    Category.ELEMENT: "{}",
    Category.ID: "#{}",
    Category.CLASS: ".{}",
    Category.ATTRIBUTE: "[{}]",
    Category.PSEUDO_CLASS: ":{}",
    Category.PSEUDO_ELEMENT: "::{}",
}

_FLAG_FIELDS: Dict[Category, str] = {
    Category.ELEMENT: "has_element",
    Category.ID: "has_id",
    Category.PSEUDO_ELEMENT: "has_pseudo_element",
}


@dataclass(frozen=True)
class SelectorFragment:
    """A partial or complete selector plus the bookkeeping to validate appends."""

    text: str = ""
    stage: Category = Category.ELEMENT
    has_element: bool = False
    has_id: bool = False
    has_pseudo_element: bool = False

    def append(self, category: Category, value: str) -> "SelectorFragment":
        """
        Return a new fragment with ``value`` appended as a ``category`` part.

        Raises:
            DuplicateNotAllowed: a unique part already occurs in this chain.
            OrderViolation: ``category`` must come before the current stage.
        """
        flag = _FLAG_FIELDS.get(category)
        if flag is not None and getattr(self, flag):
            logger.debug(
                "Rejected duplicate selector part",
                extra={"selector": self.text, "part": category.label},
            )
            raise DuplicateNotAllowed(selector=self.text, part=category.label)

        if category < self.stage:
            logger.debug(
                "Rejected out-of-order selector part",
                extra={"selector": self.text, "part": category.label, "stage": int(self.stage)},
            )
            raise OrderViolation(selector=self.text, part=category.label)

        changes = {"text": self.text + category.render(value), "stage": category}
        if flag is not None:
            changes[flag] = True
        return replace(self, **changes)

    def element(self, value: str) -> "SelectorFragment":
        return self.append(Category.ELEMENT, value)

    def id(self, value: str) -> "SelectorFragment":
        return self.append(Category.ID, value)

    def class_(self, value: str) -> "SelectorFragment":
        # ``class`` is a keyword
        return self.append(Category.CLASS, value)

    def attr(self, value: str) -> "SelectorFragment":
        return self.append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "SelectorFragment":
        return self.append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "SelectorFragment":
        return self.append(Category.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


ROOT = SelectorFragment()


def combine(first: SelectorFragment, combinator: str, second: SelectorFragment) -> SelectorFragment:
    """
    Join two fragments with a combinator.

    The combinator is taken verbatim and padded with one space on each side,
    so the descendant combinator ``" "`` renders as three spaces. The result
    starts from a fresh stage and no flags.
    """
    return SelectorFragment(text=f"{first.text} {combinator} {second.text}")


def stringify(fragment: SelectorFragment) -> str:
    """Return the selector text of ``fragment``."""
    return fragment.text
