"""Fluent facade for building CSS selectors."""

from typing import Iterable, List, Sequence, Tuple

from .fragment import ROOT, Category, SelectorFragment, combine, stringify
from ..utils.errors import SelectorBuildError, UnknownPart
from ..utils.logging_config import LoggerMixin

# Names accepted for each category when parts arrive as (kind, value) pairs
PART_KINDS = {
    "element": Category.ELEMENT,
    "id": Category.ID,
    "class": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "pseudo_class": Category.PSEUDO_CLASS,
    "pseudoClass": Category.PSEUDO_CLASS,
    "pseudo_element": Category.PSEUDO_ELEMENT,
    "pseudoElement": Category.PSEUDO_ELEMENT,
}


class SelectorBuilder(LoggerMixin):
    """
    Entry point for selector chains.

    The builder holds no state of its own: each method starts a new chain
    from the empty fragment, so independent chains never interfere.

    Example:
        >>> builder = SelectorBuilder()
        >>> builder.id("main").class_("container").class_("editable").stringify()
        '#main.container.editable'
    """

    def element(self, value: str) -> SelectorFragment:
        return ROOT.element(value)

    def id(self, value: str) -> SelectorFragment:
        return ROOT.id(value)

    def class_(self, value: str) -> SelectorFragment:
        return ROOT.class_(value)

    def attr(self, value: str) -> SelectorFragment:
        return ROOT.attr(value)

    def pseudo_class(self, value: str) -> SelectorFragment:
        return ROOT.pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorFragment:
        return ROOT.pseudo_element(value)

    def combine(
        self, first: SelectorFragment, combinator: str, second: SelectorFragment
    ) -> SelectorFragment:
        result = combine(first, combinator, second)
        self.logger.debug(
            "Combined selectors",
            extra={"combinator": combinator, "selector": result.text},
        )
        return result

    def stringify(self, fragment: SelectorFragment) -> str:
        return stringify(fragment)

    def from_parts(self, parts: Iterable[Tuple[str, str]]) -> SelectorFragment:
        """
        Build a fragment from ``(kind, value)`` pairs applied in order.

        Args:
            parts: Pairs such as ``("element", "a")`` or ``("pseudoClass", "focus")``

        Returns:
            The resulting fragment

        Raises:
            UnknownPart: if a kind is not one of :data:`PART_KINDS`
            SelectorBuildError: if the parts break ordering or uniqueness rules

        Errors carry the offending position as ``details["part_index"]``.
        """
        fragment = ROOT
        for index, (kind, value) in enumerate(parts):
            category = PART_KINDS.get(kind)
            if category is None:
                raise UnknownPart(
                    f"Unknown selector part '{kind}', expected one of: "
                    + ", ".join(sorted(PART_KINDS)),
                    selector=fragment.text,
                    part=kind,
                    details={"part_index": index},
                )
            try:
                fragment = fragment.append(category, value)
            except SelectorBuildError as e:
                e.details["part_index"] = index
                raise
        return fragment

    def combine_all(
        self, fragments: Sequence[SelectorFragment], combinators: Sequence[str]
    ) -> SelectorFragment:
        """
        Combine ``fragments`` pairwise with ``combinators``.

        Nests to the right, i.e. ``a + (b ~ c)``, like hand-written nested
        ``combine`` calls.
        """
        if not fragments:
            raise ValueError("At least one selector is required")
        if len(combinators) != len(fragments) - 1:
            raise ValueError(
                f"Expected {len(fragments) - 1} combinators for {len(fragments)} selectors, "
                f"got {len(combinators)}"
            )

        result = fragments[-1]
        for fragment, combinator in zip(reversed(fragments[:-1]), reversed(combinators)):
            result = self.combine(fragment, combinator, result)
        return result


def describe_categories() -> List[dict]:
    """Describe every part category in order, with an example rendering."""
    return [
        {
            "name": category.label,
            "ordinal": int(category),
            "unique": category.unique,
            "example": category.render("value"),
        }
        for category in Category
    ]


css_selector_builder = SelectorBuilder()
