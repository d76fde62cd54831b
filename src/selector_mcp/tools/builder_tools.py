"""MCP tools for building CSS selectors."""

import time
from typing import Annotated, Any, Dict, List, Optional

from pydantic import Field

from ..builder import COMBINATORS, SelectorFragment, css_selector_builder
from ..builder import describe_categories
from ..config import SelectorMCPConfig
from ..utils.errors import SelectorBuildError, ToolExecutionError, format_build_errors
from ..utils.logging_config import (
    get_logger,
    log_build_result,
    log_tool_completion,
    log_tool_execution,
)

PartList = List[Dict[str, str]]


class _RejectedSelector(Exception):
    """Carries an error result out of a nested build."""

    def __init__(self, result: Dict[str, Any]):
        super().__init__(result["error"])
        self.result = result


def _error_result(
    error: str, error_type: str, part_index: Optional[int] = None, **extra: Any
) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        "valid": False,
        "selector": None,
        "error": error,
        "error_type": error_type,
        "part_index": part_index,
    }
    result.update(extra)
    return result


def _build(parts: PartList, max_parts: int) -> SelectorFragment:
    """Apply ``parts`` to the empty fragment, raising _RejectedSelector on misuse."""
    if len(parts) > max_parts:
        raise _RejectedSelector(
            _error_result(
                f"Selector has {len(parts)} parts, the limit is {max_parts}", "LimitExceeded"
            )
        )

    pairs = [(part.get("kind", ""), part.get("value", "")) for part in parts]
    try:
        fragment = css_selector_builder.from_parts(pairs)
    except SelectorBuildError as e:
        part_index = e.details.get("part_index")
        log_build_result(e.selector, part_index or 0, e.message)
        raise _RejectedSelector(
            _error_result(
                format_build_errors([e]),
                type(e).__name__,
                part_index,
                partial_selector=e.selector,
            )
        )

    log_build_result(fragment.text, len(pairs))
    return fragment


def register_builder_tools(mcp: Any, config: SelectorMCPConfig) -> None:
    """Register all selector builder tools with the MCP server."""

    limits = config.builder
    logger = get_logger("builder_tools")

    @mcp.tool()
    async def build_selector(
        parts: Annotated[
            PartList,
            Field(
                description=(
                    "Ordered selector parts, each an object with 'kind' (element, id, class, "
                    "attr, pseudo_class or pseudo_element) and 'value'. Parts must follow the "
                    "order element, id, class, attr, pseudo_class, pseudo_element; element, id "
                    "and pseudo_element may appear once."
                ),
            ),
        ],
    ) -> Dict[str, Any]:
        """
        Build a compound CSS selector from ordered parts.

        Args:
            parts: List of {"kind": ..., "value": ...} objects

        Returns:
            Dictionary with the selector or the reason it was rejected
        """
        start_time = time.time()
        tool_name = "build_selector"

        try:
            log_tool_execution(tool_name, {"part_count": len(parts)})

            try:
                fragment = _build(parts, limits.max_parts)
            except _RejectedSelector as rejected:
                log_tool_completion(tool_name, True, time.time() - start_time)
                return rejected.result

            response = {
                "valid": True,
                "selector": fragment.stringify(),
                "stage": int(fragment.stage),
                "part_count": len(parts),
            }

            log_tool_completion(tool_name, True, time.time() - start_time)
            return response

        except Exception as e:
            duration = time.time() - start_time
            error_msg = f"Selector build failed: {str(e)}"
            log_tool_completion(tool_name, False, duration, error_msg)
            raise ToolExecutionError(tool_name, error_msg)

    @mcp.tool()
    async def combine_selectors(
        selectors: Annotated[
            List[PartList],
            Field(
                description="Two or more selectors, each given as a list of parts as for build_selector.",
                min_length=2,
            ),
        ],
        combinators: Annotated[
            List[str],
            Field(
                description=(
                    "Combinators placed between consecutive selectors: ' ' (descendant), "
                    "'>' (child), '+' (adjacent sibling) or '~' (general sibling). "
                    "Must have one entry fewer than selectors."
                ),
            ),
        ],
    ) -> Dict[str, Any]:
        """
        Combine several compound selectors into one complex selector.

        Args:
            selectors: Part lists for each compound selector
            combinators: Combinators between consecutive selectors

        Returns:
            Dictionary with the combined selector or the reason it was rejected
        """
        start_time = time.time()
        tool_name = "combine_selectors"

        try:
            log_tool_execution(
                tool_name,
                {"selector_count": len(selectors), "combinators": combinators},
            )

            if len(selectors) > limits.max_selectors:
                log_tool_completion(tool_name, True, time.time() - start_time)
                return _error_result(
                    f"Got {len(selectors)} selectors, the limit is {limits.max_selectors}",
                    "LimitExceeded",
                )

            if len(combinators) != len(selectors) - 1:
                log_tool_completion(tool_name, True, time.time() - start_time)
                return _error_result(
                    f"Expected {len(selectors) - 1} combinators, got {len(combinators)}",
                    "CombinatorMismatch",
                )

            unusual = [c for c in combinators if c not in COMBINATORS]
            if unusual:
                logger.warning(f"Non-standard combinators used: {unusual}")

            fragments = []
            for position, parts in enumerate(selectors):
                try:
                    fragments.append(_build(parts, limits.max_parts))
                except _RejectedSelector as rejected:
                    log_tool_completion(tool_name, True, time.time() - start_time)
                    return {**rejected.result, "selector_index": position}

            combined = css_selector_builder.combine_all(fragments, combinators)

            log_tool_completion(tool_name, True, time.time() - start_time)
            return {
                "valid": True,
                "selector": combined.stringify(),
                "selector_count": len(fragments),
            }

        except Exception as e:
            duration = time.time() - start_time
            error_msg = f"Selector combination failed: {str(e)}"
            log_tool_completion(tool_name, False, duration, error_msg)
            raise ToolExecutionError(tool_name, error_msg)

    @mcp.tool()
    async def describe_selector_grammar() -> Dict[str, Any]:
        """
        Describe the accepted selector parts and combinators.

        Returns:
            Dictionary with the part categories in required order and the combinators
        """
        start_time = time.time()
        tool_name = "describe_selector_grammar"

        log_tool_execution(tool_name, {})
        response = {
            "categories": describe_categories(),
            "order": "element, id, class, attribute, pseudo-class, pseudo-element",
            "combinators": list(COMBINATORS),
            "limits": {
                "max_parts": limits.max_parts,
                "max_selectors": limits.max_selectors,
            },
        }

        log_tool_completion(tool_name, True, time.time() - start_time)
        return response
