"""``<picture>`` variant with fallback reordering.

A picture needs exactly one ``<img>`` fallback, positioned after every
``<source>``, or legacy renderers show nothing. The variant copies the
caller's children, keys them, and moves the first fallback candidate to the
end. It never generates a URL of its own; nested image requests do that.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from responsive_image.components.element import Element, RenderResult
from responsive_image.components.request import ImageRequest
from responsive_image.core.variant import BuildContext, Variant

logger = logging.getLogger(__name__)

MISSING_FALLBACK_MESSAGE = (
    "No fallback image found in the children of a <picture> component. "
    "A fallback image should be passed to ensure the image renders correctly "
    "at all dimensions."
)


def build_key(prefix: str, index: int) -> str:
    """Synthetic key for the child at ``index``."""
    return f"{prefix}-{index}"


def assign_keys(children: Sequence[Any], prefix: str) -> list[Any]:
    """Return a copy of ``children`` where every keyable node has a key.

    Nodes that already carry a key keep it. Nodes are copied, not mutated.
    """
    keyed = []
    for index, child in enumerate(children):
        if isinstance(child, (Element, ImageRequest)) and child.key is None:
            child = child.model_copy(update={"key": build_key(prefix, index)})
        keyed.append(child)
    return keyed


def is_fallback_image(node: Any) -> bool:
    """True for a native ``<img>`` element or a nested img-type request."""
    if isinstance(node, Element):
        return node.tag == "img"
    if isinstance(node, ImageRequest):
        return node.type == "img"
    return False


def find_fallback_index(children: Sequence[Any]) -> int:
    """Index of the first fallback image, or -1 when there is none."""
    for index, child in enumerate(children):
        if is_fallback_image(child):
            return index
    return -1


def move_fallback_last(children: Sequence[Any]) -> list[Any]:
    """Return a copy of ``children`` with the fallback image moved to the end.

    Only the fallback moves; every other child keeps its relative order. When
    no fallback exists the order is unchanged and a warning is logged.
    """
    ordered = list(children)
    index = find_fallback_index(ordered)
    if index == -1:
        logger.warning(MISSING_FALLBACK_MESSAGE)
    elif index != len(ordered) - 1:
        ordered.append(ordered.pop(index))
    return ordered


class PictureVariant(Variant):
    """Render as a ``<picture>`` container around its children."""

    image_type = "picture"
    default_tag = "picture"
    needs_urls = False

    def apply(self, context: BuildContext) -> RenderResult:
        attributes = context.attributes
        attributes.pop("alt", None)
        # width/height are not valid on <picture>
        attributes.pop("width", None)
        attributes.pop("height", None)

        children = assign_keys(context.request.children, self.config.key_prefix)
        children = move_fallback_last(children)
        return RenderResult(
            component_tag=self.tag_for(context.request),
            attributes=attributes,
            children=children,
        )
