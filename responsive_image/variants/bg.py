"""CSS background variant."""

from __future__ import annotations

from typing import Any

from responsive_image.components.element import RenderResult
from responsive_image.core.variant import BuildContext, Variant


def background_style(src: str, caller_style: Any = None) -> dict[str, Any] | str:
    """Build the background style, letting the caller's style win.

    Args:
        src: Primary URL
        caller_style: Style supplied by the caller, as a dict or a CSS string

    Returns:
        A dict when the caller style is a dict (or absent), else a CSS string
        with the caller's declarations last
    """
    style: dict[str, Any] = {"background-size": "cover"}
    if isinstance(src, str) and src:
        style["background-image"] = f"url('{src}')"

    if isinstance(caller_style, str):
        declarations = "; ".join(f"{name}: {value}" for name, value in style.items())
        caller_css = caller_style.strip()
        return f"{declarations}; {caller_css}" if caller_css else declarations

    if caller_style:
        style.update(caller_style)
    return style


class BgVariant(Variant):
    """Render as a block container with a ``background-image`` style."""

    image_type = "bg"
    default_tag = "div"

    def apply(self, context: BuildContext) -> RenderResult:
        attributes = context.attributes
        # width/height are not valid on a block container
        attributes.pop("width", None)
        attributes.pop("height", None)
        attributes["style"] = background_style(context.src, attributes.get("style"))
        return RenderResult(
            component_tag=self.tag_for(context.request),
            attributes=attributes,
            children=list(context.request.children),
        )
