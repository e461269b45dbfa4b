"""HTML serialization of render results."""

from __future__ import annotations

from html import escape
from typing import Any, Mapping

from responsive_image.components.element import Element, RenderResult
from responsive_image.components.request import ImageRequest, MeasuredLayout
from responsive_image.core.builder import AttributeBuilder
from responsive_image.core.size import resolve_size
from responsive_image.core.urls import format_value

VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)


def format_style(style: Mapping[str, Any]) -> str:
    """Serialize a style dict to inline CSS, skipping None values."""
    return "; ".join(
        f"{name}: {format_value(value)}" for name, value in style.items() if value is not None
    )


def format_attributes(attributes: Mapping[str, Any]) -> str:
    """Serialize attributes; True renders bare, None/False are omitted."""
    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {escape(name)}")
            continue
        if isinstance(value, Mapping):
            text = format_style(value)
        else:
            text = format_value(value)
        parts.append(f' {escape(name)}="{escape(text, quote=True)}"')
    return "".join(parts)


def _render_tag(tag: str, attributes: Mapping[str, Any], inner: str) -> str:
    opening = f"<{tag}{format_attributes(attributes)}>"
    if tag in VOID_TAGS:
        return opening
    return f"{opening}{inner}</{tag}>"


def to_html(
    result: RenderResult,
    builder: AttributeBuilder | None = None,
    mounted: bool = False,
    measured: MeasuredLayout | None = None,
) -> str:
    """Serialize a RenderResult and its children to HTML.

    Nested ImageRequest children are built with ``builder``, sized from the
    parent's ``measured`` layout. A nested child that still resolves to 1x1
    keeps the placeholder unless it opts into aggressive_load.

    Args:
        result: Render result to serialize
        builder: Builder for nested requests (default: AttributeBuilder())
        mounted: Mount state used for nested requests
        measured: Parent layout used to size nested fluid requests

    Returns:
        HTML markup
    """
    builder = builder or AttributeBuilder()
    inner = "".join(_node_to_html(child, builder, mounted, measured) for child in result.children)
    return _render_tag(result.component_tag, result.attributes, inner)


def _node_to_html(
    node: Any,
    builder: AttributeBuilder,
    mounted: bool,
    measured: MeasuredLayout | None,
) -> str:
    if isinstance(node, ImageRequest):
        size = resolve_size(node, measured)
        # An unsized child would request a 1x1 asset
        nested_mounted = mounted and (size.width > 1 or size.height > 1)
        nested = builder.build(node, size, mounted=nested_mounted)
        return to_html(nested, builder, mounted, measured)
    if isinstance(node, Element):
        inner = "".join(_node_to_html(child, builder, mounted, measured) for child in node.children)
        return _render_tag(node.tag, node.attributes, inner)
    if isinstance(node, RenderResult):
        return to_html(node, builder, mounted, measured)
    return escape(str(node))
