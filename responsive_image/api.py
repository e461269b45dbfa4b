"""High-level API for rendering responsive images.

Provides one-call render() and render_html() helpers that validate the
request, resolve its size, and build the result.
"""

from __future__ import annotations

from typing import Any

from responsive_image.components.element import RenderResult
from responsive_image.components.request import ImageRequest, MeasuredLayout
from responsive_image.core.builder import AttributeBuilder
from responsive_image.core.config import load_config
from responsive_image.core.markup import to_html
from responsive_image.core.size import resolve_size
from responsive_image.core.urls import UrlBuilder, build_url


def _builder(config_path: str | None, url_builder: UrlBuilder | None) -> AttributeBuilder:
    return AttributeBuilder(url_builder=url_builder or build_url, config=load_config(config_path))


def render(
    src: str,
    *,
    mounted: bool = False,
    measured: MeasuredLayout | None = None,
    config_path: str | None = None,
    url_builder: UrlBuilder | None = None,
    **fields: Any,
) -> RenderResult:
    """Render a responsive image in one call.

    Args:
        src: CDN source URL or path
        mounted: Whether the element has been mounted and measured
        measured: Layout measured by the host (used by fluid requests)
        config_path: Path to responsive_image.toml (auto-detected if None)
        url_builder: URL collaborator (default: imgix-style query builder)
        **fields: Remaining ImageRequest fields (type, width, crop, ...)

    Returns:
        RenderResult for the request

    Raises:
        pydantic.ValidationError: If src is empty or a field is invalid
        FileNotFoundError: If an explicit config file does not exist

    Example:
        >>> result = render("https://assets.imgix.net/a.jpg", width=300, aggressive_load=True)
        >>> result.attributes["src"]
        'https://assets.imgix.net/a.jpg?auto=format&crop=faces&fit=crop&w=300&h=1&ixlib=python-0.1.0'
    """
    request = ImageRequest(src=src, **fields)
    builder = _builder(config_path, url_builder)
    return builder.build(request, resolve_size(request, measured), mounted=mounted)


def render_html(
    src: str,
    *,
    mounted: bool = False,
    measured: MeasuredLayout | None = None,
    config_path: str | None = None,
    url_builder: UrlBuilder | None = None,
    **fields: Any,
) -> str:
    """Render a responsive image straight to HTML markup.

    Takes the same arguments as render(). Nested picture children are built
    with the same builder and mount state, sized from ``measured``.
    """
    request = ImageRequest(src=src, **fields)
    builder = _builder(config_path, url_builder)
    result = builder.build(request, resolve_size(request, measured), mounted=mounted)
    return to_html(result, builder, mounted=mounted, measured=measured)
