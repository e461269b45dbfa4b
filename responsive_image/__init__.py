"""Responsive image attribute resolution for imgix-style CDNs.

This package renders one logical "responsive image" as a concrete element
payload:
- ``img``: an image element with ``src`` and a 2x/3x ``srcset``
- ``bg``: a block container with a ``background-image`` style
- ``source``: a ``<source>`` element for use inside a picture
- ``picture``: a container whose fallback ``<img>`` is moved last

URLs are gated on mount: before the layout is measured a 1x1 placeholder is
used, unless the request opts into ``aggressive_load``.

Quick Start:
    >>> from responsive_image import render, render_html
    >>>
    >>> result = render("https://assets.imgix.net/a.jpg", width=300, height=200, mounted=True)
    >>> result.attributes["srcset"]
    '...&dpr=2 2x, ...&dpr=3 3x'
    >>> render_html("https://assets.imgix.net/a.jpg", type="bg", aggressive_load=True)

For the mount lifecycle, use ResponsiveImage:
    >>> from responsive_image import ImageRequest, MeasuredLayout, ResponsiveImage
    >>>
    >>> image = ResponsiveImage(ImageRequest(src="https://assets.imgix.net/a.jpg"))
    >>> image.render()  # placeholder
    >>> image.mount(lambda: MeasuredLayout(width=257, height=140))  # w=300&h=200
"""

from responsive_image._version import __version__
from responsive_image.api import render, render_html
from responsive_image.components.element import Element, RenderResult
from responsive_image.components.request import (
    ImageRequest,
    MeasuredLayout,
    ResolvedSize,
    validate_request,
)
from responsive_image.core.builder import AttributeBuilder, resolve_crop, resolve_fit
from responsive_image.core.component import ResponsiveImage
from responsive_image.core.config import RenderConfig, load_config
from responsive_image.core.markup import to_html
from responsive_image.core.size import resolve_dimension, resolve_size
from responsive_image.core.urls import EMPTY_IMAGE_SRC, build_url

__all__ = [
    "__version__",
    "render",
    "render_html",
    "AttributeBuilder",
    "Element",
    "EMPTY_IMAGE_SRC",
    "ImageRequest",
    "MeasuredLayout",
    "RenderConfig",
    "RenderResult",
    "ResolvedSize",
    "ResponsiveImage",
    "build_url",
    "load_config",
    "resolve_crop",
    "resolve_dimension",
    "resolve_fit",
    "resolve_size",
    "to_html",
    "validate_request",
]
