"""Attribute builder: turns a request and a resolved size into a RenderResult.

Shared steps run for every variant:

- crop: faces -> entropy -> explicit crop (fixed priority, last writer wins)
- fit: entropy implies 'crop', explicit fit overrides
- URL gate: real URLs only once mounted or with aggressive_load; a 1x1
  placeholder and no srcset otherwise
- URL options, in this order: auto, custom params, crop, fit, width,
  height, ixlib
- common attributes: caller pass-through, ``class`` override, width/height
  only for explicit sizes above 1, alt dropped while the gate is closed

The variant registered for ``request.type`` then applies its own policy.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from responsive_image.components.element import RenderResult
from responsive_image.components.request import ImageRequest, ResolvedSize
from responsive_image.core.config import RenderConfig
from responsive_image.core.urls import UrlBuilder, build_url
from responsive_image.core.variant import BuildContext, Variant
from responsive_image.variants.bg import BgVariant
from responsive_image.variants.img import ImgVariant
from responsive_image.variants.picture import PictureVariant
from responsive_image.variants.source import SourceVariant

logger = logging.getLogger(__name__)

# Extra device pixel ratios emitted in srcset, ascending
DENSITIES = (2, 3)


def resolve_crop(request: ImageRequest) -> str | bool:
    """Resolve the crop parameter: explicit crop > entropy > faces > False."""
    crop: str | bool = False
    if request.faces:
        crop = "faces"
    if request.entropy:
        crop = "entropy"
    if request.crop:
        crop = request.crop
    return crop


def resolve_fit(request: ImageRequest) -> str | bool:
    """Resolve the fit parameter: explicit fit > entropy ('crop') > False.

    Entropy implies fit='crop' even when an explicit crop wins the crop
    resolution.
    """
    fit: str | bool = False
    if request.entropy:
        fit = "crop"
    if request.fit:
        fit = request.fit
    return fit


def default_variants(config: RenderConfig) -> dict[str, Variant]:
    """Variant registry for the four built-in types."""
    variants: list[Variant] = [
        ImgVariant(config),
        BgVariant(config),
        SourceVariant(config),
        PictureVariant(config),
    ]
    return {variant.image_type: variant for variant in variants}


class AttributeBuilder:
    """Build the attribute/child payload for a request.

    Builders hold no per-render state and can be shared between renders and
    instances.

    Attributes:
        config: Construction-time settings (ixlib tag, key prefix, placeholder)
        url_builder: ``build_url(src, options) -> str`` collaborator
        variants: Registry mapping request type to its Variant

    Example:
        >>> builder = AttributeBuilder()
        >>> request = ImageRequest(src="https://assets.imgix.net/a.jpg", width=300)
        >>> result = builder.build(request, resolve_size(request), mounted=True)
        >>> result.component_tag
        'img'
    """

    def __init__(
        self,
        url_builder: UrlBuilder = build_url,
        config: RenderConfig | None = None,
        variants: Mapping[str, Variant] | None = None,
    ) -> None:
        """Create a builder.

        Args:
            url_builder: URL collaborator (default: imgix-style query builder)
            config: Render configuration (default: RenderConfig())
            variants: Extra or replacement variants keyed by type
        """
        self.config = config or RenderConfig()
        self.url_builder = url_builder
        self.variants = default_variants(self.config)
        if variants:
            self.variants.update(variants)

    def url_options(self, request: ImageRequest, size: ResolvedSize) -> dict[str, Any]:
        """Option map handed to the URL builder for the base density."""
        options: dict[str, Any] = {"auto": list(request.auto)}
        options.update(request.custom_params)
        options["crop"] = resolve_crop(request)
        options["fit"] = resolve_fit(request)
        options["width"] = size.width
        options["height"] = size.height
        if not request.disable_library_param:
            options["ixlib"] = self.config.library_param
        return options

    def build_urls(
        self,
        request: ImageRequest,
        size: ResolvedSize,
        mounted: bool,
    ) -> tuple[str, str | None]:
        """Compute the primary URL and the density srcset.

        Returns:
            (primary URL, srcset) or (placeholder, None) while the gate is closed
        """
        if not (mounted or request.aggressive_load):
            return self.config.placeholder_src, None

        options = self.url_options(request, size)
        src = self.url_builder(request.src, options)
        entries = [
            f"{self.url_builder(request.src, {**options, 'dpr': density})} {density}x"
            for density in DENSITIES
        ]
        return src, ", ".join(entries)

    def base_attributes(
        self,
        request: ImageRequest,
        size: ResolvedSize,
        gate_open: bool,
    ) -> dict[str, Any]:
        """Common attribute base shared by every variant."""
        attributes = dict(request.attributes)
        attributes["class"] = request.class_name
        # Only explicit sizes become box attributes
        attributes["width"] = size.width if request.width and size.width > 1 else None
        attributes["height"] = size.height if request.height and size.height > 1 else None
        if not gate_open:
            # Keep screen readers from announcing the placeholder
            attributes.pop("alt", None)
        return {name: value for name, value in attributes.items() if value is not None}

    def build(
        self,
        request: ImageRequest,
        size: ResolvedSize,
        mounted: bool = False,
    ) -> RenderResult:
        """Build the RenderResult for one render pass.

        Args:
            request: Validated image request
            size: Size picked by the size resolver
            mounted: Whether the host has mounted and measured the element

        Returns:
            RenderResult for the request's variant

        Raises:
            ValueError: If no variant is registered for request.type
        """
        variant = self.variants.get(request.type)
        if variant is None:
            raise ValueError(
                f"No variant registered for type {request.type!r}; "
                f"expected one of {sorted(self.variants)}"
            )

        gate_open = mounted or request.aggressive_load
        if variant.needs_urls:
            src, srcset = self.build_urls(request, size, mounted)
        else:
            src, srcset = self.config.placeholder_src, None
        logger.debug(
            "Building %s for %s at %sx%s (gate %s)",
            request.type,
            request.src,
            size.width,
            size.height,
            "open" if gate_open else "closed",
        )

        context = BuildContext(
            request=request,
            size=size,
            src=src,
            srcset=srcset,
            gate_open=gate_open,
            attributes=self.base_attributes(request, size, gate_open),
        )
        result = variant.apply(context)
        attributes = {
            name: value for name, value in result.attributes.items() if value is not None
        }
        return result.model_copy(update={"attributes": attributes})
