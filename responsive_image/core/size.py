"""Size resolution for URL generation.

Picks the width and height used to request an asset. Precedence, first match
wins:

1. Explicit ``width``/``height`` on the request
2. Measured layout size (fluid requests only), rounded up to ``precision``
3. ``default_width``/``default_height``
4. 1 (a 1x1 placeholder, never a zero-sized or unconstrained asset)

Example:
    >>> request = ImageRequest(src="https://assets.imgix.net/a.jpg")
    >>> resolve_size(request, MeasuredLayout(width=257, height=140))
    ResolvedSize(width=300, height=200)
"""

from __future__ import annotations

import math
from typing import Literal

from responsive_image.components.request import ImageRequest, MeasuredLayout, ResolvedSize

DimensionName = Literal["width", "height"]

_DEFAULT_FIELDS = {
    "width": "default_width",
    "height": "default_height",
}


def round_up_to_precision(size: float, precision: int) -> int:
    """Round ``size`` up to the nearest multiple of ``precision``.

    Args:
        size: Measured size in CSS pixels
        precision: Rounding step (positive)

    Returns:
        Smallest multiple of precision that is >= size
    """
    return precision * math.ceil(size / precision)


def resolve_dimension(
    dim: DimensionName,
    request: ImageRequest,
    measured: MeasuredLayout | None = None,
) -> int | float:
    """Resolve a single dimension for a request.

    Args:
        dim: 'width' or 'height'
        request: Image request
        measured: Layout measured after mount, or None before first measurement

    Returns:
        Positive size to request from the CDN

    Raises:
        ValueError: If dim is not 'width' or 'height'
    """
    if dim not in _DEFAULT_FIELDS:
        raise ValueError(f"dim must be 'width' or 'height', got {dim!r}")

    explicit = getattr(request, dim)
    if explicit:
        return explicit

    measured_value = getattr(measured, dim) if measured is not None else None
    if request.fluid and measured_value:
        return round_up_to_precision(measured_value, request.precision)

    default = getattr(request, _DEFAULT_FIELDS[dim])
    if default:
        return default

    return 1


def resolve_size(
    request: ImageRequest,
    measured: MeasuredLayout | None = None,
) -> ResolvedSize:
    """Resolve both dimensions for a request."""
    return ResolvedSize(
        width=resolve_dimension("width", request, measured),
        height=resolve_dimension("height", request, measured),
    )
