"""Request components: ImageRequest, MeasuredLayout, ResolvedSize."""

from __future__ import annotations

from typing import Any, Literal, Mapping, Union

from pydantic import (
    BaseModel,
    Field,
    NonNegativeFloat,
    NonNegativeInt,
    PositiveFloat,
    PositiveInt,
    ValidationError,
)

from responsive_image.components.element import Element

ImageType = Literal["img", "bg", "source", "picture"]

VALID_TYPES: tuple[str, ...] = ("img", "bg", "source", "picture")

# Ints stay ints so generated URLs read w=300, not w=300.0
Dimension = Union[PositiveInt, PositiveFloat]
Measurement = Union[NonNegativeInt, NonNegativeFloat]


class ImageRequest(BaseModel):
    """Declarative description of one responsive image.

    Immutable for the duration of a render. Defaults follow the imgix
    conventions: face-aware crop, ``fit=crop``, ``auto=format``, fluid sizing
    rounded up to 100px steps and a generated 2x/3x srcset.

    Attributes:
        src: CDN source path or URL (required, non-empty)
        type: Output variant, one of 'img', 'bg', 'source', 'picture'
        width: Explicit width, wins over everything else
        height: Explicit height, wins over everything else
        default_width: Width used when nothing better is known
        default_height: Height used when nothing better is known
        fluid: Derive size from the measured layout when available
        precision: Rounding step for fluid sizes (always rounds up)
        crop: Explicit crop mode, overrides faces/entropy
        fit: Explicit fit mode, overrides the entropy default
        faces: Face-aware cropping
        entropy: Entropy-based cropping (implies fit='crop')
        aggressive_load: Emit real URLs before the layout is measured
        generate_srcset: Emit a 2x/3x srcset
        disable_library_param: Leave the ixlib tag out of generated URLs
        auto: Values for the imgix ``auto`` parameter
        custom_params: Extra query parameters merged into every URL
        attributes: Pass-through HTML attributes (alt, sizes, media, style...)
        class_name: Value for the ``class`` attribute
        component: Tag override for the rendered element
        key: List identity when nested inside a picture
        children: Child nodes, only used by the 'picture' variant
    """

    model_config = {"frozen": True, "extra": "forbid"}

    src: str = Field(min_length=1)
    type: ImageType = "img"

    width: Dimension | None = None
    height: Dimension | None = None
    default_width: Dimension | None = None
    default_height: Dimension | None = None
    fluid: bool = True
    precision: PositiveInt = 100

    crop: str | None = None
    fit: str | None = "crop"
    faces: bool = True
    entropy: bool = False

    aggressive_load: bool = False
    generate_srcset: bool = True
    disable_library_param: bool = False

    auto: list[str] = Field(default_factory=lambda: ["format"])
    custom_params: dict[str, Any] = Field(default_factory=dict)
    attributes: dict[str, Any] = Field(default_factory=dict)
    class_name: str | None = None
    component: str | None = None
    key: str | None = None
    children: list[Union[Element, ImageRequest]] = Field(default_factory=list)


class MeasuredLayout(BaseModel):
    """Layout size reported by the host after mount, in CSS pixels."""

    model_config = {"frozen": True}

    width: Measurement = 0
    height: Measurement = 0


class ResolvedSize(BaseModel):
    """Width/height picked for URL generation. Never zero."""

    model_config = {"frozen": True}

    width: Dimension = 1
    height: Dimension = 1


def validate_request(data: Mapping[str, Any]) -> list[str]:
    """Check request fields without raising.

    Args:
        data: Raw request fields, as they would be passed to ImageRequest

    Returns:
        List of human readable problems; empty when the request is valid
    """
    try:
        ImageRequest.model_validate(dict(data))
    except ValidationError as exc:
        problems = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"]) or "request"
            problems.append(f"{location}: {error['msg']}")
        return problems
    return []
