"""Variant base class for output shapes.

Variants are the policy layer of the attribute builder. The builder computes
everything shared (crop, fit, gated URLs, the common attribute base) into a
``BuildContext``; a variant turns that context into a concrete RenderResult
for one ``type``.

Example:
    >>> class Figure(Variant):
    ...     image_type = "figure"
    ...     default_tag = "figure"
    ...     def apply(self, context):
    ...         return RenderResult(
    ...             component_tag=self.tag_for(context.request),
    ...             attributes=context.attributes,
    ...         )
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field

from responsive_image.components.element import RenderResult
from responsive_image.components.request import ImageRequest, ResolvedSize
from responsive_image.core.config import RenderConfig


class BuildContext(BaseModel):
    """Shared state computed once per render, before variant policy runs.

    Attributes:
        request: The request being rendered
        size: Resolved width/height
        src: Primary URL (placeholder while the URL gate is closed)
        srcset: Density srcset, or None while the gate is closed
        gate_open: Whether real URLs were generated
        attributes: Common attribute base; owned by this context
    """

    model_config = {"arbitrary_types_allowed": True}

    request: ImageRequest
    size: ResolvedSize
    src: str
    srcset: str | None = None
    gate_open: bool = False
    attributes: dict[str, Any] = Field(default_factory=dict)


class Variant(ABC):
    """Base class for all output variants.

    Attributes:
        config: Render configuration shared with the builder
    """

    image_type: str = ""
    default_tag: str = ""
    # False for containers whose children carry the URLs
    needs_urls: bool = True

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def tag_for(self, request: ImageRequest) -> str:
        """Return the caller's tag override, or this variant's default tag."""
        return request.component or self.default_tag

    @abstractmethod
    def apply(self, context: BuildContext) -> RenderResult:
        """Produce the variant-specific payload.

        Args:
            context: Shared build state; ``context.attributes`` may be modified

        Returns:
            RenderResult for the host to instantiate
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.image_type!r})"
