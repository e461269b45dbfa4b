"""Host node components: Element and the RenderResult payload."""

from typing import Any

from pydantic import BaseModel, Field


class Element(BaseModel):
    """Opaque host element passed around as a child node.

    Elements are what a caller nests inside a ``picture`` request (``<source>``
    and ``<img>`` tags, or anything else the host understands). The engine only
    ever inspects ``tag`` and ``key``.

    Attributes:
        tag: Element tag name (e.g. 'img', 'source')
        attributes: HTML attributes for the element
        children: Nested child nodes (Elements, ImageRequests or text)
        key: List identity used by the host when rendering siblings
    """

    model_config = {"frozen": True}

    tag: str = Field(min_length=1)
    attributes: dict[str, Any] = Field(default_factory=dict)
    children: list[Any] = Field(default_factory=list)
    key: str | None = None


class RenderResult(BaseModel):
    """Concrete, variant-specific output of a single render pass.

    Attributes:
        component_tag: Tag the host should instantiate
        attributes: Final attribute map (``None`` values already dropped)
        children: Ordered child nodes
    """

    model_config = {"frozen": True}

    component_tag: str
    attributes: dict[str, Any] = Field(default_factory=dict)
    children: list[Any] = Field(default_factory=list)
