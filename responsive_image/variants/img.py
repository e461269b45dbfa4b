"""Plain image element variant."""

from __future__ import annotations

from responsive_image.components.element import RenderResult
from responsive_image.core.variant import BuildContext, Variant


class ImgVariant(Variant):
    """Render as an ``<img>`` element.

    ``src`` is always the primary URL; ``srcset`` is added when the request
    asks for one and the URL gate is open.
    """

    image_type = "img"
    default_tag = "img"

    def apply(self, context: BuildContext) -> RenderResult:
        attributes = context.attributes
        if context.request.generate_srcset and context.srcset:
            attributes["srcset"] = context.srcset
        attributes["src"] = context.src
        return RenderResult(
            component_tag=self.tag_for(context.request),
            attributes=attributes,
        )
