"""``<source>`` element variant, for use inside a picture."""

from __future__ import annotations

from responsive_image.components.element import RenderResult
from responsive_image.core.variant import BuildContext, Variant


class SourceVariant(Variant):
    """Render as a ``<source>`` element.

    Inside ``<picture>`` a source ignores ``src`` in favor of ``srcset``, so the
    primary URL always goes into ``srcset``, followed by the density variants
    when the request asks for them.
    """

    image_type = "source"
    default_tag = "source"

    def apply(self, context: BuildContext) -> RenderResult:
        attributes = context.attributes
        # alt is not a valid attribute on <source>
        attributes.pop("alt", None)

        if context.request.generate_srcset and context.srcset:
            attributes["srcset"] = f"{context.src}, {context.srcset}"
        else:
            attributes["srcset"] = context.src
        return RenderResult(
            component_tag=self.tag_for(context.request),
            attributes=attributes,
        )
