"""ResponsiveImage: the render/mount lifecycle around the builder.

The host renders once before layout is known (placeholder URL unless
``aggressive_load``), then calls ``mount()`` exactly once with a measurement
provider. Mounting stores the measured layout and returns the re-render with
real, size-aware URLs.

Example:
    >>> image = ResponsiveImage(ImageRequest(src="https://assets.imgix.net/a.jpg"))
    >>> first = image.render()          # placeholder
    >>> second = image.mount(lambda: MeasuredLayout(width=257, height=140))
    >>> "w=300&h=200" in second.attributes["src"]
    True
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from responsive_image.components.element import RenderResult
from responsive_image.components.request import ImageRequest, MeasuredLayout, ResolvedSize
from responsive_image.core.builder import AttributeBuilder
from responsive_image.core.size import resolve_size

logger = logging.getLogger(__name__)

MeasurementProvider = Callable[[], MeasuredLayout | None]
MountCallback = Callable[[Any], None]


class ResponsiveImage:
    """One responsive image instance and its mount state.

    Attributes:
        request: Immutable image request
        builder: Attribute builder (shared builders are fine)
        measured: Layout reported at mount, None before mount
    """

    def __init__(
        self,
        request: ImageRequest,
        builder: AttributeBuilder | None = None,
        on_mounted: MountCallback | None = None,
    ) -> None:
        """Create an unmounted instance.

        Args:
            request: Image request to render
            builder: Attribute builder (default: AttributeBuilder())
            on_mounted: Called with the host handle once mounted
        """
        self.request = request
        self.builder = builder or AttributeBuilder()
        self.on_mounted = on_mounted
        self.measured: MeasuredLayout | None = None
        self._mounted = False

    @property
    def mounted(self) -> bool:
        return self._mounted

    def resolved_size(self) -> ResolvedSize:
        """Size for the current state (measured layout once mounted)."""
        return resolve_size(self.request, self.measured)

    def render(self) -> RenderResult:
        """Render with the current mount state."""
        return self.builder.build(self.request, self.resolved_size(), mounted=self._mounted)

    def mount(self, measure: MeasurementProvider, handle: Any = None) -> RenderResult:
        """Measure once, mark mounted, notify, and re-render.

        Args:
            measure: Provider returning the measured layout (or None)
            handle: Native handle passed to the on_mounted callback

        Returns:
            RenderResult for the mounted state

        Raises:
            RuntimeError: If the instance is already mounted
        """
        if self._mounted:
            raise RuntimeError(f"{self!r} is already mounted")

        self.measured = measure()
        self._mounted = True
        logger.debug("Mounted %s with layout %s", self.request.src, self.measured)

        if self.on_mounted is not None:
            self.on_mounted(handle)
        return self.render()

    def __repr__(self) -> str:
        return f"ResponsiveImage(src={self.request.src!r}, type={self.request.type!r})"
