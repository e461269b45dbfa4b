"""Tests for the ResponsiveImage lifecycle."""

import pytest

from responsive_image.components.request import ImageRequest, MeasuredLayout
from responsive_image.core.builder import AttributeBuilder
from responsive_image.core.component import ResponsiveImage
from responsive_image.core.urls import EMPTY_IMAGE_SRC

SRC = "https://assets.imgix.net/photo.jpg"


class TestResponsiveImage:
    """Tests for render and mount."""

    def test_initial_render_is_placeholder(self, builder: AttributeBuilder) -> None:
        """Test the first render uses the placeholder."""
        image = ResponsiveImage(ImageRequest(src=SRC), builder=builder)
        result = image.render()
        assert not image.mounted
        assert result.attributes["src"] == EMPTY_IMAGE_SRC
        assert "width" not in result.attributes

    def test_mount_measures_and_rerenders(self, builder: AttributeBuilder, url_builder) -> None:
        """Test mount uses the measured layout for URLs."""
        image = ResponsiveImage(ImageRequest(src=SRC), builder=builder)
        result = image.mount(lambda: MeasuredLayout(width=257, height=140))
        assert image.mounted
        assert image.measured == MeasuredLayout(width=257, height=140)
        assert result.attributes["src"] == f"{SRC}#dpr1"
        assert "width" not in result.attributes
        assert "height" not in result.attributes
        assert url_builder.calls[0][1]["width"] == 300
        assert url_builder.calls[0][1]["height"] == 200

    def test_measure_called_once(self, builder: AttributeBuilder) -> None:
        """Test the measurement provider runs once per mount."""
        calls = []

        def measure() -> MeasuredLayout:
            calls.append(1)
            return MeasuredLayout(width=100, height=100)

        image = ResponsiveImage(ImageRequest(src=SRC), builder=builder)
        image.mount(measure)
        image.render()
        assert calls == [1]

    def test_measure_may_return_none(self, builder: AttributeBuilder, url_builder) -> None:
        """Test a provider without a measurement still mounts."""
        request = ImageRequest(src=SRC, default_width=640)
        image = ResponsiveImage(request, builder=builder)
        result = image.mount(lambda: None)
        assert "width" not in result.attributes
        assert url_builder.calls[0][1]["width"] == 640
        assert result.attributes["src"] == f"{SRC}#dpr1"

    def test_on_mounted_receives_handle(self, builder: AttributeBuilder) -> None:
        """Test the mount callback gets the native handle."""
        handles = []
        image = ResponsiveImage(ImageRequest(src=SRC), builder=builder, on_mounted=handles.append)
        image.mount(lambda: None, handle="node-1")
        assert handles == ["node-1"]

    def test_double_mount(self, builder: AttributeBuilder) -> None:
        """Test mounting twice is rejected."""
        image = ResponsiveImage(ImageRequest(src=SRC), builder=builder)
        image.mount(lambda: None)
        with pytest.raises(RuntimeError, match="already mounted"):
            image.mount(lambda: None)

    def test_explicit_size_ignores_measurement(self, builder: AttributeBuilder) -> None:
        """Test explicit sizes win over the measured layout."""
        image = ResponsiveImage(ImageRequest(src=SRC, width=800, height=600), builder=builder)
        image.mount(lambda: MeasuredLayout(width=257, height=140))
        size = image.resolved_size()
        assert (size.width, size.height) == (800, 600)

    def test_default_builder(self) -> None:
        """Test a default builder is created."""
        image = ResponsiveImage(ImageRequest(src=SRC))
        assert isinstance(image.builder, AttributeBuilder)

    def test_independent_instances(self, builder: AttributeBuilder) -> None:
        """Test instances sharing a builder do not share state."""
        first = ResponsiveImage(ImageRequest(src=SRC), builder=builder)
        second = ResponsiveImage(ImageRequest(src=SRC), builder=builder)
        first.mount(lambda: MeasuredLayout(width=500, height=500))
        assert not second.mounted
        assert second.render().attributes["src"] == EMPTY_IMAGE_SRC
