"""Tests for the bg variant."""

from responsive_image.components.element import Element
from responsive_image.components.request import ImageRequest, ResolvedSize
from responsive_image.core.builder import AttributeBuilder
from responsive_image.core.urls import EMPTY_IMAGE_SRC
from responsive_image.variants.bg import background_style

SRC = "https://assets.imgix.net/photo.jpg"
SIZE = ResolvedSize(width=300, height=200)


class TestBackgroundStyle:
    """Tests for background_style."""

    def test_sets_image(self) -> None:
        """Test a non-empty src becomes a background image."""
        assert background_style("a.jpg") == {
            "background-size": "cover",
            "background-image": "url('a.jpg')",
        }

    def test_empty_src(self) -> None:
        """Test an empty src sets no background image."""
        assert background_style("") == {"background-size": "cover"}

    def test_caller_dict_wins(self) -> None:
        """Test caller style entries override and extend the defaults."""
        style = background_style("a.jpg", {"background-size": "contain", "color": "red"})
        assert style == {
            "background-size": "contain",
            "background-image": "url('a.jpg')",
            "color": "red",
        }

    def test_caller_css_string(self) -> None:
        """Test a CSS string is appended after the defaults."""
        style = background_style("a.jpg", "color: red;")
        assert style == "background-size: cover; background-image: url('a.jpg'); color: red;"


class TestBgVariant:
    """Tests for BgVariant."""

    def test_mounted(self, builder: AttributeBuilder) -> None:
        """Test div tag and background URL after mount."""
        result = builder.build(ImageRequest(src=SRC, type="bg"), SIZE, mounted=True)
        assert result.component_tag == "div"
        assert "src" not in result.attributes
        assert "srcset" not in result.attributes
        assert result.attributes["style"]["background-image"] == f"url('{SRC}#dpr1')"

    def test_before_mount_uses_placeholder(self, builder: AttributeBuilder) -> None:
        """Test the placeholder is used as background before mount."""
        result = builder.build(ImageRequest(src=SRC, type="bg"), SIZE)
        assert result.attributes["style"]["background-image"] == f"url('{EMPTY_IMAGE_SRC}')"

    def test_no_size_attributes(self, builder: AttributeBuilder) -> None:
        """Test explicit or default sizes never become div attributes."""
        for request in (
            ImageRequest(src=SRC, type="bg", width=300, height=200),
            ImageRequest(src=SRC, type="bg", default_width=640, default_height=480),
        ):
            attributes = builder.build(request, SIZE, mounted=True).attributes
            assert "width" not in attributes
            assert "height" not in attributes

    def test_keeps_alt(self, builder: AttributeBuilder) -> None:
        """Test alt is kept once the gate is open."""
        request = ImageRequest(src=SRC, type="bg", attributes={"alt": "Sky"})
        assert builder.build(request, SIZE, mounted=True).attributes["alt"] == "Sky"

    def test_keeps_children(self, builder: AttributeBuilder) -> None:
        """Test content children are passed through."""
        child = Element(tag="h1", children=["Title"])
        request = ImageRequest(src=SRC, type="bg", children=[child])
        assert builder.build(request, SIZE).children == [child]
