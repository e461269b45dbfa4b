"""Tests for the default URL builder."""

import base64

from responsive_image.core.urls import EMPTY_IMAGE_SRC, build_url, format_value

SRC = "https://assets.imgix.net/photo.jpg"


class TestFormatValue:
    """Tests for parameter value formatting."""

    def test_true(self) -> None:
        """Test True renders as 'true'."""
        assert format_value(True) == "true"

    def test_integral_float(self) -> None:
        """Test integral floats drop the decimal point."""
        assert format_value(300.0) == "300"
        assert format_value(2.5) == "2.5"

    def test_list(self) -> None:
        """Test lists are comma-joined."""
        assert format_value(["format", "compress"]) == "format,compress"


class TestBuildUrl:
    """Tests for build_url."""

    def test_empty_src(self) -> None:
        """Test an empty src yields an empty URL."""
        assert build_url("", {"width": 100}) == ""

    def test_expands_size_keys(self) -> None:
        """Test width/height map to w/h in insertion order."""
        url = build_url(SRC, {"width": 300, "height": 200})
        assert url == f"{SRC}?w=300&h=200"

    def test_full_option_map(self) -> None:
        """Test a typical option map."""
        options = {
            "auto": ["format"],
            "crop": "faces",
            "fit": "crop",
            "width": 300,
            "height": 200,
            "ixlib": "python-0.1.0",
        }
        url = build_url(SRC, options)
        assert url == f"{SRC}?auto=format&crop=faces&fit=crop&w=300&h=200&ixlib=python-0.1.0"

    def test_skips_empty_values(self) -> None:
        """Test None, False and empty values are skipped but 0 is kept."""
        url = build_url(SRC, {"crop": False, "fit": None, "txt": "", "auto": [], "q": 0})
        assert url == f"{SRC}?q=0"

    def test_no_params_returns_src(self) -> None:
        """Test src is returned unchanged without parameters."""
        assert build_url(SRC, {}) == SRC

    def test_existing_query(self) -> None:
        """Test parameters are appended to an existing query string."""
        assert build_url(f"{SRC}?v=2", {"width": 10}) == f"{SRC}?v=2&w=10"

    def test_escapes_values(self) -> None:
        """Test values are percent-encoded."""
        url = build_url(SRC, {"txt": "hello world & more"})
        assert url == f"{SRC}?txt=hello%20world%20%26%20more"

    def test_base64_params(self) -> None:
        """Test keys ending in 64 carry URL-safe base64 without padding."""
        url = build_url(SRC, {"txt64": "Hello?"})
        expected = base64.urlsafe_b64encode(b"Hello?").decode().rstrip("=")
        assert url == f"{SRC}?txt64={expected}"

    def test_does_not_mutate_options(self) -> None:
        """Test the options map is left untouched."""
        options = {"width": 300.0, "auto": ["format"]}
        snapshot = {"width": 300.0, "auto": ["format"]}
        build_url(SRC, options)
        assert options == snapshot

    def test_idempotent(self) -> None:
        """Test the same input yields the same output."""
        options = {"width": 300, "dpr": 2}
        assert build_url(SRC, options) == build_url(SRC, options)


class TestPlaceholder:
    """Tests for the placeholder image."""

    def test_is_gif_data_uri(self) -> None:
        """Test the placeholder is an inline GIF."""
        assert EMPTY_IMAGE_SRC.startswith("data:image/gif;base64,")
        payload = base64.b64decode(EMPTY_IMAGE_SRC.split(",", 1)[1])
        assert payload.startswith(b"GIF89a")
