"""Shared fixtures."""

from typing import Any, Mapping

import pytest

from responsive_image.core.builder import AttributeBuilder
from responsive_image.core.config import RenderConfig


class RecordingUrlBuilder:
    """URL builder double that records every options map it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def __call__(self, src: str, options: Mapping[str, Any]) -> str:
        self.calls.append((src, dict(options)))
        dpr = options.get("dpr", 1)
        return f"{src}#dpr{dpr}"


@pytest.fixture
def config() -> RenderConfig:
    """Config with a fixed library tag."""
    return RenderConfig(library_param="python-test")


@pytest.fixture
def url_builder() -> RecordingUrlBuilder:
    """Recording URL builder."""
    return RecordingUrlBuilder()


@pytest.fixture
def builder(url_builder: RecordingUrlBuilder, config: RenderConfig) -> AttributeBuilder:
    """Attribute builder wired to the recording URL builder."""
    return AttributeBuilder(url_builder=url_builder, config=config)

