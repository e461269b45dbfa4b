"""Quickstart: render the same image as img, bg, and picture markup.

Usage:
    python examples/quickstart.py
    python examples/quickstart.py --src https://assets.imgix.net/unsplash/bridge.jpg --width 640
"""

from __future__ import annotations

import argparse
import logging

from responsive_image import (
    AttributeBuilder,
    Element,
    ImageRequest,
    MeasuredLayout,
    ResponsiveImage,
    load_config,
    render_html,
    to_html,
)


def main() -> None:
    parser = argparse.ArgumentParser(description="Render responsive image markup")
    parser.add_argument("--src", default="https://assets.imgix.net/unsplash/bridge.jpg")
    parser.add_argument("--width", type=int, default=None, help="Measured layout width")
    parser.add_argument("--height", type=int, default=None, help="Measured layout height")
    parser.add_argument("--config", default=None, help="Path to responsive_image.toml")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=== img, before mount ===")
    builder = AttributeBuilder(config=load_config(args.config))
    image = ResponsiveImage(ImageRequest(src=args.src, attributes={"alt": "Bridge"}), builder=builder)
    print(to_html(image.render(), builder))

    print("\n=== img, after mount ===")
    layout = MeasuredLayout(width=args.width or 257, height=args.height or 140)
    print(to_html(image.mount(lambda: layout, handle="#hero"), builder))

    print("\n=== bg ===")
    print(render_html(args.src, type="bg", aggressive_load=True, width=800, height=400, config_path=args.config))

    print("\n=== picture ===")
    print(
        render_html(
            args.src,
            type="picture",
            mounted=True,
            config_path=args.config,
            children=[
                ImageRequest(src=args.src, type="img", width=400, height=300, attributes={"alt": "Bridge"}),
                ImageRequest(
                    src=args.src,
                    type="source",
                    width=1200,
                    height=600,
                    attributes={"media": "(min-width: 1024px)"},
                ),
                Element(tag="source", attributes={"srcset": "bridge.webp", "type": "image/webp"}),
            ],
        )
    )

    print("\n=== picture without fallback (logs a warning) ===")
    print(render_html(args.src, type="picture", config_path=args.config))


if __name__ == "__main__":
    main()
