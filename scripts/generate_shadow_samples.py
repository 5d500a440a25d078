#!/usr/bin/env python3
"""
Generate sample images of shadowed containers.

Renders a rounded card with a shadow once per blur type and once per
downscale rate, so the quality/speed trade-off can be compared visually.

Output directory: tmp/shadow_samples/

Usage:
    python scripts/generate_shadow_samples.py
"""

import logging
import time
from pathlib import Path

from PIL import Image, ImageDraw

from shadowstag import (
    BlurType,
    BufferContainer,
    PixelBuffer,
    PixelSurface,
    ShadowConfig,
    ShadowRenderer,
)

OUTPUT_DIR = Path(__file__).parent.parent / "tmp" / "shadow_samples"
CANVAS_SIZE = (320, 240)


def create_card() -> PixelBuffer:
    """A white rounded card as container content."""
    card = Image.new("RGBA", (200, 120), (0, 0, 0, 0))
    ImageDraw.Draw(card).rounded_rectangle((0, 0, 199, 119), radius=16, fill=(255, 255, 255, 255))
    return PixelBuffer.from_pil(card)


def render(config: ShadowConfig, name: str) -> None:
    container = BufferContainer(create_card(), x=60, y=50)
    surface = PixelSurface.create(*CANVAS_SIZE)
    surface.target.fill((230, 230, 230, 255))

    start = time.perf_counter()
    with ShadowRenderer(container, config) as renderer:
        renderer.draw(surface)
    elapsed = (time.perf_counter() - start) * 1000

    path = OUTPUT_DIR / f"{name}.png"
    surface.target.to_pil().convert("RGBA").save(path)
    print(f"  {name}: {elapsed:.1f} ms -> {path}")


def main():
    logging.basicConfig(level=logging.DEBUG)
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    offsets = dict(left_offset=4, right_offset=12, top_offset=4, bottom_offset=16)

    print("Blur types:")
    for blur_type in BlurType:
        config = ShadowConfig(blur_radius=20, alpha_percent=60, blur_type=blur_type, **offsets)
        render(config, f"blur_{blur_type.name.lower()}")

    print("Downscale rates:")
    for rate in (1, 2, 4, 8):
        config = ShadowConfig(
            blur_radius=20, downscale_rate=rate, alpha_percent=60,
            blur_type=BlurType.STACK, **offsets,
        )
        render(config, f"stack_rate_{rate}")


if __name__ == "__main__":
    main()
