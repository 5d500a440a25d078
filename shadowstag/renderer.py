"""
Renders a soft shadow behind a container.

Per draw call the renderer

1. makes sure a shadow image is cached, running the pipeline
   capture -> downscale -> pad -> blur -> upscale if it is not,
2. composites the cached image into the compositing rectangle (the container
   rectangle grown by the shadow offsets) with the configured alpha,
3. lets the container draw its own content on top.

Example:
    >>> renderer = ShadowRenderer(container, ShadowConfig(blur_radius=12, blur_type=BlurType.STACK))
    >>> renderer.draw(surface)        # computes and caches the shadow
    >>> renderer.draw(surface)        # reuses the cached shadow
    >>> renderer.invalidate_shadow()  # content changed, recompute on next draw
"""

from __future__ import annotations

import logging

from .blur_strategy import BlurStrategy, PlatformBlurService
from .cache import ShadowCache
from .config import ShadowConfig
from .container import ShadowContainer
from .exceptions import InvalidDimension
from .geometry import Insets, compositing_rect, compute_geometry, content_padding
from .padding import pad_uniform
from .pixel_buffer import PixelBuffer
from .surface import Surface

logger = logging.getLogger(__name__)


class ShadowRenderer:
    """Draws a container together with its cached drop shadow."""

    def __init__(
        self,
        container: ShadowContainer,
        config: ShadowConfig | None = None,
        platform_service: PlatformBlurService | None = None,
    ):
        """
        :param container: The container casting the shadow
        :param config: The shadow options, defaults if not specified
        :param platform_service: Blur service used for the PLATFORM_NATIVE
            blur type. Pillow's Gaussian blur if not specified.
        """
        self.container = container
        self.config = config if config is not None else ShadowConfig()
        self.blur_strategy = BlurStrategy(self.config.blur_type, platform_service)
        self.cache = ShadowCache()

    @property
    def recompute_count(self) -> int:
        return self.cache.recompute_count

    def create_shadow_buffer(self) -> PixelBuffer:
        """
        Runs the full shadow pipeline for the container's current size.

        :return: The shadow image of size (width + 2 * blur_radius,
            height + 2 * blur_radius)

        Raises InvalidDimension before allocating anything if the container
        or its downscaled snapshot is empty.
        """
        width, height = self.container.width, self.container.height
        geometry = compute_geometry(width, height, self.config)

        # intermediates, released even if a stage raises
        stages: list[PixelBuffer] = []
        try:
            source = PixelBuffer.create(width, height)
            stages.append(source)
            self.container.render_content_into(source)

            downscaled = source.scaled(
                geometry.downscaled_width, geometry.downscaled_height, smooth=False
            )
            stages.append(downscaled)

            padded = pad_uniform(downscaled, geometry.downscale_padding)
            stages.append(padded)

            blurred = self.blur_strategy.blur(padded, geometry.effective_radius)
            stages.append(blurred)

            return blurred.scaled(geometry.final_width, geometry.final_height, smooth=True)
        finally:
            released = set()
            for buffer in stages:
                if id(buffer) in released or buffer.is_recycled:
                    continue
                released.add(id(buffer))
                buffer.recycle()

    def _ensure_shadow(self) -> PixelBuffer | None:
        width, height = self.container.width, self.container.height
        if self.cache.is_stale(width, height, self.config):
            cached_width, cached_height, _ = self.cache.valid_for
            logger.debug(
                f"Drawing shadow computed for {cached_width}x{cached_height} "
                f"at {width}x{height}, call invalidate_shadow() to recompute"
            )
        try:
            return self.cache.ensure_valid(
                width, height, self.config, self.create_shadow_buffer
            )
        except InvalidDimension as e:
            logger.debug(f"Shadow skipped for this frame: {e}")
            return None

    def draw(self, surface: Surface) -> None:
        """
        Draws the shadow and then the container's content onto ``surface``.

        A container without a drawable size gets no shadow for this frame,
        its content is drawn nevertheless.
        """
        shadow = self._ensure_shadow()
        if shadow is not None:
            rect = compositing_rect(self.container.rect, self.config)
            surface.draw_buffer(shadow, rect, self.config.paint_alpha)
        self.container.draw_content(surface)

    def invalidate_shadow(self) -> None:
        """Forces the next draw to recompute the shadow, e.g. after the content changed."""
        self.cache.invalidate()

    def on_detached(self) -> None:
        """Releases the cached shadow when the container leaves the surface."""
        self.cache.on_detached()

    def content_padding(self, padding: Insets = Insets()) -> Insets:
        """The container padding needed to keep its children clear of the shadow."""
        return content_padding(padding, self.config)

    def close(self) -> None:
        """Releases the cached shadow. The renderer may still be drawn afterwards."""
        self.cache.invalidate()

    def __enter__(self) -> ShadowRenderer:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"ShadowRenderer(config={self.config!r}, "
            f"cache={self.cache.state.name})"
        )
