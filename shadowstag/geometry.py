"""
Shadow geometry.

Derives everything the shadow pipeline needs to know about sizes from the
container's measured size and the :class:`~shadowstag.config.ShadowConfig`:

- the size of the downscaled snapshot and the padding added around it
- the blur radius used on the downscaled snapshot
- the final size of the shadow image
- the rectangle the shadow is composited into
"""

from __future__ import annotations

from dataclasses import dataclass

from .blur_strategy import MIN_BLUR_RADIUS
from .config import ShadowConfig
from .exceptions import InvalidConfig, InvalidDimension


@dataclass(frozen=True)
class Rect:
    """Axis aligned rectangle in surface coordinates, right/bottom exclusive."""

    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def from_size(cls, x: int, y: int, width: int, height: int) -> Rect:
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def expanded(self, insets: Insets) -> Rect:
        """Grows the rectangle outwards by ``insets`` on each side."""
        return Rect(
            self.left - insets.left,
            self.top - insets.top,
            self.right + insets.right,
            self.bottom + insets.bottom,
        )


@dataclass(frozen=True)
class Insets:
    """Per-side distances, e.g. shadow offsets or content padding."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def __add__(self, other: Insets) -> Insets:
        return Insets(
            self.left + other.left,
            self.top + other.top,
            self.right + other.right,
            self.bottom + other.bottom,
        )


@dataclass(frozen=True)
class ShadowGeometry:
    """Sizes of the intermediate and final shadow images for one container size."""

    downscaled_width: int
    downscaled_height: int
    downscale_padding: int
    effective_radius: int
    final_width: int
    final_height: int


def shadow_offsets(config: ShadowConfig) -> Insets:
    """The config's per-side shadow offsets."""
    return Insets(
        left=config.left_offset,
        top=config.top_offset,
        right=config.right_offset,
        bottom=config.bottom_offset,
    )


def compute_geometry(width: int, height: int, config: ShadowConfig) -> ShadowGeometry:
    """
    Computes the shadow image sizes for a container.

    The final size only depends on the container size and the blur radius,
    the downscale rate merely trades quality for speed.

    :param width: The container's measured width
    :param height: The container's measured height
    :param config: The shadow options
    :return: The geometry

    Raises InvalidConfig if the downscale rate is not positive and
    InvalidDimension if the container or its downscaled snapshot would be
    empty.
    """
    rate = config.downscale_rate
    if rate <= 0:
        raise InvalidConfig(f"DownscaleRate must be > 0, current downscaleRate: {rate}")
    if width <= 0 or height <= 0:
        raise InvalidDimension(f"Container is not laid out yet ({width}x{height})")

    downscaled_width = width // rate
    downscaled_height = height // rate
    if downscaled_width <= 0 or downscaled_height <= 0:
        raise InvalidDimension(
            f"Container {width}x{height} collapses to {downscaled_width}x{downscaled_height} "
            f"at downscale rate {rate}"
        )

    radius = config.blur_radius
    return ShadowGeometry(
        downscaled_width=downscaled_width,
        downscaled_height=downscaled_height,
        downscale_padding=radius // rate,
        effective_radius=max(radius // rate, MIN_BLUR_RADIUS),
        final_width=width + 2 * radius,
        final_height=height + 2 * radius,
    )


def compositing_rect(container_rect: Rect, config: ShadowConfig) -> Rect:
    """The rectangle the shadow is drawn into: the container grown by its offsets."""
    return container_rect.expanded(shadow_offsets(config))


def content_padding(padding: Insets, config: ShadowConfig) -> Insets:
    """
    The padding a container needs so its children leave room for the shadow.

    :param padding: The container's own padding
    :param config: The shadow options
    """
    # offsets are validated non-negative by ShadowConfig
    return padding + shadow_offsets(config)
