"""
Blur strategy selection.

Two blur implementations share the contract ``blur(buffer, radius) -> buffer``:

- STACK: the hand-rolled :class:`~shadowstag.stack_blur.StackBlurEngine`
- PLATFORM_NATIVE: an external blur service, by default backed by Pillow's
  Gaussian blur. The service only accepts radii in [1, 25].

The strategy is picked once from the configuration, callers never switch on
the type of the blur object.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum

from PIL import ImageFilter

from .pixel_buffer import PixelBuffer
from .stack_blur import StackBlurEngine

logger = logging.getLogger(__name__)

MIN_BLUR_RADIUS = 1
"Smallest radius passed to any blur"

MAX_BLUR_RADIUS = 25
"Largest radius the platform native blur service accepts"


class BlurType(Enum):
    """The blur implementation used for a shadow."""

    PLATFORM_NATIVE = 0
    STACK = 1

    @classmethod
    def from_id(cls, blur_id: int) -> BlurType:
        """Looks up a blur type by its numeric id, PLATFORM_NATIVE if unknown."""
        for blur_type in cls:
            if blur_type.value == blur_id:
                return blur_type
        return cls.PLATFORM_NATIVE


def clamp_platform_radius(radius: int) -> int:
    """Clamps a radius to the range the platform native blur accepts."""
    return min(max(radius, MIN_BLUR_RADIUS), MAX_BLUR_RADIUS)


class PlatformBlurService(ABC):
    """Contract of a platform supplied blur service."""

    @abstractmethod
    def blur(self, buffer: PixelBuffer, radius: int) -> PixelBuffer:
        """
        Blurs a buffer.

        :param buffer: The buffer to blur. Ownership passes to the service.
        :param radius: The blur radius, already clamped to [1, 25]
        :return: The blurred buffer
        """
        pass


class PillowBlurService(PlatformBlurService):
    """Platform blur backed by Pillow's ``ImageFilter.GaussianBlur``."""

    def blur(self, buffer: PixelBuffer, radius: int) -> PixelBuffer:
        # Works on the premultiplied image so transparent pixels do not bleed color
        result = buffer.to_pil().filter(ImageFilter.GaussianBlur(radius=radius))
        return PixelBuffer.from_pil(result)


class BlurStrategy:
    """
    Tagged blur variant chosen at configuration time.

    Example:
        >>> strategy = BlurStrategy(BlurType.STACK)
        >>> blurred = strategy.blur(buffer, 3)
    """

    def __init__(
        self,
        blur_type: BlurType,
        platform_service: PlatformBlurService | None = None,
    ):
        """
        :param blur_type: The blur implementation to use
        :param platform_service: The service used for PLATFORM_NATIVE blurs.
            A :class:`PillowBlurService` if not specified.
        """
        self.blur_type = blur_type
        self._stack_engine = StackBlurEngine()
        self._platform_service = platform_service or PillowBlurService()

    def blur(self, buffer: PixelBuffer, radius: int) -> PixelBuffer:
        """
        Blurs ``buffer``, which is consumed by the call.

        :param buffer: The buffer to blur
        :param radius: The blur radius in pixels
        :return: The blurred buffer
        """
        if self.blur_type == BlurType.STACK:
            return self._stack_engine.blur(buffer, radius, allow_in_place=True)
        clamped = clamp_platform_radius(radius)
        if clamped != radius:
            logger.debug(f"Platform blur radius {radius} clamped to {clamped}")
        return self._platform_service.blur(buffer, clamped)

    def __repr__(self) -> str:
        return f"BlurStrategy({self.blur_type.name})"
