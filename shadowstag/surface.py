"""
Drawing surfaces the shadow is composited onto.

The host toolkit provides its own :class:`Surface`. :class:`PixelSurface`
is a software implementation drawing into a :class:`PixelBuffer`, used for
offscreen rendering and in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from .geometry import Rect
from .pixel_buffer import PixelBuffer


class Surface(ABC):
    """Target of a draw call."""

    @abstractmethod
    def draw_buffer(self, buffer: PixelBuffer, rect: Rect, alpha: int = 255) -> None:
        """
        Draws ``buffer`` stretched into ``rect``.

        :param buffer: The premultiplied source image
        :param rect: The destination rectangle in surface coordinates
        :param alpha: Paint alpha (0-255) applied to the whole buffer
        """
        pass


class PixelSurface(Surface):
    """Source-over compositing into a :class:`PixelBuffer`."""

    def __init__(self, target: PixelBuffer):
        self.target = target

    @classmethod
    def create(cls, width: int, height: int) -> PixelSurface:
        return cls(PixelBuffer.create(width, height))

    def draw_buffer(self, buffer: PixelBuffer, rect: Rect, alpha: int = 255) -> None:
        if rect.is_empty or alpha <= 0:
            return
        if buffer.size != (rect.width, rect.height):
            source = buffer.scaled(rect.width, rect.height, smooth=True)
        else:
            source = buffer
        if alpha < 255:
            source = source.with_alpha(alpha)

        # Blending region, clamped to the surface
        x0 = max(rect.left, 0)
        y0 = max(rect.top, 0)
        x1 = min(rect.right, self.target.width)
        y1 = min(rect.bottom, self.target.height)
        if x0 >= x1 or y0 >= y1:
            return

        src = source.samples[
            y0 - rect.top : y1 - rect.top, x0 - rect.left : x1 - rect.left
        ].astype(np.uint16)
        dst = self.target.samples[y0:y1, x0:x1].astype(np.uint16)
        # Premultiplied source-over: dst = src + dst * (1 - src_alpha)
        inverse_alpha = 255 - src[..., 3:4]
        blended = src + (dst * inverse_alpha + 127) // 255
        self.target.samples[y0:y1, x0:x1] = np.minimum(blended, 255).astype(np.uint8)
