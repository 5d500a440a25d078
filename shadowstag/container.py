"""
The container a shadow is cast by.

The host toolkit adapts its widget to :class:`ShadowContainer`. The shadow
pipeline only needs to know where the container is, how large it is, and
how to obtain its pixels.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .geometry import Rect
from .pixel_buffer import PixelBuffer
from .surface import Surface


class ShadowContainer(ABC):
    """Interface of a container rendered with a shadow."""

    @property
    @abstractmethod
    def rect(self) -> Rect:
        """The container's current rectangle on the drawing surface."""
        pass

    @property
    def width(self) -> int:
        return self.rect.width

    @property
    def height(self) -> int:
        return self.rect.height

    @abstractmethod
    def render_content_into(self, buffer: PixelBuffer) -> None:
        """
        Draws the container's background and children into ``buffer``.

        :param buffer: A transparent buffer of the container's measured size
        """
        pass

    @abstractmethod
    def draw_content(self, surface: Surface) -> None:
        """Draws the container's own content onto ``surface``."""
        pass


class BufferContainer(ShadowContainer):
    """Container whose content is a fixed pixel buffer placed at a position."""

    def __init__(self, content: PixelBuffer, x: int = 0, y: int = 0):
        """
        :param content: The container's pixels
        :param x: Left edge on the surface
        :param y: Top edge on the surface
        """
        self.content = content
        self.x = x
        self.y = y

    @property
    def rect(self) -> Rect:
        return Rect.from_size(self.x, self.y, self.content.width, self.content.height)

    def render_content_into(self, buffer: PixelBuffer) -> None:
        buffer.copy_from(self.content, 0, 0)

    def draw_content(self, surface: Surface) -> None:
        surface.draw_buffer(self.content, self.rect)
