"""Transparent padding around a pixel buffer."""

from __future__ import annotations

from .pixel_buffer import PixelBuffer


def pad(
    buffer: PixelBuffer,
    left: int = 0,
    right: int = 0,
    top: int = 0,
    bottom: int = 0,
) -> PixelBuffer:
    """Surrounds a buffer with transparent margins.

    Args:
        buffer: The source buffer
        left: Margin added on the left
        right: Margin added on the right
        top: Margin added on top
        bottom: Margin added at the bottom

    Returns:
        ``buffer`` itself if all margins are 0, otherwise a new buffer of
        size (width + left + right, height + top + bottom) with the source
        at (left, top).
    """
    if min(left, right, top, bottom) < 0:
        raise ValueError(
            f"Padding must be >= 0, got left={left} right={right} top={top} bottom={bottom}"
        )
    if left == 0 and right == 0 and top == 0 and bottom == 0:
        return buffer

    output = PixelBuffer.create(
        buffer.width + left + right,
        buffer.height + top + bottom,
    )
    output.copy_from(buffer, left, top)
    return output


def pad_uniform(buffer: PixelBuffer, padding: int) -> PixelBuffer:
    """Pads all four sides of ``buffer`` by ``padding`` pixels."""
    return pad(buffer, padding, padding, padding, padding)
