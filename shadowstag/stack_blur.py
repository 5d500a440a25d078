"""Stack blur - a fast approximation of a Gaussian blur.

The blur runs two orthogonal box passes (horizontal, then vertical). Each pass
averages a symmetric window of ``2 * radius + 1`` pixels, reading beyond the
buffer border by repeating the edge pixel.

Window sums are taken from running (prefix) sums, so a pass costs the same
for every radius: O(width * height).

Usage:
    from shadowstag.stack_blur import stack_blur

    blurred = stack_blur(buffer, radius=6)
"""

from __future__ import annotations

import numpy as np

from .pixel_buffer import PixelBuffer


def _running_sum_pass(samples: np.ndarray, radius: int) -> np.ndarray:
    """Box-averages ``samples`` along axis 1 (rows) with edge clamping.

    Args:
        samples: uint8 array (H, W, C)
        radius: Window radius, > 0

    Returns:
        Averaged uint8 array of the same shape
    """
    height, width, channels = samples.shape
    window = 2 * radius + 1
    padded = np.pad(samples, ((0, 0), (radius, radius), (0, 0)), mode="edge")
    sums = np.zeros((height, width + window, channels), dtype=np.int64)
    np.cumsum(padded, axis=1, dtype=np.int64, out=sums[:, 1:])
    # window sum = sums[x + window] - sums[x], rounded half up
    averaged = (sums[:, window:] - sums[:, :-window] + radius) // window
    return averaged.astype(np.uint8)


class StackBlurEngine:
    """Running-sum blur over a :class:`PixelBuffer`."""

    def blur(
        self, buffer: PixelBuffer, radius: int, allow_in_place: bool = False
    ) -> PixelBuffer:
        """Blurs a buffer.

        Args:
            buffer: The buffer to blur
            radius: Blur radius in pixels. Values <= 0 leave the pixels unchanged.
            allow_in_place: If True the result is written into ``buffer``'s
                storage and ``buffer`` itself is returned. If False ``buffer``
                is never modified.

        Returns:
            The blurred buffer
        """
        if radius <= 0:
            return buffer if allow_in_place else buffer.copy()

        horizontal = _running_sum_pass(buffer.samples, radius)
        vertical = _running_sum_pass(horizontal.transpose(1, 0, 2), radius)
        result = vertical.transpose(1, 0, 2)

        if allow_in_place:
            np.copyto(buffer.samples, result)
            return buffer
        return PixelBuffer(np.ascontiguousarray(result))


_engine = StackBlurEngine()


def stack_blur(
    buffer: PixelBuffer, radius: int = 1, can_reuse_buffer: bool = False
) -> PixelBuffer:
    """Blurs ``buffer`` with the shared :class:`StackBlurEngine`.

    Args:
        buffer: The buffer to blur
        radius: Blur radius in pixels
        can_reuse_buffer: Allow the blur to overwrite ``buffer``

    Returns:
        The blurred buffer
    """
    return _engine.blur(buffer, radius, allow_in_place=can_reuse_buffer)


__all__ = ["StackBlurEngine", "stack_blur"]
