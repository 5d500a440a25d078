"""
Implements the class :class:`.PixelBuffer`, the unit all shadow transforms
operate on.

A buffer owns a ``(height, width, 4)`` uint8 numpy array of premultiplied RGBA
samples. Buffers are exclusively owned: a transform either mutates a buffer in
place (only when the caller explicitly permits it) or returns a fresh buffer.
"""

from __future__ import annotations

import numpy as np
import PIL.Image

from .exceptions import InvalidDimension, ShadowError

CHANNELS = 4
"Number of samples per pixel (premultiplied R, G, B, A)"

PREMULTIPLIED_MODE = "RGBa"
"PIL mode matching the buffer's storage layout"


class PixelBuffer:
    """
    Rectangular grid of premultiplied RGBA samples.

    The invariant ``samples.shape == (height, width, 4)`` with
    ``width > 0`` and ``height > 0`` holds for the whole lifetime of the
    buffer, until it is recycled.
    """

    def __init__(self, samples: np.ndarray):
        """
        :param samples: The pixel data, shape (height, width, 4), dtype uint8.
            The buffer takes ownership of the array, it is not copied.

        Raises InvalidDimension if the array describes an empty image.
        """
        if samples.ndim != 3 or samples.shape[2] != CHANNELS:
            raise ValueError(f"Expected samples (H, W, 4), got shape {samples.shape}")
        if samples.dtype != np.uint8:
            raise ValueError(f"Expected uint8 dtype, got {samples.dtype}")
        if samples.shape[0] <= 0 or samples.shape[1] <= 0:
            raise InvalidDimension(
                f"Pixel buffer dimensions must be > 0, got "
                f"{samples.shape[1]}x{samples.shape[0]}"
            )
        self._samples: np.ndarray | None = samples

    @classmethod
    def create(cls, width: int, height: int) -> PixelBuffer:
        """
        Allocates a fully transparent buffer.

        :param width: The width in pixels
        :param height: The height in pixels
        :return: The new buffer

        Raises InvalidDimension if either dimension is <= 0.
        """
        if width <= 0 or height <= 0:
            raise InvalidDimension(
                f"Pixel buffer dimensions must be > 0, got {width}x{height}"
            )
        return cls(np.zeros((height, width, CHANNELS), dtype=np.uint8))

    @classmethod
    def from_array(cls, array: np.ndarray) -> PixelBuffer:
        """
        Wraps an existing premultiplied RGBA array.

        :param array: Array of shape (H, W, 4), dtype uint8
        :return: The buffer owning the array
        """
        return cls(np.ascontiguousarray(array))

    @classmethod
    def from_pil(cls, image: PIL.Image.Image) -> PixelBuffer:
        """
        Converts a PIL image of any mode to a premultiplied buffer.

        :param image: The source image
        :return: The new buffer
        """
        if image.mode != PREMULTIPLIED_MODE:
            if image.mode != "RGBA":
                image = image.convert("RGBA")
            image = image.convert(PREMULTIPLIED_MODE)
        data = np.frombuffer(image.tobytes(), dtype=np.uint8)
        return cls(data.reshape(image.height, image.width, CHANNELS).copy())

    @property
    def samples(self) -> np.ndarray:
        """The underlying sample array. Raises ShadowError once recycled."""
        if self._samples is None:
            raise ShadowError("Pixel buffer already recycled")
        return self._samples

    @property
    def width(self) -> int:
        return self.samples.shape[1]

    @property
    def height(self) -> int:
        return self.samples.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        """The buffer's (width, height)."""
        return self.width, self.height

    @property
    def is_recycled(self) -> bool:
        return self._samples is None

    def recycle(self) -> None:
        """
        Releases the buffer's storage.

        A buffer may be recycled exactly once; recycling it again raises
        ShadowError.
        """
        if self._samples is None:
            raise ShadowError("Pixel buffer already recycled")
        self._samples = None

    def copy(self) -> PixelBuffer:
        return PixelBuffer(self.samples.copy())

    def fill(self, rgba: tuple[int, int, int, int]) -> None:
        """Fills the whole buffer with a single premultiplied sample."""
        self.samples[:, :] = np.asarray(rgba, dtype=np.uint8)

    def copy_from(self, source: PixelBuffer, draw_x: int, draw_y: int) -> None:
        """
        Writes ``source`` into this buffer with its top left corner at
        (draw_x, draw_y). Parts falling outside this buffer are clipped.

        :param source: The buffer to copy from
        :param draw_x: Target x coordinate, may be negative
        :param draw_y: Target y coordinate, may be negative
        """
        x0 = max(draw_x, 0)
        y0 = max(draw_y, 0)
        x1 = min(draw_x + source.width, self.width)
        y1 = min(draw_y + source.height, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        self.samples[y0:y1, x0:x1] = source.samples[
            y0 - draw_y : y1 - draw_y, x0 - draw_x : x1 - draw_x
        ]

    def scaled(self, new_width: int, new_height: int, smooth: bool) -> PixelBuffer:
        """
        Returns a resampled copy of this buffer.

        :param new_width: The target width
        :param new_height: The target height
        :param smooth: If True bilinear interpolation is used, otherwise
            nearest neighbor sampling
        :return: The new buffer

        Raises InvalidDimension if the target size is not positive.
        """
        if new_width <= 0 or new_height <= 0:
            raise InvalidDimension(
                f"Cannot scale to {new_width}x{new_height}, dimensions must be > 0"
            )
        if not smooth:
            src = self.samples
            rows = np.arange(new_height) * self.height // new_height
            cols = np.arange(new_width) * self.width // new_width
            return PixelBuffer(src[rows[:, None], cols[None, :]])
        resized = self.to_pil().resize(
            (new_width, new_height), PIL.Image.Resampling.BILINEAR
        )
        return PixelBuffer.from_pil(resized)

    def with_alpha(self, alpha: int) -> PixelBuffer:
        """
        Returns a copy with every sample multiplied by ``alpha / 255``.

        As the samples are premultiplied this fades color and coverage alike.

        :param alpha: The paint alpha (0-255)
        """
        if alpha >= 255:
            return self.copy()
        scaled = (self.samples.astype(np.uint16) * max(alpha, 0) + 127) // 255
        return PixelBuffer(scaled.astype(np.uint8))

    def to_pil(self) -> PIL.Image.Image:
        """Returns the buffer as PIL image in premultiplied ``RGBa`` mode."""
        return PIL.Image.frombytes(
            PREMULTIPLIED_MODE, self.size, np.ascontiguousarray(self.samples).tobytes()
        )

    def same_pixels(self, other: PixelBuffer) -> bool:
        """Returns True if both buffers have identical size and samples."""
        return self.size == other.size and np.array_equal(self.samples, other.samples)

    def __repr__(self) -> str:
        if self.is_recycled:
            return "PixelBuffer(recycled)"
        return f"PixelBuffer({self.width}x{self.height})"
