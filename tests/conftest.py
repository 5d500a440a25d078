"""
Pytest fixtures for ShadowStag tests
"""

import numpy as np
import pytest

from shadowstag import PixelBuffer, ShadowConfig, BlurType


@pytest.fixture
def square_buffer() -> PixelBuffer:
    """A 100x100 transparent buffer with an opaque red square in the center."""
    data = np.zeros((100, 100, 4), dtype=np.uint8)
    data[25:75, 25:75] = [255, 0, 0, 255]
    return PixelBuffer.from_array(data)


@pytest.fixture
def noise_buffer() -> PixelBuffer:
    """A 23x17 buffer of random premultiplied samples."""
    rng = np.random.default_rng(42)
    alpha = rng.integers(0, 256, size=(17, 23, 1), dtype=np.uint16)
    color = rng.integers(0, 256, size=(17, 23, 3), dtype=np.uint16) * alpha // 255
    return PixelBuffer.from_array(np.concatenate([color, alpha], axis=2).astype(np.uint8))


@pytest.fixture
def stack_config() -> ShadowConfig:
    """Stack blur config with radius 10 and offsets 5 on every side."""
    return ShadowConfig(
        blur_radius=10,
        downscale_rate=4,
        alpha_percent=50,
        left_offset=5,
        right_offset=5,
        top_offset=5,
        bottom_offset=5,
        blur_type=BlurType.STACK,
    )
