"""
ShadowStag - Soft drop shadows for containers of UI toolkits without a native shadow primitive
"""

from .exceptions import ShadowError, InvalidConfig, InvalidDimension
from .pixel_buffer import PixelBuffer
from .stack_blur import StackBlurEngine, stack_blur
from .blur_strategy import (
    BlurType,
    BlurStrategy,
    PlatformBlurService,
    PillowBlurService,
    MIN_BLUR_RADIUS,
    MAX_BLUR_RADIUS,
)
from .padding import pad, pad_uniform
from .config import ShadowConfig
from .geometry import (
    Rect,
    Insets,
    ShadowGeometry,
    compute_geometry,
    compositing_rect,
    content_padding,
)
from .surface import Surface, PixelSurface
from .container import ShadowContainer, BufferContainer
from .cache import CacheState, ShadowCacheEntry, ShadowCache
from .renderer import ShadowRenderer

__all__ = [
    # Errors
    "ShadowError",
    "InvalidConfig",
    "InvalidDimension",
    # Pixel data
    "PixelBuffer",
    "pad",
    "pad_uniform",
    # Blur
    "StackBlurEngine",
    "stack_blur",
    "BlurType",
    "BlurStrategy",
    "PlatformBlurService",
    "PillowBlurService",
    "MIN_BLUR_RADIUS",
    "MAX_BLUR_RADIUS",
    # Configuration and geometry
    "ShadowConfig",
    "Rect",
    "Insets",
    "ShadowGeometry",
    "compute_geometry",
    "compositing_rect",
    "content_padding",
    # Rendering
    "Surface",
    "PixelSurface",
    "ShadowContainer",
    "BufferContainer",
    "CacheState",
    "ShadowCacheEntry",
    "ShadowCache",
    "ShadowRenderer",
]

__version__ = "0.1.0"
