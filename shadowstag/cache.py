"""
Cache of the computed shadow image.

The cache is a two state machine:

- EMPTY: no shadow image. The next draw runs the shadow pipeline.
- CACHED: a shadow image is stored and reused by every draw.

``invalidate()`` and ``on_detached()`` move a CACHED cache back to EMPTY and
recycle the stored buffer. Nothing invalidates the cache automatically; the
host has to call ``invalidate()`` when the container's size, content or
style changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from .config import ShadowConfig
from .pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


class CacheState(Enum):
    EMPTY = "empty"
    CACHED = "cached"


@dataclass
class ShadowCacheEntry:
    """The stored shadow image and the inputs it was computed for."""

    buffer: Optional[PixelBuffer] = None
    valid_for: Optional[Tuple[int, int, ShadowConfig]] = None


class ShadowCache:
    """Holds at most one shadow image."""

    def __init__(self):
        self._entry = ShadowCacheEntry()
        self.recompute_count = 0
        "Number of times the shadow pipeline was run"

    @property
    def state(self) -> CacheState:
        return CacheState.EMPTY if self._entry.buffer is None else CacheState.CACHED

    @property
    def buffer(self) -> Optional[PixelBuffer]:
        return self._entry.buffer

    @property
    def valid_for(self) -> Optional[Tuple[int, int, ShadowConfig]]:
        """(width, height, config) the cached image was computed for."""
        return self._entry.valid_for

    def ensure_valid(
        self,
        width: int,
        height: int,
        config: ShadowConfig,
        producer: Callable[[], PixelBuffer],
    ) -> PixelBuffer:
        """
        Returns the cached shadow image, computing it first if the cache is
        empty.

        :param width: The container width the image is computed for
        :param height: The container height the image is computed for
        :param config: The options the image is computed with
        :param producer: Runs the shadow pipeline. Exceptions propagate and
            leave the cache empty.
        :return: The shadow image, owned by the cache
        """
        if self._entry.buffer is not None:
            return self._entry.buffer

        buffer = producer()
        self.recompute_count += 1
        self._entry = ShadowCacheEntry(buffer=buffer, valid_for=(width, height, config))
        logger.debug(
            f"Shadow computed for {width}x{height}: {buffer.width}x{buffer.height} "
            f"(recompute #{self.recompute_count})"
        )
        return buffer

    def is_stale(self, width: int, height: int, config: ShadowConfig) -> bool:
        """True if a cached image exists but was computed for other inputs."""
        return self.valid_for is not None and self.valid_for != (width, height, config)

    def invalidate(self) -> None:
        """Discards the cached image. Does nothing if the cache is empty."""
        buffer = self._entry.buffer
        if buffer is None:
            return
        self._entry = ShadowCacheEntry()
        buffer.recycle()
        logger.debug("Shadow cache invalidated")

    def on_detached(self) -> None:
        """The container left the rendering surface: release the image."""
        self.invalidate()
