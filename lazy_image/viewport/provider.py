# lazy_image/viewport/provider.py
# Responsibility: Supplies the default viewing context when a caller does not pass one explicitly.

import logging
import math
from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence

from lazy_image.config.settings import settings
from lazy_image.srcset.models import DEFAULT_DENSITY, ViewDescriptor

logger = logging.getLogger(__name__)

# Client Hints, preferred name first
WIDTH_HINTS = ("sec-ch-viewport-width", "viewport-width")
HEIGHT_HINTS = ("sec-ch-viewport-height",)
DPR_HINTS = ("sec-ch-dpr", "dpr")


# -------------------------------
# Base Provider
# -------------------------------
class ViewportProvider(ABC):
    @abstractmethod
    def current(self) -> ViewDescriptor:
        pass


# -------------------------------
# Configured viewport
# -------------------------------
class StaticViewportProvider(ViewportProvider):
    """
    Fixed viewport, taken from settings unless given explicitly.
    """

    def __init__(self, width: Optional[float] = None, height: Optional[float] = None,
                 pixel_ratio: Optional[float] = None):
        self.width = width if width is not None else settings.VIEWPORT.DEFAULT_WIDTH
        self.height = height if height is not None else settings.VIEWPORT.DEFAULT_HEIGHT
        self.pixel_ratio = pixel_ratio or settings.VIEWPORT.DEFAULT_PIXEL_RATIO or DEFAULT_DENSITY

    def current(self) -> ViewDescriptor:
        return ViewDescriptor(w=self.width, h=self.height, x=self.pixel_ratio)


# -------------------------------
# Request Client Hints
# -------------------------------
class ClientHintsViewportProvider(ViewportProvider):
    """
    Reads the viewport from HTTP Client Hints sent by the browser.
    Each missing or unusable hint falls back to the wrapped provider independently.
    """

    def __init__(self, headers: Mapping[str, str], fallback: Optional[ViewportProvider] = None):
        # Header names are case-insensitive
        self.headers = {k.lower(): v for k, v in headers.items()}
        self.fallback = fallback or StaticViewportProvider()

    def current(self) -> ViewDescriptor:
        default = self.fallback.current()
        return ViewDescriptor(
            w=self._read_hint(WIDTH_HINTS, default.w),
            h=self._read_hint(HEIGHT_HINTS, default.h),
            x=self._read_hint(DPR_HINTS, default.x or DEFAULT_DENSITY),
        )

    def _read_hint(self, names: Sequence[str], default: float) -> float:
        for name in names:
            raw = self.headers.get(name)
            if raw is None:
                continue
            try:
                value = float(raw.strip())
            except ValueError:
                logger.debug("[Viewport] Ignoring malformed %s hint: %r", name, raw)
                continue
            if value > 0 and not math.isnan(value):
                return value
        return default
