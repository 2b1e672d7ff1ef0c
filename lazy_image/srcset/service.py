# lazy_image/srcset/service.py
# Responsibility: Public entry points. Resolves descriptor lists and selects best candidates
# against an explicit or provider-supplied viewing context.

import logging
from typing import Callable, Optional, Sequence

from lazy_image.config.settings import settings
from lazy_image.srcset.candidate_set import build_candidate_set
from lazy_image.srcset.models import ImageInfo, SrcsetResult, ViewDescriptor
from lazy_image.srcset.selector import BestCandidateSelector
from lazy_image.utils.debounce import Debouncer, debounce
from lazy_image.viewport.provider import StaticViewportProvider, ViewportProvider

logger = logging.getLogger(__name__)


class SrcsetService:
    """
    Facade over the candidate set builder and the best-candidate selector.
    Holds no per-call state; one instance can serve concurrent callers.
    """

    def __init__(self, viewport: Optional[ViewportProvider] = None):
        """
        Args:
            viewport (ViewportProvider): Source of the default view. Defaults to configured values.
        """
        self.viewport = viewport or StaticViewportProvider()

    def get(self, src: Optional[str] = None, srcset: Optional[str] = None,
            view: Optional[ViewDescriptor] = None) -> Optional[SrcsetResult]:
        """
        Builds the candidate set for a descriptor list and picks the best candidate.

        Args:
            src (Optional[str]): Plain fallback URL.
            srcset (Optional[str]): Descriptor list, e.g. "a.jpg 480w, b.jpg 2x".
            view (Optional[ViewDescriptor]): Viewing context. Defaults to the viewport provider.

        Returns:
            Optional[SrcsetResult]: Best candidate plus all candidates, or None without a descriptor list.
        """
        candidates = build_candidate_set(src, srcset)
        if candidates is None:
            logger.debug("[Srcset] No descriptor list given, nothing to resolve")
            return None

        best = self.image(candidates, view)
        return SrcsetResult(best=best, candidates=candidates)

    def image(self, candidates: Optional[Sequence[ImageInfo]],
              view: Optional[ViewDescriptor] = None) -> Optional[ImageInfo]:
        """
        Selects the best of an already built candidate set.

        Returns None when candidates is None. Raises EmptyCandidateSetError for an empty set.
        """
        if candidates is None:
            return None
        if view is None:
            view = self.viewport.current()
        return BestCandidateSelector.select(candidates, view)

    def debounce(self, call: Callable[[], None], delay_ms: Optional[float] = None) -> Debouncer:
        """Wraps `call` so that it runs at most once per delay window."""
        if delay_ms is None:
            delay_ms = settings.DEBOUNCE.DELAY_MS
        return debounce(call, delay_ms)


# -------------------------------
# Default Service
# -------------------------------
srcset_service = SrcsetService()
