# lazy_image/srcset/selector.py
# Responsibility: Picks the single best candidate for a viewing context (multi-pass narrowing).

import logging
from typing import Sequence, Tuple

from lazy_image.errors import EmptyCandidateSetError
from lazy_image.srcset.models import ImageInfo, ViewDescriptor

logger = logging.getLogger(__name__)

# Evaluation order is fixed; it decides ties between axes.
AXES = ("w", "h", "x")

Survivors = Tuple[ImageInfo, ...]


class BestCandidateSelector:
    """
    Implements the "processing the image candidates" negotiation:

    1. For w, then h, then x: drop candidates smaller than the view on that axis.
       If nothing is left, keep only the largest candidate on that axis.
    2. For w, then h, then x: keep only candidates tied for the smallest value.

    Every pass returns a new tuple; the input is never modified.
    """

    @staticmethod
    def select(candidates: Sequence[ImageInfo], view: ViewDescriptor) -> ImageInfo:
        """
        Args:
            candidates (Sequence[ImageInfo]): Non-empty candidate set, in insertion order.
            view (ViewDescriptor): Viewing context to satisfy.

        Returns:
            ImageInfo: The winning candidate (first survivor in input order).

        Raises:
            EmptyCandidateSetError: If candidates is empty.
        """
        if not candidates:
            raise EmptyCandidateSetError()

        survivors: Survivors = tuple(candidates)

        for axis in AXES:
            survivors = BestCandidateSelector.narrow_to_sufficient(survivors, axis, getattr(view, axis))

        for axis in AXES:
            survivors = BestCandidateSelector.narrow_to_smallest(survivors, axis)

        best = survivors[0]
        logger.debug("[Selector] %s wins among %d candidates for view %s", best.src, len(candidates), view)
        return best

    @staticmethod
    def narrow_to_sufficient(survivors: Survivors, axis: str, required: float) -> Survivors:
        """
        Largest-on-axis pass: keeps candidates whose value on `axis` meets `required`,
        or only the largest one (first on ties) when none does.
        """
        largest = max(survivors, key=lambda image: getattr(image, axis))
        kept = tuple(image for image in survivors if not getattr(image, axis) < required)
        if not kept:
            return (largest,)
        return kept

    @staticmethod
    def narrow_to_smallest(survivors: Survivors, axis: str) -> Survivors:
        """Smallest-sufficient pass: keeps candidates tied for the minimum on `axis`."""
        smallest = min(getattr(image, axis) for image in survivors)
        return tuple(image for image in survivors if not getattr(image, axis) > smallest)
