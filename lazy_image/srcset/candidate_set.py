# lazy_image/srcset/candidate_set.py
# Responsibility: Builds de-duplicated candidate sets from a descriptor list plus an optional fallback URL.

import logging
from typing import List, Optional

from lazy_image.srcset.candidate_parser import CandidateListParser
from lazy_image.srcset.descriptor_parser import DescriptorParser
from lazy_image.srcset.models import CandidateSet, ImageInfo

logger = logging.getLogger(__name__)


class CandidateSetBuilder:
    """
    Accumulates candidates in insertion order.
    A candidate whose (w, h, x) triple is already present is discarded; the
    first one seen keeps its place.
    """

    def __init__(self):
        self._candidates: List[ImageInfo] = []
        self._seen = set()

    def add(self, image: ImageInfo) -> bool:
        """Adds a candidate. Returns False if an equivalent one was already present."""
        if image.key in self._seen:
            logger.debug("[CandidateSet] Duplicate descriptors %s for %s", image.key, image.src)
            return False
        self._seen.add(image.key)
        self._candidates.append(image)
        return True

    def build(self) -> CandidateSet:
        return tuple(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)


def build_candidate_set(src: Optional[str], srcset: Optional[str]) -> Optional[CandidateSet]:
    """
    Parses a descriptor list into a candidate set.

    Args:
        src (Optional[str]): Plain fallback URL, appended last with default descriptors.
        srcset (Optional[str]): Raw descriptor list.

    Returns:
        Optional[CandidateSet]: None when there is no descriptor list to evaluate.
    """
    if not srcset:
        return None

    builder = CandidateSetBuilder()

    for raw in CandidateListParser.parse(srcset):
        desc = DescriptorParser.parse(raw["descriptors"])
        builder.add(ImageInfo.create(
            src=raw["url"],
            w=desc.get("w"),
            h=desc.get("h"),
            x=desc.get("x"),
        ))

    if src:
        builder.add(ImageInfo.create(src=src))

    return builder.build()
