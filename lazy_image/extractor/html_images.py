# lazy_image/extractor/html_images.py
# Responsibility: Finds responsive <img> elements in an HTML document and resolves each one's best candidate.

import logging
from typing import List, Optional, TypedDict

from bs4 import BeautifulSoup, Tag

from lazy_image.srcset.models import CandidateSet, ImageInfo, ViewDescriptor
from lazy_image.srcset.service import SrcsetService, srcset_service

logger = logging.getLogger(__name__)

# Lazy-load variants first; they hold the real list when srcset carries a placeholder
SRCSET_ATTRIBUTES = ("data-srcset", "data-lazy-srcset", "srcset")
SRC_ATTRIBUTES = ("data-src", "data-original", "data-lazy", "src")


class ExtractedImage(TypedDict):
    position: int
    src: Optional[str]
    srcset: str
    alt: Optional[str]
    best: ImageInfo
    candidates: CandidateSet


class ResponsiveImageExtractor:
    """
    Extracts images declared with a descriptor list.
    Plain <img src> elements without any descriptor list are skipped.
    """

    def __init__(self, service: SrcsetService = srcset_service):
        """
        Args:
            service (SrcsetService): Resolver used per image. Defaults to the module service.
        """
        self.service = service

    def extract(self, html_content: str, view: Optional[ViewDescriptor] = None) -> List[ExtractedImage]:
        soup = BeautifulSoup(html_content, "html.parser")
        return self.extract_from_soup(soup, view)

    def extract_from_soup(self, soup: BeautifulSoup, view: Optional[ViewDescriptor] = None) -> List[ExtractedImage]:
        images: List[ExtractedImage] = []
        position_counter = 0

        for img in soup.find_all("img"):
            if not isinstance(img, Tag):
                continue

            srcset = self._first_attribute(img, SRCSET_ATTRIBUTES)
            if not srcset:
                continue

            src = self._first_attribute(img, SRC_ATTRIBUTES)
            result = self.service.get(src=src, srcset=srcset, view=view)
            if result is None:
                continue

            alt_val = img.get("alt", "")
            if isinstance(alt_val, list):
                alt_val = " ".join(alt_val)
            alt = alt_val.strip() if alt_val else None

            position_counter += 1
            images.append(ExtractedImage(
                position=position_counter,
                src=src,
                srcset=srcset,
                alt=alt,
                best=result.best,
                candidates=result.candidates,
            ))

        logger.debug("[Extractor] Resolved %d responsive images", len(images))
        return images

    def _first_attribute(self, img: Tag, names) -> Optional[str]:
        for name in names:
            value = img.get(name)
            if isinstance(value, list):
                value = " ".join(value)
            if value and value.strip():
                return value.strip()
        return None
