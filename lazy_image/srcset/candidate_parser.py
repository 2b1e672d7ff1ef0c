# lazy_image/srcset/candidate_parser.py
# Responsibility: Splits a raw descriptor list ("a.jpg 480w, b.jpg 2x") into (url, descriptors) pairs.

import logging
from typing import List

from lazy_image.srcset.models import RawCandidate

logger = logging.getLogger(__name__)


class CandidateListParser:
    """
    Simplified descriptor list tokenizer.

    Entries are separated by commas and a URL ends at the first space. There is
    no escaping, so a URL containing a literal comma or space is mis-split.
    """

    @staticmethod
    def parse(srcset: str) -> List[RawCandidate]:
        """
        Args:
            srcset (str): Raw descriptor list.

        Returns:
            List[RawCandidate]: Entries in input order. Descriptor strings are not tokenized here.
        """
        raw_candidates: List[RawCandidate] = []
        remaining = srcset or ""

        while remaining != "":
            remaining = remaining.lstrip(" ")

            url_end = remaining.find(" ")
            if url_end == -1:
                # Last entry without descriptors (empty url after a trailing ", ")
                raw_candidates.append(RawCandidate(url=remaining, descriptors=""))
                break

            url = remaining[:url_end]
            remaining = remaining[url_end + 1:]

            comma = remaining.find(",")
            if comma == -1:
                descriptors = remaining
                remaining = ""
            else:
                descriptors = remaining[:comma]
                remaining = remaining[comma + 1:]

            raw_candidates.append(RawCandidate(url=url, descriptors=descriptors))

        logger.debug("[CandidateList] Parsed %d raw candidates", len(raw_candidates))
        return raw_candidates
