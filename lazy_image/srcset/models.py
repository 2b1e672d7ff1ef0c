# lazy_image/srcset/models.py
# Responsibility: Value types shared by the descriptor parsers, the builder and the selector.

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, TypedDict, Union

# Width/height of a candidate that did not declare one. Greater than any real dimension.
UNBOUNDED = math.inf

DEFAULT_DENSITY = 1.0

Number = Union[int, float]


# -------------------------------
# Parser intermediates
# -------------------------------
class RawCandidate(TypedDict):
    url: str
    descriptors: str


# Attribute key ('w', 'h' or 'x') -> parsed value
DescriptorFragment = Dict[str, Number]


# -------------------------------
# Candidates and viewing context
# -------------------------------
@dataclass(frozen=True)
class ImageInfo:
    """
    One resolved image candidate.

    Use ImageInfo.create() to build from possibly-missing descriptors; the
    dataclass constructor itself expects all three attributes already resolved.
    """
    src: str
    w: Number = UNBOUNDED
    h: Number = UNBOUNDED
    x: float = DEFAULT_DENSITY

    @classmethod
    def create(cls, src: str, w: Optional[Number] = None, h: Optional[Number] = None,
               x: Optional[float] = None) -> "ImageInfo":
        # A zero descriptor counts as unspecified
        return cls(
            src=src,
            w=w or UNBOUNDED,
            h=h or UNBOUNDED,
            x=x or DEFAULT_DENSITY,
        )

    @property
    def key(self) -> Tuple[Number, Number, float]:
        """Attribute triple the candidate set is de-duplicated on."""
        return (self.w, self.h, self.x)


@dataclass(frozen=True)
class ViewDescriptor:
    """Display constraints a candidate is evaluated against."""
    w: Number
    h: Number
    x: float = DEFAULT_DENSITY


CandidateSet = Tuple[ImageInfo, ...]


@dataclass(frozen=True)
class SrcsetResult:
    best: ImageInfo
    candidates: CandidateSet
