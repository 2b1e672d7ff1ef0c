# lazy_image/routers/srcset.py
# Responsibility: HTTP endpoints for descriptor list resolution, candidate selection and HTML extraction.

import logging
import math
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel, Field

from lazy_image.errors import LazyImageError
from lazy_image.extractor.html_images import ResponsiveImageExtractor
from lazy_image.srcset.models import UNBOUNDED, ImageInfo, ViewDescriptor
from lazy_image.srcset.service import SrcsetService, srcset_service
from lazy_image.viewport.provider import ClientHintsViewportProvider

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/srcset",
    tags=["Srcset"]
)

# --- Pydantic Models ---
# Unbounded width/height travels as null
class ImageInfoModel(BaseModel):
    src: str
    w: Optional[int] = None
    h: Optional[int] = None
    x: float = 1.0

    @classmethod
    def from_image(cls, image: ImageInfo) -> "ImageInfoModel":
        return cls(
            src=image.src,
            w=None if math.isinf(image.w) else image.w,
            h=None if math.isinf(image.h) else image.h,
            x=image.x,
        )

class CandidateModel(BaseModel):
    """Submitted candidate. Missing or zero attributes take the usual defaults."""
    src: str
    w: Optional[int] = Field(None, ge=0)
    h: Optional[int] = Field(None, ge=0)
    x: Optional[float] = Field(None, ge=0)

    def to_image(self) -> ImageInfo:
        return ImageInfo.create(src=self.src, w=self.w, h=self.h, x=self.x)

class ViewModel(BaseModel):
    """
    Submitted viewing context. Omitted fields come from the client's hints or
    configured defaults; an explicit null width/height means unbounded.
    """
    w: Optional[float] = Field(None, gt=0)
    h: Optional[float] = Field(None, gt=0)
    x: Optional[float] = Field(None, gt=0)

    def to_view(self, default: ViewDescriptor) -> ViewDescriptor:
        return ViewDescriptor(
            w=self._dimension("w", default.w),
            h=self._dimension("h", default.h),
            x=default.x if self.x is None else self.x,
        )

    def _dimension(self, name: str, default: float) -> float:
        if name not in self.model_fields_set:
            return default
        value = getattr(self, name)
        return UNBOUNDED if value is None else value

class ResolveResponse(BaseModel):
    best: Optional[ImageInfoModel] = None
    candidates: List[ImageInfoModel] = []

class SelectRequest(BaseModel):
    candidates: List[CandidateModel]
    view: Optional[ViewModel] = None

class SelectResponse(BaseModel):
    best: ImageInfoModel

class ExtractRequest(BaseModel):
    html: str
    view: Optional[ViewModel] = None

class ExtractedImageModel(BaseModel):
    position: int
    src: Optional[str] = None
    srcset: str
    alt: Optional[str] = None
    best: ImageInfoModel
    candidates: List[ImageInfoModel]

# --- Dependency Injection ---
def get_srcset_service() -> SrcsetService:
    """Provider for the shared SrcsetService."""
    return srcset_service

def request_view(
    request: Request,
    w: Optional[float] = Query(None, gt=0, description="Display width (overrides Viewport-Width hint)"),
    h: Optional[float] = Query(None, gt=0, description="Display height (overrides Sec-CH-Viewport-Height hint)"),
    x: Optional[float] = Query(None, gt=0, description="Device pixel ratio (overrides DPR hint)"),
) -> ViewDescriptor:
    """
    Viewing context of the calling client.
    Explicit query values win over Client Hints, which win over configured defaults.
    """
    hinted = ClientHintsViewportProvider(request.headers).current()
    return ViewDescriptor(
        w=hinted.w if w is None else w,
        h=hinted.h if h is None else h,
        x=hinted.x if x is None else x,
    )

def body_view(view: Optional[ViewModel], request: Request) -> ViewDescriptor:
    """Viewing context from a request body, field by field over the client's hints."""
    hinted = ClientHintsViewportProvider(request.headers).current()
    if view is None:
        return hinted
    return view.to_view(hinted)

# --- Endpoints ---
@router.get("/resolve", response_model=ResolveResponse)
def resolve_endpoint(
    srcset: Optional[str] = Query(None, description="Descriptor list, e.g. 'a.jpg 480w, b.jpg 2x'"),
    src: Optional[str] = Query(None, description="Plain fallback URL"),
    view: ViewDescriptor = Depends(request_view),
    service: SrcsetService = Depends(get_srcset_service)
):
    """
    Resolves the best candidate of a descriptor list for the calling client.
    """
    result = service.get(src=src, srcset=srcset, view=view)
    if result is None:
        return ResolveResponse()

    return ResolveResponse(
        best=ImageInfoModel.from_image(result.best),
        candidates=[ImageInfoModel.from_image(c) for c in result.candidates]
    )

@router.post("/select", response_model=SelectResponse)
def select_endpoint(
    req: SelectRequest,
    request: Request,
    service: SrcsetService = Depends(get_srcset_service)
):
    """
    Selects the best of an explicit candidate list.
    Without a view in the body, the client's hints (or defaults) are used.
    """
    view = body_view(req.view, request)
    candidates = tuple(c.to_image() for c in req.candidates)

    try:
        best = service.image(candidates, view)
    except LazyImageError as e:
        logger.info("[API] Rejected select request: %s", e.message)
        raise HTTPException(status_code=422, detail={"code": e.code, "message": e.message})

    return SelectResponse(best=ImageInfoModel.from_image(best))

@router.post("/extract", response_model=List[ExtractedImageModel])
def extract_endpoint(
    req: ExtractRequest,
    request: Request,
    service: SrcsetService = Depends(get_srcset_service)
):
    """
    Resolves every responsive <img> found in an HTML document.
    """
    view = body_view(req.view, request)
    extractor = ResponsiveImageExtractor(service)

    return [
        ExtractedImageModel(
            position=item["position"],
            src=item["src"],
            srcset=item["srcset"],
            alt=item["alt"],
            best=ImageInfoModel.from_image(item["best"]),
            candidates=[ImageInfoModel.from_image(c) for c in item["candidates"]],
        )
        for item in extractor.extract(req.html, view)
    ]
