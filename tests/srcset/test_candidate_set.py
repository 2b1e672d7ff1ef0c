import math

from lazy_image.srcset.candidate_set import CandidateSetBuilder, build_candidate_set
from lazy_image.srcset.models import ImageInfo


def test_no_descriptor_list_yields_nothing():
    assert build_candidate_set(None, None) is None
    assert build_candidate_set("fallback.jpg", None) is None
    assert build_candidate_set("fallback.jpg", "") is None


def test_defaults_are_applied():
    candidates = build_candidate_set(None, "a.jpg 480w, b.jpg 2x, c.jpg 0w")

    a, b, c = candidates
    assert (a.src, a.w, a.h, a.x) == ("a.jpg", 480, math.inf, 1.0)
    assert (b.src, b.w, b.h, b.x) == ("b.jpg", math.inf, math.inf, 2.0)
    # Zero is treated as unspecified
    assert c.w == math.inf


def test_fallback_is_appended_last():
    candidates = build_candidate_set("fallback.jpg", "a.jpg 2x")

    assert [c.src for c in candidates] == ["a.jpg", "fallback.jpg"]
    assert candidates[1] == ImageInfo(src="fallback.jpg", w=math.inf, h=math.inf, x=1.0)


def test_duplicate_descriptors_keep_first():
    candidates = build_candidate_set(None, "a.jpg 2x, b.jpg 2x, c.jpg 480w, d.jpg 480w 1x")
    assert [c.src for c in candidates] == ["a.jpg", "c.jpg"]

    # Fallback has the same triple as a 1x candidate
    candidates = build_candidate_set("fallback.jpg", "a.jpg 1x")
    assert [c.src for c in candidates] == ["a.jpg"]


def test_builder_reports_rejected_candidates():
    builder = CandidateSetBuilder()

    assert builder.add(ImageInfo.create("a.jpg", w=400)) is True
    assert builder.add(ImageInfo.create("b.jpg", w=400, x=1.0)) is False
    assert builder.add(ImageInfo.create("a.jpg", w=800)) is True

    assert len(builder) == 2
    assert isinstance(builder.build(), tuple)
