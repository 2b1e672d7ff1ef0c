from fastapi.testclient import TestClient

from lazy_image.main import create_app

client = TestClient(create_app())

SRCSET = "a.jpg 400w, b.jpg 800w, c.jpg 1200w"


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_resolve_with_explicit_view():
    response = client.get("/srcset/resolve", params={"srcset": SRCSET, "w": 500})

    assert response.status_code == 200
    body = response.json()
    assert body["best"]["src"] == "b.jpg"
    assert [c["src"] for c in body["candidates"]] == ["a.jpg", "b.jpg", "c.jpg"]
    # Unbounded height is sent as null
    assert body["best"]["h"] is None
    assert body["best"]["w"] == 800


def test_resolve_uses_client_hints():
    response = client.get("/srcset/resolve", params={"srcset": SRCSET}, headers={"Viewport-Width": "300"})
    assert response.json()["best"]["src"] == "a.jpg"

    # Query parameters win over hints
    response = client.get("/srcset/resolve", params={"srcset": SRCSET, "w": 900}, headers={"Viewport-Width": "300"})
    assert response.json()["best"]["src"] == "c.jpg"


def test_resolve_without_descriptor_list():
    response = client.get("/srcset/resolve", params={"src": "fallback.jpg"})

    assert response.status_code == 200
    assert response.json() == {"best": None, "candidates": []}


def test_select_with_view():
    payload = {
        "candidates": [
            {"src": "a.jpg", "x": 2},
            {"src": "fallback.jpg"},
        ],
        "view": {"w": 1024, "h": 768, "x": 1},
    }
    response = client.post("/srcset/select", json=payload)

    assert response.status_code == 200
    assert response.json()["best"] == {"src": "fallback.jpg", "w": None, "h": None, "x": 1.0}


def test_select_rejects_empty_candidates():
    response = client.post("/srcset/select", json={"candidates": []})

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "EMPTY_CANDIDATE_SET"


def test_extract():
    html = '<img src="m.jpg" srcset="s.jpg 480w, m.jpg 768w, l.jpg 1400w">'
    response = client.post("/srcset/extract", json={"html": html, "view": {"w": 1000, "h": 800}})

    assert response.status_code == 200
    images = response.json()
    assert len(images) == 1
    assert images[0]["best"]["src"] == "l.jpg"
    assert images[0]["position"] == 1


def test_select_applies_candidate_defaults():
    payload = {
        "candidates": [
            {"src": "a.jpg", "x": 0},
            {"src": "b.jpg", "x": 2},
        ],
        "view": {"w": 1024, "h": 768, "x": 1},
    }
    response = client.post("/srcset/select", json=payload)

    # Zero density counts as unspecified (1x), so a.jpg is the smallest sufficient
    assert response.status_code == 200
    assert response.json()["best"] == {"src": "a.jpg", "w": None, "h": None, "x": 1.0}


def test_select_rejects_negative_values():
    response = client.post("/srcset/select", json={"candidates": [{"src": "b.jpg", "w": -5}]})
    assert response.status_code == 422

    payload = {"candidates": [{"src": "a.jpg"}], "view": {"w": -1}}
    response = client.post("/srcset/select", json=payload)
    assert response.status_code == 422


def test_partial_body_view_keeps_client_hints():
    candidates = [{"src": "s.jpg", "w": 400}, {"src": "l.jpg", "w": 1600}]
    headers = {"Viewport-Width": "300"}

    # 1. No view: width from hints
    response = client.post("/srcset/select", json={"candidates": candidates}, headers=headers)
    assert response.json()["best"]["src"] == "s.jpg"

    # 2. Only density given: width still from hints
    response = client.post("/srcset/select", json={"candidates": candidates, "view": {"x": 2}}, headers=headers)
    assert response.json()["best"]["src"] == "s.jpg"

    # 3. Explicit null width means unbounded
    response = client.post("/srcset/select", json={"candidates": candidates, "view": {"w": None}}, headers=headers)
    assert response.json()["best"]["src"] == "l.jpg"


def test_widths_are_returned_as_integers():
    response = client.get("/srcset/resolve", params={"srcset": SRCSET, "w": 500})

    widths = [c["w"] for c in response.json()["candidates"]]
    assert widths == [400, 800, 1200]
    assert all(isinstance(w, int) for w in widths)
