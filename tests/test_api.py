import base64
import io

import numpy as np
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from helpers import document, rgba
from sealcut.api.server import app

client = TestClient(app)


def _png_bytes() -> bytes:
    buf = io.BytesIO()
    rgba(document()).save(buf, "PNG")
    return buf.getvalue()


def _decode_png(data: str) -> np.ndarray:
    return np.array(Image.open(io.BytesIO(base64.b64decode(data))))


def test_health():
    assert client.get("/health").json() == {"status": "healthy"}


def test_palette():
    assert client.get("/palette").json()["colors"]["classic-seal"] == "#d90000"


def test_extract_red_seal():
    resp = client.post(
        "/extract",
        files={"image": ("doc.png", _png_bytes(), "image/png")},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["settings"]["detection_mode"] == "red"
    assert body["coverage"] == 6 / 48

    seal = _decode_png(body["files"]["seal"])
    assert seal.shape == (6, 8, 4)
    assert body["previews"]["seal"].startswith("data:image/png;base64,")


def test_extract_black_seal_with_palette_color_upscaled_and_traced():
    resp = client.post(
        "/extract",
        files={"image": ("doc.png", _png_bytes(), "image/png")},
        data={
            "detection_mode": "black",
            "target_color": "trust-navy",
            "scale": "2",
            "vectorize": "true",
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["settings"]["target_color"] == "#1e3a8a"
    assert _decode_png(body["files"]["upscaled"]).shape == (12, 16, 4)
    assert "<svg" in body["files"]["svg"]
    assert set(body["files_generated"]) == {"seal", "upscaled", "svg"}


def test_rejects_non_image_upload():
    resp = client.post(
        "/extract",
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )
    assert resp.status_code == 400


def test_rejects_undecodable_image():
    resp = client.post(
        "/extract",
        files={"image": ("doc.png", b"not really a png", "image/png")},
    )
    assert resp.status_code == 400


def test_rejects_unknown_mode():
    resp = client.post(
        "/extract",
        files={"image": ("doc.png", _png_bytes(), "image/png")},
        data={"detection_mode": "blue"},
    )
    assert resp.status_code == 400


@pytest.mark.parametrize("scale", ["inf", "nan", "0", "-1"])
def test_rejects_invalid_scale(scale):
    resp = client.post(
        "/extract",
        files={"image": ("doc.png", _png_bytes(), "image/png")},
        data={"scale": scale},
    )
    assert resp.status_code == 400
