"""Shared test fixtures for SkinEval."""

import io
import os
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import numpy as np
import pytest
import requests
from PIL import Image

from core.utils import AnalysisResult, Condition, SelectedImage
from helpers import DeferredLauncher


def _image_bytes(size, fmt: str, mode: str = "RGB") -> bytes:
    shape = (size[1], size[0], 3) if mode == "RGB" else (size[1], size[0])
    img = Image.fromarray(np.random.randint(0, 255, shape, dtype=np.uint8))
    buffer = io.BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def jpeg_image():
    """A 640x480 JPEG, as a phone camera would produce."""
    return SelectedImage(name="arm.jpg", data=_image_bytes((640, 480), "JPEG"), media_type="image/jpeg")


@pytest.fixture
def png_image():
    """A small grayscale PNG."""
    return SelectedImage(name="hand.png", data=_image_bytes((64, 48), "PNG", mode="L"), media_type="image/png")


@pytest.fixture
def not_an_image():
    return SelectedImage(name="notes.txt", data=b"definitely not pixels", media_type="text/plain")


@pytest.fixture
def sample_jpeg_file(tmp_dir):
    path = tmp_dir / "lesion.jpg"
    path.write_bytes(_image_bytes((224, 224), "JPEG"))
    return str(path)


@pytest.fixture
def eczema_body():
    return {
        "condition": "Eczema",
        "confidence": 82,
        "description": "Inflamed, itchy patches of skin.",
        "alternatives": [{"name": "Psoriasis", "confidence": 41}],
    }


@pytest.fixture
def eczema_result():
    return AnalysisResult(
        primary=Condition("Eczema", 82, "Inflamed, itchy patches of skin."),
        alternatives=(Condition("Psoriasis", 41),),
    )


@pytest.fixture
def session():
    """A requests.Session stand-in whose post() the test configures."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def deferred_launcher():
    return DeferredLauncher()


@pytest.fixture(autouse=True)
def _init_i18n():
    """Initialize i18n in English for all tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    import i18n
    i18n.init("en")
