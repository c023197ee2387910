"""Tests for core.utils module."""

import base64

import pytest

from core.utils import (
    AnalysisResult,
    Condition,
    PreviewHandle,
    SelectedImage,
    describe_image,
    format_confidence,
    format_file_size,
    is_supported_extension,
    run_inline,
    SUPPORTED_IMAGE_EXTENSIONS,
)


class TestFormatFileSize:
    def test_bytes(self):
        assert format_file_size(500) == "500 B"

    def test_kilobytes(self):
        assert format_file_size(2048) == "2.0 KB"

    def test_megabytes(self):
        assert format_file_size(5 * 1024 * 1024) == "5.0 MB"

    def test_gigabytes(self):
        assert format_file_size(2 * 1024 * 1024 * 1024) == "2.0 GB"

    def test_zero(self):
        assert format_file_size(0) == "0 B"


class TestFormatConfidence:
    def test_percent(self):
        assert format_confidence(82) == "82%"

    def test_bounds(self):
        assert format_confidence(0) == "0%"
        assert format_confidence(100) == "100%"


class TestSelectedImage:
    def test_from_path(self, sample_jpeg_file):
        image = SelectedImage.from_path(sample_jpeg_file)
        assert image.name == "lesion.jpg"
        assert image.media_type == "image/jpeg"
        assert image.size_bytes > 0

    def test_unknown_extension(self, tmp_dir):
        path = tmp_dir / "scan.zzz"
        path.write_bytes(b"\x00\x01\x02")
        image = SelectedImage.from_path(str(path))
        assert image.media_type == "application/octet-stream"
        assert image.data == b"\x00\x01\x02"

    def test_missing_file(self, tmp_dir):
        with pytest.raises(OSError):
            SelectedImage.from_path(str(tmp_dir / "nope.jpg"))

    def test_repr_hides_bytes(self, jpeg_image):
        assert "data" not in repr(jpeg_image)

    def test_describe(self):
        image = SelectedImage(name="arm.jpg", data=b"x" * 2048, media_type="image/jpeg")
        assert describe_image(image) == "arm.jpg (2.0 KB)"

    def test_describe_none(self):
        assert describe_image(None) == ""


class TestPreviewHandle:
    def test_data_url(self):
        handle = PreviewHandle(data=b"abc", media_type="image/png", width=1, height=1)
        assert handle.data_url == "data:image/png;base64," + base64.b64encode(b"abc").decode()

    def test_renderable(self):
        assert PreviewHandle(data=b"", media_type="image/png", width=4, height=3).is_renderable
        assert not PreviewHandle(data=b"", media_type="text/plain").is_renderable


class TestAnalysisResult:
    def test_primary_accessors(self, eczema_result):
        assert eczema_result.condition == "Eczema"
        assert eczema_result.confidence == 82
        assert eczema_result.description == "Inflamed, itchy patches of skin."

    def test_default_alternatives(self):
        result = AnalysisResult(primary=Condition("Acne", 55))
        assert result.alternatives == ()
        assert result.description == ""


class TestExtensions:
    def test_supported(self):
        assert is_supported_extension("/photos/ARM.JPG")
        assert is_supported_extension("hand.webp")

    def test_unsupported(self):
        assert not is_supported_extension("notes.txt")
        assert not is_supported_extension("no_extension")

    def test_set_contents(self):
        assert ".png" in SUPPORTED_IMAGE_EXTENSIONS
        assert ".dcm" not in SUPPORTED_IMAGE_EXTENSIONS


class TestRunInline:
    def test_value_delivered(self):
        done, errors = [], []
        run_inline(lambda: 42, done.append, errors.append)
        assert done == [42]
        assert errors == []

    def test_exception_delivered(self):
        done, errors = [], []

        def job():
            raise RuntimeError("boom")

        run_inline(job, done.append, errors.append)
        assert done == []
        assert isinstance(errors[0], RuntimeError)
