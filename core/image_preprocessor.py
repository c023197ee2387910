"""Preview derivation for selected images."""

import io
import logging
from typing import Tuple

from PIL import Image, ImageOps, UnidentifiedImageError

from core.utils import PreviewHandle, SelectedImage

logger = logging.getLogger(__name__)

PREVIEW_SIZE = (480, 360)


class ImagePreprocessor:
    """Turns raw image bytes into something the UI can display."""

    @staticmethod
    def create_preview(image: SelectedImage, size: Tuple[int, int] = PREVIEW_SIZE) -> PreviewHandle:
        """Create a PNG preview scaled to fit ``size``.

        Files Pillow cannot decode still get a handle wrapping the raw bytes
        (width and height 0), so the UI can fall back to showing the name.
        Validating content is the analysis service's job.
        """
        try:
            with Image.open(io.BytesIO(image.data)) as img:
                # Phone cameras store orientation in EXIF
                img = ImageOps.exif_transpose(img)
                img.thumbnail(size, Image.Resampling.LANCZOS)
                if img.mode not in ("RGB", "RGBA"):
                    img = img.convert("RGBA" if "A" in img.getbands() else "RGB")

                buffer = io.BytesIO()
                img.save(buffer, format="PNG")
                width, height = img.size
        except (UnidentifiedImageError, OSError, ValueError) as e:
            logger.info("No preview for %s (%s): %s", image.name, image.media_type, e)
            return PreviewHandle(data=image.data, media_type=image.media_type)

        return PreviewHandle(
            data=buffer.getvalue(),
            media_type="image/png",
            width=width,
            height=height,
        )
