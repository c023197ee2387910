"""Shared dataclasses, configuration, launchers, and formatting helpers."""

import base64
import mimetypes
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Tuple


# --- Type aliases ---

Job = Callable[[], object]
DoneCallback = Callable[[object], None]
ErrorCallback = Callable[[Exception], None]
Launcher = Callable[[Job, DoneCallback, ErrorCallback], None]  # (job, on_done, on_error)


# --- Constants ---

DEFAULT_API_URL = "http://localhost:3001"
DEFAULT_TIMEOUT_S = 60.0
FALLBACK_MEDIA_TYPE = "application/octet-stream"

# Used only to filter the file picker; the controller never relies on it.
SUPPORTED_IMAGE_EXTENSIONS = {
    ".jpg", ".jpeg", ".png", ".bmp", ".gif", ".webp", ".tif", ".tiff", ".heic",
}


# --- Dataclasses ---

@dataclass(frozen=True)
class SelectedImage:
    """The image chosen by the user for the current workflow cycle."""
    name: str
    data: bytes = field(repr=False)
    media_type: str = FALLBACK_MEDIA_TYPE

    @property
    def size_bytes(self) -> int:
        return len(self.data)

    @classmethod
    def from_path(cls, file_path: str) -> "SelectedImage":
        """Read a file from disk. The media type is guessed from the extension."""
        path = Path(file_path)
        media_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            data=path.read_bytes(),
            media_type=media_type or FALLBACK_MEDIA_TYPE,
        )


@dataclass(frozen=True)
class PreviewHandle:
    """Display-only rendition of a SelectedImage."""
    data: bytes = field(repr=False)
    media_type: str
    width: int = 0
    height: int = 0

    @property
    def data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.media_type};base64,{encoded}"

    @property
    def is_renderable(self) -> bool:
        return self.width > 0 and self.height > 0


@dataclass(frozen=True)
class Condition:
    """A single condition reported by the analysis service."""
    name: str
    confidence: int  # percentage, 0-100
    description: str = ""


@dataclass(frozen=True)
class AnalysisResult:
    """Validated response of the analysis service.

    Alternatives keep the order the server sent them in.
    """
    primary: Condition
    alternatives: Tuple[Condition, ...] = ()

    @property
    def condition(self) -> str:
        return self.primary.name

    @property
    def confidence(self) -> int:
        return self.primary.confidence

    @property
    def description(self) -> str:
        return self.primary.description


@dataclass
class ClientConfig:
    """Connection settings for the remote analysis service."""
    base_url: str = DEFAULT_API_URL
    timeout_s: float = DEFAULT_TIMEOUT_S

    def __post_init__(self):
        self.base_url = self.base_url.rstrip("/")

    @property
    def analyze_url(self) -> str:
        return f"{self.base_url}/analyze"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build the config from SKINEVAL_API_URL and SKINEVAL_API_TIMEOUT."""
        base_url = os.environ.get("SKINEVAL_API_URL") or DEFAULT_API_URL
        raw_timeout = os.environ.get("SKINEVAL_API_TIMEOUT", "")
        try:
            timeout_s = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_S
        except ValueError:
            timeout_s = DEFAULT_TIMEOUT_S
        if timeout_s <= 0:
            timeout_s = DEFAULT_TIMEOUT_S
        return cls(base_url=base_url, timeout_s=timeout_s)


# --- Launchers ---

def run_inline(job: Job, on_done: DoneCallback, on_error: ErrorCallback) -> None:
    """Run a job synchronously on the calling thread."""
    try:
        value = job()
    except Exception as e:
        on_error(e)
        return
    on_done(value)


# --- Formatting ---

def format_file_size(size_bytes: int) -> str:
    """Format byte count as human-readable string."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f} MB"
    return f"{size_bytes / (1024 * 1024 * 1024):.1f} GB"


def format_confidence(confidence: int) -> str:
    """Format an integer percentage for display."""
    return f"{confidence}%"


def is_supported_extension(file_path: str) -> bool:
    return Path(file_path).suffix.lower() in SUPPORTED_IMAGE_EXTENSIONS


def describe_image(image: Optional[SelectedImage]) -> str:
    """Short "name (size)" label for an image, empty when none is held."""
    if image is None:
        return ""
    return f"{image.name} ({format_file_size(image.size_bytes)})"
