"""Analysis workflow controller: select an image, submit it, show results, reset.

The controller is the single owner of the workflow state. Each state is an
immutable payload, so contradictory combinations (results next to an error,
a spinner next to results) cannot be represented. Background work goes
through a launcher; every job captures the generation token current at
launch, and completions carrying an outdated token are dropped.
"""

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, List, Optional, Union

from core.analysis_client import AnalysisClient
from core.errors import AnalysisError, PreconditionError
from core.image_preprocessor import ImagePreprocessor
from core.utils import AnalysisResult, Launcher, PreviewHandle, SelectedImage, run_inline
from i18n import t

logger = logging.getLogger(__name__)


class WorkflowStatus(Enum):
    IDLE = "idle"
    IMAGE_SELECTED = "image_selected"
    SUBMITTING = "submitting"
    RESULTS_READY = "results_ready"
    FAILED = "failed"


# --- States ---

@dataclass(frozen=True)
class Idle:
    status = WorkflowStatus.IDLE


@dataclass(frozen=True)
class ImageSelected:
    image: SelectedImage
    preview: Optional[PreviewHandle] = None
    status = WorkflowStatus.IMAGE_SELECTED


@dataclass(frozen=True)
class Submitting:
    image: SelectedImage
    preview: Optional[PreviewHandle] = None
    status = WorkflowStatus.SUBMITTING


@dataclass(frozen=True)
class ResultsReady:
    result: AnalysisResult
    status = WorkflowStatus.RESULTS_READY


@dataclass(frozen=True)
class Failed:
    message: str
    image: Optional[SelectedImage] = None
    preview: Optional[PreviewHandle] = None
    status = WorkflowStatus.FAILED


WorkflowState = Union[Idle, ImageSelected, Submitting, ResultsReady, Failed]
StateListener = Callable[[WorkflowState], None]
PreviewFactory = Callable[[SelectedImage], PreviewHandle]


@dataclass(frozen=True)
class ViewState:
    """What the rendering layer needs to know, derived from a WorkflowState."""
    status: WorkflowStatus
    image: Optional[SelectedImage] = None
    preview: Optional[PreviewHandle] = None
    result: Optional[AnalysisResult] = None
    error_message: str = ""

    @classmethod
    def from_state(cls, state: WorkflowState) -> "ViewState":
        return cls(
            status=state.status,
            image=getattr(state, "image", None),
            preview=getattr(state, "preview", None),
            result=getattr(state, "result", None),
            error_message=getattr(state, "message", ""),
        )

    @property
    def show_results(self) -> bool:
        return self.result is not None

    @property
    def is_loading(self) -> bool:
        return self.status == WorkflowStatus.SUBMITTING

    @property
    def can_submit(self) -> bool:
        return self.image is not None and self.status in (
            WorkflowStatus.IMAGE_SELECTED,
            WorkflowStatus.FAILED,
        )

    @property
    def has_alternatives(self) -> bool:
        return self.result is not None and len(self.result.alternatives) > 0


class WorkflowController:
    """Drives one image through the upload/analyze/result/reset cycle."""

    def __init__(
        self,
        client: Optional[AnalysisClient] = None,
        launcher: Launcher = run_inline,
        preview_factory: PreviewFactory = ImagePreprocessor.create_preview,
    ):
        self._client = client or AnalysisClient()
        self._launcher = launcher
        self._preview_factory = preview_factory
        self._state: WorkflowState = Idle()
        self._generation = 0
        self._listeners: List[StateListener] = []

    # --- Read access ---

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def status(self) -> WorkflowStatus:
        return self._state.status

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def selected_image(self) -> Optional[SelectedImage]:
        return getattr(self._state, "image", None)

    @property
    def preview(self) -> Optional[PreviewHandle]:
        return getattr(self._state, "preview", None)

    @property
    def view_state(self) -> ViewState:
        return ViewState.from_state(self._state)

    def subscribe(self, listener: StateListener):
        """Call ``listener(state)`` after every transition."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: StateListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- Intents ---

    def select_image(self, image: SelectedImage) -> int:
        """Hold ``image`` for this cycle and start deriving its preview.

        Any previous image, result or error is dropped. Returns the new
        generation token.
        """
        if image is None:
            raise ValueError("select_image() requires an image")

        self._generation += 1
        generation = self._generation
        logger.info(
            "Selected %s (%s, %d bytes), generation %d",
            image.name, image.media_type, image.size_bytes, generation,
        )
        self._set_state(ImageSelected(image=image))
        self._launcher(
            partial(self._preview_factory, image),
            partial(self._on_preview_ready, generation),
            partial(self._on_preview_failed, generation),
        )
        return generation

    def submit(self) -> int:
        """Send the held image for analysis.

        Raises PreconditionError, without side effects, when no image is held
        or a submission is already in flight.
        """
        state = self._state
        if isinstance(state, Submitting):
            raise PreconditionError(t("errors.already_submitting"))
        if not isinstance(state, (ImageSelected, Failed)) or state.image is None:
            raise PreconditionError(t("errors.no_image"))

        generation = self._generation
        image = state.image
        logger.info("Submitting %s, generation %d", image.name, generation)
        self._set_state(Submitting(image=image, preview=state.preview))
        self._launcher(
            partial(self._client.analyze, image),
            partial(self._on_analysis_done, generation),
            partial(self._on_analysis_failed, generation),
        )
        return generation

    def retry(self) -> int:
        """Re-submit the image held by a Failed state."""
        if not isinstance(self._state, Failed):
            raise PreconditionError(t("errors.nothing_to_retry"))
        return self.submit()

    def reset(self):
        """Drop everything and return to Idle. Valid from any state."""
        self._generation += 1
        logger.info("Workflow reset, generation %d", self._generation)
        self._set_state(Idle())

    def close(self):
        self._client.close()

    # --- Completions ---

    def _is_stale(self, generation: int, what: str) -> bool:
        if generation != self._generation:
            logger.debug(
                "Discarding %s for generation %d (current %d)",
                what, generation, self._generation,
            )
            return True
        return False

    def _on_preview_ready(self, generation: int, preview: PreviewHandle):
        if self._is_stale(generation, "preview"):
            return
        state = self._state
        if isinstance(state, (ImageSelected, Submitting, Failed)) and state.image is not None:
            self._set_state(dataclasses.replace(state, preview=preview))

    def _on_preview_failed(self, generation: int, error: Exception):
        if self._is_stale(generation, "preview error"):
            return
        logger.warning("Preview derivation failed: %s", error)

    def _on_analysis_done(self, generation: int, result: AnalysisResult):
        if self._is_stale(generation, "analysis result"):
            return
        logger.info(
            "Analysis finished: %s (%d%%), %d alternative(s)",
            result.condition, result.confidence, len(result.alternatives),
        )
        self._set_state(ResultsReady(result=result))

    def _on_analysis_failed(self, generation: int, error: Exception):
        if self._is_stale(generation, "analysis error"):
            return
        if isinstance(error, AnalysisError):
            logger.warning("Analysis failed: %s", error)
            message = error.user_message
        else:
            logger.error("Unexpected error during analysis", exc_info=error)
            message = t("errors.generic")

        state = self._state
        self._set_state(Failed(
            message=message,
            image=getattr(state, "image", None),
            preview=getattr(state, "preview", None),
        ))

    def _set_state(self, new_state: WorkflowState):
        old_state = self._state
        self._state = new_state
        logger.debug("%s -> %s", old_state.status.value, new_state.status.value)
        for listener in list(self._listeners):
            listener(new_state)
