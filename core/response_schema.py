"""Validated parsing of analysis service response bodies."""

from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError

from core.errors import MalformedResponse
from core.utils import AnalysisResult, Condition
from i18n import t

Percentage = Annotated[StrictInt, Field(ge=0, le=100)]

ERROR_MESSAGE_FIELDS = ("message", "error")


class AlternativeBody(BaseModel):
    name: StrictStr = Field(min_length=1)
    confidence: Percentage


class AnalysisBody(BaseModel):
    """Success body of ``POST /analyze``. Unknown fields are ignored."""
    condition: StrictStr = Field(min_length=1)
    confidence: Percentage
    description: StrictStr
    alternatives: Optional[List[AlternativeBody]] = None

    def to_result(self) -> AnalysisResult:
        return AnalysisResult(
            primary=Condition(
                name=self.condition,
                confidence=self.confidence,
                description=self.description,
            ),
            alternatives=tuple(
                Condition(name=alt.name, confidence=alt.confidence)
                for alt in self.alternatives or ()
            ),
        )


def parse_analysis_result(body: Any) -> AnalysisResult:
    """Validate a decoded JSON body and build an AnalysisResult.

    Raises MalformedResponse when the body does not match the schema.
    Out-of-range or non-integer confidences are rejected, never clamped.
    """
    try:
        parsed = AnalysisBody.model_validate(body)
    except ValidationError as e:
        raise MalformedResponse(
            t("errors.malformed_response"),
            detail=f"{e.error_count()} validation error(s): {_summarize(e)}",
        ) from e
    return parsed.to_result()


def extract_error_message(body: Any) -> Optional[str]:
    """Pick the human-readable message out of an error body.

    ``message`` wins over ``error``; blank or non-string values are skipped.
    """
    if not isinstance(body, dict):
        return None
    for key in ERROR_MESSAGE_FIELDS:
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _summarize(error: ValidationError) -> str:
    parts = []
    for item in error.errors()[:3]:
        location = ".".join(str(p) for p in item.get("loc", ())) or "body"
        parts.append(f"{location}: {item.get('msg', '')}")
    return "; ".join(parts)
