"""Error taxonomy for the analysis workflow."""

from typing import Optional


class WorkflowError(Exception):
    """Base class for all workflow errors."""


class PreconditionError(WorkflowError):
    """An operation was requested in a state that does not allow it."""


class AnalysisError(WorkflowError):
    """A submission could not produce an AnalysisResult.

    ``user_message`` is the text shown in the Failed state.
    """

    def __init__(self, user_message: str, detail: str = ""):
        super().__init__(detail or user_message)
        self.user_message = user_message
        self.detail = detail


class RemoteRejection(AnalysisError):
    """The service answered with a non-2xx status."""

    def __init__(self, user_message: str, status_code: int, detail: str = ""):
        super().__init__(user_message, detail or f"HTTP {status_code}: {user_message}")
        self.status_code = status_code


class TransportFailure(AnalysisError):
    """No response was received (DNS, connection, timeout)."""


class MalformedResponse(AnalysisError):
    """A 2xx response whose body does not match the expected shape."""

    def __init__(self, user_message: str, detail: str = "", status_code: Optional[int] = None):
        super().__init__(user_message, detail)
        self.status_code = status_code
