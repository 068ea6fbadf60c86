"""Error types raised by the matching services.

The API layer turns these into HTTP responses; the message is what the
student sees.
"""


class AnalysisError(Exception):
    """Base class for errors surfaced to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(AnalysisError):
    """Missing resume text, unsupported file type, or file too large."""


class ExtractionFailure(AnalysisError):
    """The PDF text extraction collaborator could not produce text."""


class ApplicationError(AnalysisError):
    """Duplicate application or illegal review transition."""
