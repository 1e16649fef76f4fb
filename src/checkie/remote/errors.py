"""Failure taxonomy of the remote move/hint collaborator."""

from __future__ import annotations


class AdvisorError(Exception):
    """Base class for every remote advisor failure."""


class RequestFailed(AdvisorError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"API request failed: {detail}")


class ParseError(AdvisorError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to parse API response: {detail}")


class NoApiKey(AdvisorError):
    def __init__(self) -> None:
        super().__init__(
            "API key not found - set GEMINI_API_KEY to enable remote suggestions"
        )


class NoModel(AdvisorError):
    def __init__(self) -> None:
        super().__init__("Model not configured - set GEMINI_MODEL")


class InvalidResponseFormat(AdvisorError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Response format is invalid: {detail}")


class NoPossibleMoves(AdvisorError):
    def __init__(self) -> None:
        super().__init__("No possible moves available.")


class AdvisorTimeout(AdvisorError):
    def __init__(self, seconds: float) -> None:
        super().__init__(f"No answer within {seconds:g}s")
        self.seconds = seconds
