"""Exceptions raised while collecting sources and analyzing them."""


class SpecGeneratorError(Exception):
    """Base class for errors surfaced to the user."""


class ArchiveError(SpecGeneratorError):
    """The source archive is missing, unreadable or not a zip file."""


class NoSourcesFound(SpecGeneratorError):
    """No controller sources were found to analyze."""


class MalformedAIResponse(SpecGeneratorError):
    """The AI response contains no JSON object."""

    def __init__(self, message: str = "No valid JSON found in the AI response."):
        super().__init__(message)


class InvalidAnalysisJSON(SpecGeneratorError):
    """A JSON object was found but could not be parsed or validated."""


class CustomTemplateError(SpecGeneratorError):
    """The custom template file is unreadable or invalid."""


class InvalidTransition(SpecGeneratorError):
    """A generation session was moved out of order."""


class AIRequestError(SpecGeneratorError):
    """The AI provider call failed (authentication, network, rate limit)."""
