"""
Generation errors.

Every failure of a generation call surfaces as a GenerationError whose
message is safe to show to the user. Diagnostic detail stays in the logs.
"""

GENERATION_FAILED_MESSAGE = (
    "Failed to generate story from prompts. "
    "The model might be overloaded or the input was invalid."
)
INVALID_STRUCTURE_MESSAGE = "Invalid JSON structure received from API."
EMPTY_INPUT_MESSAGE = "Please paste at least one story prompt."


class GenerationError(Exception):
    """Base exception for all generation failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class TransportOrFormatError(GenerationError):
    """
    Raised when the provider call fails or its text is not parseable JSON.

    Covers network errors, provider errors and malformed JSON.
    """

    def __init__(self, message: str = GENERATION_FAILED_MESSAGE):
        super().__init__(message)


class SchemaViolationError(GenerationError):
    """Raised when parsed JSON is missing or mistyping hook/storyPrompts."""

    def __init__(self, message: str = INVALID_STRUCTURE_MESSAGE):
        super().__init__(message)


class EmptyInputError(GenerationError):
    """Raised when the input has no non-blank lines; no request is sent."""

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE):
        super().__init__(message)
