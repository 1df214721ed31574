"""Custom exception hierarchy for the twiml_builder package."""


class TwiMLBuilderError(Exception):
    """Base exception for all twiml_builder errors."""


class InvalidArgumentError(TwiMLBuilderError, TypeError):
    """Raised when a verb receives an argument of an unsupported shape."""

    def __init__(self, verb: str, message: str | None = None) -> None:
        self.verb = verb
        super().__init__(message or f"{verb} expects String or Options argument")


class BuilderStateError(TwiMLBuilderError):
    """Raised when a finished builder is asked for another element."""


class MarkupError(TwiMLBuilderError, ValueError):
    """Raised when a tag, attribute name or text cannot be written as XML."""

    def __init__(self, tag: str, message: str) -> None:
        self.tag = tag
        super().__init__(message)
