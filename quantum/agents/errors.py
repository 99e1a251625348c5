"""Failure kinds raised by the content-generation integration."""


class GenerationError(Exception):
    """Base class for content-generation failures."""


class QuotaExceededError(GenerationError):
    """The generation backend refused the request because a quota ran out."""


class CredentialError(GenerationError):
    """The generation backend is not configured or rejected the credentials."""


class UnexpectedGenerationError(GenerationError):
    """Any other failure: transport errors, server errors, malformed output."""
