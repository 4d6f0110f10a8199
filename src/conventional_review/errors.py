# src/conventional_review/errors.py
class ReviewError(Exception):
    """Base class for errors that abort a review run."""


class ConfigurationError(ReviewError):
    """A required input is missing or invalid."""


class MalformedDiff(ReviewError):
    """The pull request diff could not be parsed as a unified diff."""


class DiffFetchFailed(ReviewError):
    """The pull request diff could not be downloaded."""


class ModelRequestFailed(ReviewError):
    """The generative model call failed (transport, auth or quota)."""


class PublishFailed(ReviewError):
    """The pull request review could not be created."""
