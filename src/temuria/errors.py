"""Exception types raised by Temuria."""


class TemuriaError(Exception):
    """Base class for all Temuria errors."""


class ConfigurationError(TemuriaError):
    """A required setting (API key, backend, config file) is missing or invalid."""


class GenerationError(TemuriaError):
    """The article text could not be generated.

    Carries only a fixed, user-facing message; the upstream cause is kept
    on ``__cause__`` for logging.
    """

    DEFAULT_MESSAGE = "Failed to retrieve article from the archives."

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        super().__init__(message)


class ImageDiscoveryError(TemuriaError):
    """Image discovery produced no usable result.

    Never escapes ``ImageFinder.find_or_empty``.
    """
