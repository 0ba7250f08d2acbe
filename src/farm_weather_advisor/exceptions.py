"""Application exception classes."""


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class JournalError(Exception):
    """Raised when writing to journal files fails."""


class WeatherProviderError(Exception):
    """Raised when weather provider requests or normalization fail."""


class AnalysisError(Exception):
    """Raised when agronomic weather analysis cannot be produced."""


class InsufficientDataError(AnalysisError):
    """Raised when the forecast sequence is too short to analyze."""

    def __init__(self, message: str, *, required: int = 1, supplied: int = 0) -> None:
        super().__init__(message)
        self.required = required
        self.supplied = supplied
