"""Exceptions raised by the summary pipeline."""


class SummaryError(Exception):
    """Base class for failures that abort a summary run."""


class DataIntegrityError(SummaryError):
    """Raised when the source data violates an expectation of the pipeline."""

    def __init__(self, message: str) -> None:
        super().__init__(f"data integrity error: {message}")


class MalformedInputError(SummaryError):
    """Raised when the input file cannot be read as a rectangular table."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        super().__init__(f"could not read csv '{source}': {message}")
