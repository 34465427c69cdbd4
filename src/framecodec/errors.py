"""Errors raised when an image does not satisfy an encoder's preconditions."""

# Names of the individual checks, reported in ImageFormatError.check
CHECK_DIMENSIONS = "dimensions"
CHECK_CHANNELS = "channels"
CHECK_ROW_STRIDE = "row_stride"
CHECK_CONTIGUOUS = "contiguous"
CHECK_BUFFER_LENGTH = "buffer_length"
CHECK_ALPHA = "alpha"
CHECK_EVEN_DIMENSIONS = "even_dimensions"


class ImageFormatError(ValueError):
    """An input image failed validation before any pixel was processed.

    Attributes:
        check: Name of the failed check (one of the CHECK_* constants).
        message: Human-readable description of the failure.
    """

    def __init__(self, check: str, message: str):
        # Both arguments go to args so the error survives pickling
        super().__init__(check, message)

    @property
    def check(self) -> str:
        return self.args[0]

    @property
    def message(self) -> str:
        return self.args[1]

    def __str__(self) -> str:
        return f"{self.check}: {self.message}"
