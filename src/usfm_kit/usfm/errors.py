# src/usfm_kit/usfm/errors.py


class UsfmError(ValueError):
    """Base error for USFM parsing.

    Carries the 1-based source line number when it is known.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.message = message
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)

    def at_line(self, line_number: int) -> "UsfmError":
        """Return a copy of this error bound to ``line_number``."""
        return type(self)(self.message, line_number)


class NotAMarkerError(UsfmError):
    """Line does not start with a backslash."""


class InvalidMarkerFormatError(UsfmError):
    """Line starts with a backslash but is not a well-formed marker."""


class InvalidChapterNumberError(UsfmError):
    pass


class InvalidVerseNumberError(UsfmError):
    pass


class UnknownMarkerError(UsfmError):
    def __init__(
        self, message: str, line_number: int | None = None, tag: str = ""
    ) -> None:
        super().__init__(message, line_number)
        self.tag = tag

    def at_line(self, line_number: int) -> "UnknownMarkerError":
        return UnknownMarkerError(self.message, line_number, tag=self.tag)


class InputReadError(UsfmError):
    """The underlying line source failed."""
