class GootragoError(Exception):
    """Base class for every error the CLI reports to the user."""


class ConfigurationError(GootragoError):
    """Missing or inconsistent options, config file problems."""


class FileOperationError(GootragoError):
    """Reading or writing an input/output file failed."""


class InvalidColumnReference(GootragoError, ValueError):
    """A column reference that is neither a number nor a column letter."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"invalid column number: {token!r}")


class ColumnOutOfRange(GootragoError, ValueError):
    """A decoded column index outside of 1..row_width."""

    def __init__(self, token: str, row_width: int):
        self.token = token
        self.row_width = row_width
        super().__init__(
            f"column number is out of range: {token!r} (row has {row_width} columns)"
        )


class DispatcherError(GootragoError):
    """Any failure coming from the translation service boundary."""


class TranslationAuthError(DispatcherError):
    pass


class InvalidLanguageCode(DispatcherError):
    pass


class TranslationServiceError(DispatcherError):
    pass


class EmptyTranslationError(DispatcherError):
    pass


class TranslationLengthMismatch(DispatcherError):
    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(
            f"translation returned {received} strings for {expected} inputs"
        )
