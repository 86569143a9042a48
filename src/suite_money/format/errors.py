class MonetaryParseError(ValueError):
    """Raised when text cannot be parsed into a monetary amount.

    Attributes:
        text (str): The original input text.
        error_index (int): Zero-based position of the problem. Always 0, since
            parsing does not diagnose partial positions.
    """

    def __init__(self, message: str, text: str, error_index: int = 0):
        super().__init__(message)
        self.text = text
        self.error_index = error_index


class MalformedTextError(MonetaryParseError):
    """Raised when text does not consist of exactly two space separated tokens."""

    pass


class UnresolvableAmountError(MonetaryParseError):
    """Raised when neither token order yields a known currency code and a decimal literal."""

    pass
