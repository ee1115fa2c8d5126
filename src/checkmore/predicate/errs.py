class PredicateError(Exception):
    """Base Predicate exception."""

    ...


class ArgumentTypeError(PredicateError, TypeError):
    """
    Raised when an argument of a predicate or a batch check has the wrong shape.
    """

    def __init__(self, message: str, value: object = None):
        self.value = value
        super().__init__(message)


class VerificationFailedError(PredicateError, AssertionError):
    """
    Raised by verify variants when the underlying check returns False.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
