class RegisterError(Exception):
    """Base class for exceptions in this module."""

    ...


class NamedFunctionRequiredError(RegisterError):
    """Raised when a predicate is registered without a name."""

    def __init__(self, fn: object = None):
        self.fn = fn
        super().__init__("predicate function missing name")
