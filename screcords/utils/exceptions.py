class StoreUnavailableError(RuntimeError):
    """The configuration store could not be queried (not running, not populated yet, timed out)."""


class MalformedTreeError(ValueError):
    """A subkey dump has unbalanced braces and cannot be flattened."""

    def __init__(self, message: str, subkey: str | None = None):
        super().__init__(message)
        self.subkey = subkey
