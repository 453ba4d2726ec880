"""Errors raised by the calculator engines."""


class InvalidInput(ValueError):
    """A guarded calculator precondition was violated (e.g. non-positive area)."""
