"""
Custom exceptions for manual page generation.
"""


class ManPageError(Exception):
    """Base exception for manual page generation."""

    pass


class CommandNotFoundError(ManPageError):
    """Requested command matches no top-level grammar node."""

    def __init__(self, name: str):
        super().__init__(f"unknown command '{name}'")
        self.name = name


class ArgumentCollectionError(ManPageError):
    """Argument entry storage could not grow."""

    pass


class ChildLookupError(ManPageError):
    """Child reference of a grammar node cannot be resolved."""

    pass


class GrammarLoadError(ManPageError):
    """Grammar document is unreadable or not a grammar."""

    pass
