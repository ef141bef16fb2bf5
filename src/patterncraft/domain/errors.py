"""Error taxonomy shared by the core and its collaborators."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A builder argument was rejected; builder state is left untouched."""


class CloneFailedError(RuntimeError):
    """A prototype could not construct its copy."""


class WriteFailedError(OSError):
    """A journal or render sink could not write its output."""


class ReadFailedError(OSError):
    """A journal could not be read back."""
