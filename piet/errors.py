"""Exceptions raised by the Piet toolchain."""


class PietError(Exception):
    """Base class for all Piet errors."""


class ImageLoadError(PietError):
    """The program image could not be read, fetched or decoded."""


class PietRuntimeError(PietError):
    """Fatal condition that aborts a running program."""


class InvalidInputError(PietRuntimeError):
    """Input stream ended early or held a malformed number or character."""


class PietZeroDivisionError(PietRuntimeError):
    """Divide or mod with a zero divisor."""


class InvalidCharacterError(PietRuntimeError):
    """Value cannot be written as a Unicode character."""
