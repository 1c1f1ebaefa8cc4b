"""
Blocking reads for the two input instructions.

Both helpers work on a binary stream so that number and character reads
can be interleaved on the same input without buffering surprises.
"""

import re
from typing import BinaryIO

from .errors import InvalidInputError

# ASCII digits only, optional sign
NUMBER_RE = re.compile(r"[+-]?[0-9]+")


def _utf8_length(lead: int) -> int:
    """Sequence length announced by a UTF-8 leading byte."""
    if lead < 0x80:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    raise InvalidInputError(f"Invalid UTF-8 leading byte: 0x{lead:02x}")


def read_utf8_char(stream: BinaryIO) -> str:
    """Read exactly one UTF-8 encoded character."""
    lead = stream.read(1)
    if not lead:
        raise InvalidInputError("Unexpected end of input while reading a character")

    length = _utf8_length(lead[0])
    rest = stream.read(length - 1) if length > 1 else b''
    if len(rest) != length - 1:
        raise InvalidInputError("Truncated UTF-8 sequence in input")

    try:
        return (lead + rest).decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"Malformed UTF-8 in input: {e}") from e


def read_number_line(stream: BinaryIO) -> int:
    """Read one line and parse it as a signed decimal integer."""
    line = stream.readline()
    if not line:
        raise InvalidInputError("Unexpected end of input while reading a number")

    try:
        text = line.decode('utf-8').strip()
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"Malformed UTF-8 in input: {e}") from e

    if not NUMBER_RE.fullmatch(text):
        raise InvalidInputError(f"Not a number: {text!r}")
    return int(text)
