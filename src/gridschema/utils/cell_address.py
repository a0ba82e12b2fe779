"""Conversion between A1-style cell addresses and zero-based coordinates."""

import re

from ..core.constants import ADDRESSING
from ..core.exceptions import InvalidAddressError

_ADDRESS_RE = re.compile(ADDRESSING.ADDRESS_PATTERN)
_COLUMN_RE = re.compile(r"[A-Z]+")


def column_to_index(letters: str) -> int:
    """Convert a column letter run to a zero-based column index.

    Letters form a bijective base-26 numeral: A=0, Z=25, AA=26, AZ=51, BA=52.

    Raises:
        InvalidAddressError: If the letters are empty or not A-Z.
    """
    letters = letters.strip().upper()
    if not _COLUMN_RE.fullmatch(letters):
        raise InvalidAddressError(letters, "column must be letters A-Z")

    col = 0
    for char in letters:
        col = col * ADDRESSING.ALPHABET_SIZE + (ord(char) - ord(ADDRESSING.FIRST_LETTER) + 1)
    return col - 1


def index_to_column(index: int) -> str:
    """Convert a zero-based column index to its letter run."""
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")

    result = ""
    while index >= 0:
        result = chr(index % ADDRESSING.ALPHABET_SIZE + ord(ADDRESSING.FIRST_LETTER)) + result
        index = index // ADDRESSING.ALPHABET_SIZE - 1
    return result


def decode_address(address: str) -> tuple[int, int]:
    """
    Decode an A1-style address into a zero-based ``(row, col)`` pair.

    Args:
        address: Address such as ``"M5"``. Case-insensitive, surrounding
            whitespace is ignored.

    Returns:
        Tuple of ``(row, col)``, both zero-based

    Raises:
        InvalidAddressError: If the address is not letters followed by digits,
            or the row number is zero.
    """
    if not isinstance(address, str):
        raise InvalidAddressError(str(address), "address must be a string")

    match = _ADDRESS_RE.fullmatch(address.strip().upper())
    if not match:
        raise InvalidAddressError(address, "expected letters followed by digits")

    col_str, row_str = match.groups()
    row = int(row_str) - 1
    if row < 0:
        raise InvalidAddressError(address, "row numbers start at 1")

    return row, column_to_index(col_str)


def encode_address(row: int, col: int) -> str:
    """Encode a zero-based ``(row, col)`` pair as an A1-style address."""
    if row < 0:
        raise ValueError(f"Row index must be non-negative, got {row}")
    return f"{index_to_column(col)}{row + 1}"
