"""Tool for resolving a pair of corner addresses into a header range."""

from ...core.exceptions import InvalidRangeError
from ...models.table import TableRange
from ...utils.cell_address import decode_address


def resolve_range(start_address: str, end_address: str) -> TableRange:
    """
    Resolve two A1-style addresses into an inclusive range.

    The range is not checked against the sheet's populated extent; cells
    outside it simply read as empty.

    Args:
        start_address: Top-left corner, e.g. ``"A3"``
        end_address: Bottom-right corner, e.g. ``"M5"``

    Returns:
        The resolved TableRange

    Raises:
        InvalidAddressError: If either address fails to decode. This is a
            subclass of InvalidRangeError.
        InvalidRangeError: If the end precedes the start on either axis.
    """
    start_row, start_col = decode_address(start_address)
    end_row, end_col = decode_address(end_address)

    if end_row < start_row or end_col < start_col:
        raise InvalidRangeError(f"Range end {end_address!r} precedes start {start_address!r}")

    return TableRange(start_row=start_row, start_col=start_col, end_row=end_row, end_col=end_col)
