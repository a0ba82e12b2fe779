"""Custom exceptions for GridSchema."""


class GridSchemaError(Exception):
    """Base exception for all GridSchema errors."""

    pass


class ConfigurationError(GridSchemaError):
    """Raised when configuration is invalid."""

    pass


class InvalidRangeError(GridSchemaError):
    """Raised when an address range cannot be resolved or is inverted."""

    pass


class InvalidAddressError(InvalidRangeError):
    """Raised when a cell address does not match the letters-then-digits pattern."""

    def __init__(self, address: str, reason: str | None = None):
        self.address = address
        message = f"Invalid cell address: {address!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class SheetNotFoundError(GridSchemaError):
    """Raised when a requested sheet does not exist in the workbook."""

    def __init__(self, sheet_name: str, available: list[str] | None = None):
        self.sheet_name = sheet_name
        self.available = available or []
        super().__init__(f"Sheet {sheet_name!r} not found")


class MalformedMergeRegionError(GridSchemaError):
    """Raised when a merge region cannot be consumed by the header traversal."""

    pass


class MissingWorkbookError(GridSchemaError):
    """Raised when an operation needs a workbook and none has been loaded."""

    pass


class TableNotFoundError(GridSchemaError):
    """Raised when no built table exists at the requested position."""

    def __init__(self, table_index: int, table_count: int):
        self.table_index = table_index
        self.table_count = table_count
        super().__init__(f"No table at index {table_index}; {table_count} tables built")


class UnknownColumnError(GridSchemaError):
    """Raised when a style assignment targets an identity absent from the tree."""

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__(f"No column with identity {identity!r}")


class ReaderError(GridSchemaError):
    """Raised when a workbook file cannot be read."""

    pass
