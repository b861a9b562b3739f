class TableDataError(Exception):
    """Base class for failures raised by the conversion core."""


class DecodeError(TableDataError):
    """Input bytes (or an edit form) could not be turned into rows."""


class UnsupportedFormatError(TableDataError):
    """No codec is registered for the requested file type."""
