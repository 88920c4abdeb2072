"""Exception hierarchy for Sheetmark."""


class SheetmarkError(Exception):
    """Base error for all user-facing Sheetmark exceptions."""


class ParseError(SheetmarkError):
    """Raised when an imported file cannot be turned into rows."""


class PersistenceError(SheetmarkError):
    """Raised when a store operation fails to commit."""


class ValidationError(SheetmarkError):
    """Raised when a patch, row index or page request is malformed."""


__all__ = ["SheetmarkError", "ParseError", "PersistenceError", "ValidationError"]
