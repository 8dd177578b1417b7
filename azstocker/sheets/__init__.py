from .client import GoogleSheetsClient, SheetError


__all__ = [
    "GoogleSheetsClient",
    "SheetError",
]
