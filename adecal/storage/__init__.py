"""Storage layer for exported calendar files."""

from adecal.storage.export_locator import ExportLocator

__all__ = [
    "ExportLocator",
]
