"""Sheetmark: page through a spreadsheet and mark the rows you have handled."""

__version__ = "0.1.0"
