"""Schedule export/import helpers."""
