"""
Sheet ingestion and normalization module.

Turns spreadsheet value grids into row dictionaries and rows into the
immutable story records consumed by the matcher and the reports.
"""
