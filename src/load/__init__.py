"""
Load Layer - Catalog Snapshots

This layer handles local persistence of fetched catalogs.
- Local file storage (Parquet, JSON)
- No business logic, just I/O operations
"""
