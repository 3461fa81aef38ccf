"""
Extract Layer - Pure I/O to the SMWS catalog API

This layer handles all external data fetching with no business logic.
- No imports from transform or load layers
- Returns the raw catalog records exactly as the API sends them
- Normalizes every failure into ApiError
"""
