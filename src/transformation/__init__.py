"""
Transform Layer - Pure Presentation Helpers

Formatting and ordering of catalog records fetched by the extract layer.
- No I/O
- Never mutates its inputs
- Never raises on malformed field values
"""
