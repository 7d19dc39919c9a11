"""
Utility functions module.

Coercion rules shared by ingestion, the group builder and the timeline
builder, so every component reads loosely-typed plan fields the same way:
- sets: integer >= 1, anything unusable becomes 1
- restSec: number >= 0, anything unusable becomes the configured default
- groupNumber: trimmed string key, or None for standalone items
"""
