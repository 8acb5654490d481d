"""Core business logic layer.

Subpackages:
- days: weekday name resolution and day lookup in a weekly menu
- message: block building, image enrichment and menu message composition
- commands: slash command interpretation
"""
__all__ = ["days", "message", "commands"]
