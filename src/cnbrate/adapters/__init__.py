# src/cnbrate/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (CNB HTTP feed)
- Parsing (CNB text format)
- Formatting (console output)
"""

__all__ = []
