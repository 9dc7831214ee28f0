"""Compatibility module for the engine entry points.

The implementation lives in `core.py`; this module keeps the historical
`configseal.main` import path working.
"""

from .core import cli, configseal, main

__all__ = ["cli", "configseal", "main"]
