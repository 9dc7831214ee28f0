"""Package version; ``configseal.ENGINE_VERSION`` is the single source."""

from .main import configseal

__version__ = configseal.ENGINE_VERSION

__all__ = ["__version__"]
