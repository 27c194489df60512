"""Abstract Factory demonstration: cross-platform widget families."""

from guifactory._version import (
    __version__, __app_name__, BASE_VERSION, PIP_VERSION,
)

__all__ = ['__version__', '__app_name__', 'BASE_VERSION', 'PIP_VERSION']
