"""stribot: current outdoor temperature from the TGK and NSU pages."""

from .version import __version__

__all__ = ["__version__"]
