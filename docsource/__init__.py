"""Control-plane core of the document source connector."""

from .__version__ import __version__

__all__ = ["__version__"]
