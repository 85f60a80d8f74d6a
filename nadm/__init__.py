from nadm.__version__ import __version__

__all__ = ["__version__"]
