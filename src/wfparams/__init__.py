# src/wfparams/__init__.py
try:
    from .wfparams_version import __version__
except ImportError:
    try:
        from importlib.metadata import version, PackageNotFoundError
        __version__ = version("wfparams")
    except (ImportError, PackageNotFoundError):
        __version__ = "0.0.0"

from .core.system import WFParams

__all__ = ["WFParams", "__version__"]
