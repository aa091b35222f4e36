"""prefmigrate — versioned, in-place migration of preference stores."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("prefmigrate")
except PackageNotFoundError:
    __version__ = "0.1.0"  # fallback for development
