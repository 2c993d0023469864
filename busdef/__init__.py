"""busdef - Bus interface member definitions and introspection."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("busdef")
except PackageNotFoundError:
    __version__ = "(local)"
