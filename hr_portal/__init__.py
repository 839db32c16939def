"""HR Portal page service"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("hr-portal")
except PackageNotFoundError:
    __version__ = "dev"
