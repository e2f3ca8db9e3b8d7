"""fixletctl — Fixlet CSV record manager"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("fixletctl")
except PackageNotFoundError:
    __version__ = "dev"

__author__ = "fixletctl"
