"""Package metadata and naming constants."""

from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "design-patterns-showcase"
PACKAGE_NAME_PYTHON = "showcase"
DESCRIPTION = "Prototype, Decorator and Iterator pattern vignettes"

try:
    __version__ = version(PACKAGE_NAME)
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution
    __version__ = "0.0.0"

VERSION = __version__  # Alias for compatibility
