"""Design Pattern Showcase - Root Package.

This package demonstrates three classical object-oriented design patterns
and a driver that prints the outcome of each.

Key Components:
    - domain: The pattern vignettes (Prototype, Decorator, Iterator)
    - application: Showcase service that runs the vignettes in a fixed order
    - config: Typed configuration with defaults
    - helpers: Logging setup
    - cli: Command-line entry point and output formatters

Architecture:
    The domain layer has no dependency on the outer layers. The application
    layer composes the domain vignettes and the CLI presents their results.
"""

from ._package import PACKAGE_NAME, __version__

__author__ = "Design Pattern Showcase Contributors"
__package_name__ = PACKAGE_NAME

"""
Usage:
    >>> python -m showcase
    >>> python -m showcase --pattern decorator --format json
"""
