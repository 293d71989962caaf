"""Interactive command-line reminder tracker."""

__version__ = "1.0.0"
