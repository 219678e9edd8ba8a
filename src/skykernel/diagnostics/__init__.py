"""Diagnostics package.

Runnable modules with a main(argv). Optional dependencies:
  pip install "skykernel[diagnostics]"
"""

__all__ = ["validate_sidereal"]
