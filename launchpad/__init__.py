"""Launchpad: build, package and install reconciliation for VS Code extension suites.

For every publishable project in a workspace Launchpad answers whether the
packaged artifact reflects the current source, how it relates to what is
installed, and whether to build, install or do nothing next.  It also
drives suite-wide rebuilds and installs, isolating per-project failures.
"""

__version__ = "0.3.0"

from launchpad.core.suite import Launchpad
from launchpad.cli.app import app as cli

__all__ = ["Launchpad", "cli", "__version__"]
