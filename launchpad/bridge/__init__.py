"""Concrete collaborators: workspace manifests, filesystem, external commands
and the VS Code extensions runtime.
"""

from launchpad.bridge.commands import CommandError, CommandRunner
from launchpad.bridge.filesystem import stat_path
from launchpad.bridge.inventory import ManifestError, ManifestInventory, read_manifest
from launchpad.bridge.runtime import ExtensionRuntime

__all__ = [
    "CommandError",
    "CommandRunner",
    "ExtensionRuntime",
    "ManifestError",
    "ManifestInventory",
    "read_manifest",
    "stat_path",
]
