"""Launchpad CLI: Typer-based command-line interface.

Provides the ``launchpad`` command with subcommands for suite status,
bulk build and install, single-project packaging and publishing, manifest
audits, badges and artifact cleanup.

All output uses Rich for formatted terminal display.
"""
