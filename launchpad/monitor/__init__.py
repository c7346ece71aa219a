"""Terminal presentation of suite, build, install and audit reports."""

from launchpad.monitor.renderer import SuiteRenderer, format_relative_time

__all__ = ["SuiteRenderer", "format_relative_time"]
