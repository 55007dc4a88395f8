"""Gradle Usage exception hierarchy.

All public exceptions inherit from GradleUsageError, giving callers a single
base class to catch when they want to handle any gradle-usage failure
without swallowing unrelated errors.

Only whole-pipeline failures are raised to callers. Failures scoped to a
single directory or a single project are logged and recorded as data.
"""


class GradleUsageError(Exception):
    """Base exception for all gradle-usage errors."""


class ScanError(GradleUsageError):
    """Raised when a scan cannot start or a root cannot be walked.

    Covers missing root paths, roots that are not directories, and roots
    whose contents cannot be listed.
    """


class ProbeError(GradleUsageError):
    """Raised by a version probe when the Gradle version cannot be obtained.

    Covers process launch failures, timeouts, non-zero exits, unparsable
    output, and corrupted wrapper metadata. The resolver always absorbs
    this error and records the ``FAILED`` sentinel instead.
    """


class ReportError(GradleUsageError):
    """Raised when the usage report cannot be written to disk."""


class ConfigError(GradleUsageError):
    """Raised when a configuration file is unreadable or invalid.

    Covers YAML syntax errors, unknown keys, and values of the wrong type.
    """
