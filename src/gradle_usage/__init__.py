"""Gradle Usage: Inventory of Gradle projects and the Gradle versions they use."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "Apache-2.0"
