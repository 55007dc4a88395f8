"""Command-line interface for gradle-usage."""
