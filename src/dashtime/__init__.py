"""dashtime - time range labels and interval rounding for dashboards."""

__version__ = "0.1.0"
__author__ = "dashtime Team"
__description__ = "Describe, convert and bucket dashboard time ranges"

__all__ = ["__version__", "__author__", "__description__"]
