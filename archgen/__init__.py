"""archgen -- scaffold Go projects in one of several architecture patterns."""

__version__ = "1.0.0"
