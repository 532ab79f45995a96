"""Status and response size statistics for nginx JSON access logs."""

__version__ = "0.1.0"
