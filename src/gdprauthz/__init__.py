"""Authorization resolution engine for the GDPR compliance workspace."""

__version__ = "0.1.0"
