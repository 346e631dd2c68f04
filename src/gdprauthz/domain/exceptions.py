"""Domain exceptions."""


class GdprAuthzError(Exception):
    """Base exception for gdpr-authz."""

    pass


class ConfigurationError(GdprAuthzError):
    """Catalog or seed data is inconsistent. Fatal at boot."""

    pass


class PermissionDenied(GdprAuthzError):
    """Actor is not allowed to perform the requested administration command."""

    pass


class NotFound(GdprAuthzError):
    """Requested resource was not found."""

    pass


class ValidationError(GdprAuthzError):
    """Validation failed for input data."""

    pass
