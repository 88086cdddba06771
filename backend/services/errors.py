"""Error types raised by the matching core and the catalog loaders."""


class ValidationError(ValueError):
    """Input is outside the contract of the match operation.

    Unknown question id, score outside 1-5, empty catalog, malformed profile.
    Never retried: the same input fails the same way.
    """


class CatalogError(RuntimeError):
    """Reference data (question bank or profession catalog) could not be loaded."""
