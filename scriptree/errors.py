"""Exceptions raised by scriptree."""


class ScriptreeError(Exception):
    """Base class for scriptree errors."""

    pass


class ConfigurationError(ScriptreeError):
    """Raised when no usable script mapping was provided."""

    pass


class ManifestError(ScriptreeError):
    """Raised when a package manifest cannot be located or read."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
