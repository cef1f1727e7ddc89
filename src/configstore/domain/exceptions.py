class ConfigStoreError(Exception):
    """Base class for configstore errors (user-facing message in args[0])."""


class ConfigurationError(ConfigStoreError):
    """Raised when a configuration manager cannot store or populate a configurable."""


class UnsupportedOperationError(ConfigStoreError, TypeError):
    """Raised when a read-only view returned by a configurable is mutated."""
