class ColorKitError(Exception):
    """Base class for colorkit errors."""


class RegistryFrozenError(ColorKitError, RuntimeError):
    """Raised when a parser is registered after the registry has been used."""
