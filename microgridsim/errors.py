"""Exception types raised by the simulation core."""


class MicrogridSimError(Exception):
    """Base class for all errors raised by microgridsim."""


class ConfigurationError(MicrogridSimError, ValueError):
    """Raised eagerly when a configuration is invalid or inconsistent."""


class InvalidArgument(MicrogridSimError, ValueError):
    """Raised when an operation receives an argument it cannot act on."""


class InvalidState(MicrogridSimError, RuntimeError):
    """Raised when an operation is called in the wrong lifecycle phase."""
