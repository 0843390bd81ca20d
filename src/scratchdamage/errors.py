class ScratchDamageError(Exception):
    """Base error for scratchdamage exceptions."""


class InvalidInput(ScratchDamageError, ValueError):
    """Raised in strict mode when an attack or defense rating is out of its domain."""


class ConfigError(ScratchDamageError, ValueError):
    """Raised when a damage configuration is malformed or inconsistent."""
