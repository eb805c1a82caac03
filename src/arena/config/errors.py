# src/arena/config/errors.py
class ConfigError(RuntimeError):
    """Base class for scenario configuration failures."""

class ConfigNotFoundError(ConfigError):
    """Raised when the scenario file does not exist."""
