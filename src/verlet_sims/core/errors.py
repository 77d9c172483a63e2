# src/verlet_sims/core/errors.py


class ConfigError(ValueError):
    """Raised when a simulator is configured with values it cannot run with."""
