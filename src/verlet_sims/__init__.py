from .core import Simulator, SimConfig, Particle, ConfigError

__version__ = "0.1.0"

__all__ = ["Simulator", "SimConfig", "Particle", "ConfigError", "__version__"]
