"""Building blocks for model-driven access control: config, effects, contexts, parameters, cache keys."""

__version__ = "0.1.0"
__all__ = ["cachekey", "config", "context", "effector", "parameters"]