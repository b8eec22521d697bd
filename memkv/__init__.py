"""memkv: store clave -> valor en memoria, thread-safe, con TTL por clave."""

__version__ = "0.1.0"

from memkv.store import ExpirationResult, Store, get_instance

__all__ = ["ExpirationResult", "Store", "get_instance", "__version__"]
