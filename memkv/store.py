"""Store clave -> valor en memoria, thread-safe, con TTL opcional por clave.

La expiración es perezosa: una clave vencida se purga cuando una operación
la observa (set, get, exists, keys, set_expiration). No hay hilo de barrido.
"""

from __future__ import annotations

import enum
import logging
import threading
import time
from typing import Callable

logger = logging.getLogger(__name__)


class ExpirationResult(enum.Enum):
    """Resultado de Store.set_expiration."""

    SET = "set"
    NOT_FOUND = "not_found"
    NO_EXPIRATION = "no_expiration"
    ALREADY_SET = "already_set"


def _check_ttl(ttl: int) -> None:
    if ttl < 0:
        raise ValueError(f"ttl no puede ser negativo: {ttl}")


class Store:
    """Almacén en memoria clave -> valor con expiración perezosa.

    Un único lock protege ``_values`` y ``_expirations`` como una unidad;
    ninguna operación las lee o modifica por separado.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._values: dict[str, str] = {}
        self._expirations: dict[str, float] = {}
        self._lock = threading.Lock()
        self._clock = clock

    # Los helpers _expired/_purge asumen que el lock ya está tomado.

    def _expired(self, key: str, now: float) -> bool:
        deadline = self._expirations.get(key)
        return deadline is not None and deadline < now

    def _purge(self, key: str) -> None:
        self._values.pop(key, None)
        self._expirations.pop(key, None)

    def _live(self, key: str) -> bool:
        """True si la clave existe y no venció; purga si venció."""
        if key not in self._values:
            return False
        if self._expired(key, self._clock()):
            self._purge(key)
            logger.debug("clave %r expirada y purgada", key)
            return False
        return True

    def set(self, key: str, value: str, ttl: int = 0) -> None:
        """Guarda ``value`` en ``key``.

        Con ``ttl > 0`` fija un vencimiento nuevo (reemplaza el anterior).
        Con ``ttl == 0`` no toca un vencimiento previo vigente; si ya venció,
        la clave se purga antes y queda sin vencimiento.
        """
        _check_ttl(ttl)
        with self._lock:
            now = self._clock()
            if self._expired(key, now):
                self._purge(key)
                logger.debug("clave %r expirada y purgada", key)
            self._values[key] = value
            if ttl > 0:
                self._expirations[key] = now + ttl
                logger.debug("set %r con ttl=%ds", key, ttl)

    def get(self, key: str) -> tuple[str, bool]:
        """Devuelve ``(valor, True)`` o ``("", False)`` si no existe o venció."""
        with self._lock:
            if not self._live(key):
                return "", False
            return self._values[key], True

    def delete(self, key: str) -> None:
        with self._lock:
            self._purge(key)

    def exists(self, key: str) -> bool:
        """Igual que ``get(key)[1]``: una clave vencida no existe."""
        with self._lock:
            return self._live(key)

    def keys(self) -> list[str]:
        """Snapshot de las claves vigentes, sin orden garantizado."""
        with self._lock:
            now = self._clock()
            for key in [k for k in self._expirations if self._expired(k, now)]:
                self._purge(key)
                logger.debug("clave %r expirada y purgada", key)
            return list(self._values)

    def set_expiration(self, key: str, ttl: int) -> ExpirationResult:
        """Agrega un vencimiento solo si la clave todavía no tiene uno.

        A diferencia de ``set``, nunca reemplaza un vencimiento existente.
        """
        _check_ttl(ttl)
        with self._lock:
            if not self._live(key):
                return ExpirationResult.NOT_FOUND
            if ttl == 0:
                return ExpirationResult.NO_EXPIRATION
            if key in self._expirations:
                logger.debug("clave %r ya tiene vencimiento", key)
                return ExpirationResult.ALREADY_SET
            self._expirations[key] = self._clock() + ttl
            logger.debug("vencimiento de %r fijado en %ds", key, ttl)
            return ExpirationResult.SET


_instance: Store | None = None
_instance_lock = threading.Lock()


def get_instance() -> Store:
    """Devuelve el Store del proceso; lo crea una sola vez en la primera llamada."""
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = Store()
                logger.debug("store global creado")
    return _instance
