"""Key-value record store used for all persisted user data."""

from typing import Protocol

STORE_KEYS = (
    "workouts",
    "meals",
    "profile",
    "food_cache",
    "programs",
    "programLogs",
    "gemini_key",
)


class KeyValueStore(Protocol):
    """Interface for a single-user JSON key-value store.

    Implementations return ``default`` for missing keys and for values that
    cannot be decoded.
    """

    def get(self, key: str, default: object = None) -> object:
        """Return the stored value or ``default``."""

    def set(self, key: str, value: object) -> None:
        """Store a JSON-serializable value."""

    def delete(self, key: str) -> None:
        """Remove a key if present."""
