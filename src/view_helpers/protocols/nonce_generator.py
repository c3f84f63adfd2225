"""Content-Security-Policy nonce generator protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class NonceGenerator(Protocol):
    def get_nonce(self) -> str:
        """Return the nonce for inline scripts and styles.

        Raises:
            Exception: Implementation-specific when no nonce can be produced
        """
        ...
