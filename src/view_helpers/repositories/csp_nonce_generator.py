"""Content-Security-Policy nonce generator."""

import base64
import secrets


class CspNonceGenerator:
    """Generates one nonce per instance.

    Create one generator per request: the helper, the CSP header and any
    inline script of the same response must agree on the value.
    """

    NONCE_BYTES = 32

    def __init__(self) -> None:
        self._nonce: str | None = None

    def get_nonce(self) -> str:
        if self._nonce is None:
            self._nonce = base64.b64encode(secrets.token_bytes(self.NONCE_BYTES)).decode("ascii")
        return self._nonce
