"""Content-Security-Policy nonce helper."""

from view_helpers.protocols import NonceGenerator


class CspNonce:
    """Return the current nonce for ``<script nonce="...">`` attributes.

    Every call goes to the generator; whether the nonce is stable for a
    request is the generator's decision.
    """

    def __init__(self, generator: NonceGenerator) -> None:
        self._generator = generator

    def __call__(self) -> str:
        return self._generator.get_nonce()
