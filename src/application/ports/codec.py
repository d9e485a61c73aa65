"""Port for the field codec applied at the serialization boundary."""

from typing import Protocol


class FieldCodecPort(Protocol):
    """Port encoding sensitive string fields on write and decoding on read.

    ``decode`` raises ``ValueError`` for values it does not recognize; the
    serializer then keeps the stored value as legacy plaintext.
    """

    def encode(self, value: str) -> str:
        """Return the stored representation of ``value``."""

    def decode(self, value: str) -> str:
        """Return the plaintext for a stored value."""


__all__ = ["FieldCodecPort"]
