"""Slope limiter selection for the numerical solver.

The limiter numerics live with the solver; this module only names the
available strategies and maps input tokens onto them.
"""

from __future__ import annotations

from enum import Enum


class Limiter(Enum):
    """Slope limiter strategies understood by the solver.

    Member values are the display names written back to the run settings.
    """

    MINMOD1 = "MinMod1"
    MINMOD2 = "MinMod2"
    VAN_ALBADA = "van Albada"
    WENO = "Weno"
    NONE = "None"

    @classmethod
    def from_token(cls, token: str) -> Limiter | None:
        """Look up a limiter by its input token.

        Args:
            token: Value given for the ``limiter`` label (any case)

        Returns:
            The matching limiter, or None if the token is not recognized
        """
        return _TOKENS.get(token.strip().lower())

    @classmethod
    def tokens(cls) -> list[str]:
        """Return every accepted input token, in lookup table order."""
        return list(_TOKENS)

    def __str__(self) -> str:
        return self.value


_TOKENS: dict[str, Limiter] = {
    "minmod1": Limiter.MINMOD1,
    "minmod2": Limiter.MINMOD2,
    "van albada": Limiter.VAN_ALBADA,
    "albada": Limiter.VAN_ALBADA,
    "weno": Limiter.WENO,
    "none": Limiter.NONE,
}
