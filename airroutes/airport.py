"""Airports identified by a three-letter code."""

from __future__ import annotations

from dataclasses import dataclass

CODE_LENGTH = 3
MAX_CITY_LENGTH = 50


class AirportError(ValueError):
    """Raised when an airport cannot be created or registered."""


@dataclass(frozen=True)
class Airport:
    """An airport with an upper-case three-letter code and the city it serves."""

    code: str
    city: str

    @classmethod
    def create(cls, code: str, city: str) -> Airport:
        """Validate the code and city and build an airport with the code upper-cased."""
        if len(code) != CODE_LENGTH:
            raise AirportError("Codigo deve ter exatamente 3 caracteres.")
        if len(city) >= MAX_CITY_LENGTH:
            raise AirportError("Nome da cidade muito longo.")
        if not all(char.isascii() and char.isalpha() for char in code):
            raise AirportError("Codigo deve conter apenas letras.")
        return cls(code.upper(), city)

    def matches(self, code: str) -> bool:
        """Tell whether the first three letters of ``code`` name this airport, ignoring case."""
        return code[:CODE_LENGTH].upper() == self.code

    def __str__(self) -> str:
        return f"{self.code} - {self.city}"