"""A directed graph of airports connected by numbered flights."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import zip_longest

from airroutes.airport import Airport, AirportError


class FlightError(Exception):
    """Raised when a flight operation cannot be carried out."""


@dataclass(frozen=True)
class Flight:
    """A numbered flight from one airport to another."""

    number: int
    origin: Airport
    destination: Airport


@dataclass(frozen=True)
class Route:
    """A path of airports and the flight numbers that join them."""

    airports: tuple[Airport, ...]
    flights: tuple[int, ...]

    def stops(self) -> int:
        """Number of legs in the route."""
        return len(self.airports) - 1

    def format(self, number: int) -> str:
        """Render the route as a numbered line."""
        pieces = []
        for airport, flight in zip_longest(self.airports, self.flights):
            pieces.append(f"{airport.code} ")
            if flight is not None:
                pieces.append(f" --(voo: {flight})--> ")
        stops = self.stops()
        suffix = "" if stops == 1 else "s"
        return f"Trajeto {number}: {''.join(pieces)} ({stops} escala{suffix})"


class FlightGraph:
    """Airports in registration order with at most one flight per ordered pair."""

    def __init__(self) -> None:
        self._airports: list[Airport] = []
        self._matrix: list[list[int | None]] = []

    def __len__(self) -> int:
        return len(self._airports)

    @property
    def airports(self) -> tuple[Airport, ...]:
        return tuple(self._airports)

    def _index(self, code: str) -> int | None:
        return next(
            (i for i, airport in enumerate(self._airports) if airport.matches(code)),
            None,
        )

    def add_airport(self, code: str, city: str) -> Airport:
        """Register a new airport; its code must be unused."""
        if self._index(code) is not None:
            raise AirportError(f"Aeroporto {code.upper()} ja cadastrado.")
        airport = Airport.create(code, city)
        self._airports.append(airport)
        for row in self._matrix:
            row.append(None)
        self._matrix.append([None] * len(self._airports))
        return airport

    def find_airport(self, code: str) -> Airport | None:
        """Return the airport with this code, or None."""
        index = self._index(code)
        return None if index is None else self._airports[index]

    def _endpoints(self, origin: str, destination: str) -> tuple[int, int]:
        start = self._index(origin)
        goal = self._index(destination)
        if start is None or goal is None:
            raise FlightError("Aeroporto de origem ou destino nao encontrado.")
        if start == goal:
            raise FlightError("Aeroporto de origem e destino nao podem ser iguais.")
        return start, goal

    def _edges(self) -> Iterator[tuple[int, int, int]]:
        for i, row in enumerate(self._matrix):
            for j, number in enumerate(row):
                if number is not None:
                    yield i, j, number

    def add_flight(self, origin: str, destination: str, number: int) -> Flight:
        """Register a flight; the route and the number must both be unused."""
        if number <= 0:
            raise FlightError("Numero do voo deve ser maior que zero.")
        if not self._airports:
            raise FlightError("Nenhum aeroporto cadastrado.")
        start, goal = self._endpoints(origin, destination)
        if self._matrix[start][goal] is not None:
            raise FlightError(
                f"Ja existe um voo cadastrado de {origin} para {destination}."
            )
        if any(existing == number for _, _, existing in self._edges()):
            raise FlightError(f"Numero do voo {number} ja cadastrado.")
        self._matrix[start][goal] = number
        return Flight(number, self._airports[start], self._airports[goal])

    def remove_flight(self, number: int) -> Flight:
        """Remove the flight with this number and return it."""
        if number > 0:
            for i, j, existing in self._edges():
                if existing == number:
                    self._matrix[i][j] = None
                    return Flight(number, self._airports[i], self._airports[j])
        raise FlightError(f"Voo {number} nao encontrado.")

    def departures(self, code: str) -> list[Flight]:
        """Flights leaving the given airport, in destination registration order."""
        if not self._airports:
            raise FlightError("Dados invalidos.")
        index = self._index(code)
        if index is None:
            raise FlightError(f"Aeroporto {code} nao encontrado.")
        origin = self._airports[index]
        return [
            Flight(number, origin, self._airports[j])
            for j, number in enumerate(self._matrix[index])
            if number is not None
        ]

    def routes(self, origin: str, destination: str) -> Iterator[Route]:
        """Every path without repeated airports from origin to destination, depth first."""
        start, goal = self._endpoints(origin, destination)
        return self._walk(start, goal, [start])

    def _walk(self, current: int, goal: int, path: list[int]) -> Iterator[Route]:
        if current == goal:
            yield Route(
                tuple(self._airports[i] for i in path),
                tuple(self._matrix[a][b] for a, b in zip(path, path[1:])),
            )
            return
        for following, number in enumerate(self._matrix[current]):
            if number is not None and following not in path:
                path.append(following)
                yield from self._walk(following, goal, path)
                path.pop()

    def describe_departures(self, code: str) -> str:
        """Text listing of the flights leaving an airport."""
        flights = self.departures(code)
        origin = self.find_airport(code)
        lines = [f"=== Voos saindo de {code} ({origin.city}) ==="]
        lines += [
            f"Voo {f.number}: {code} -> {f.destination.code} ({f.destination.city})"
            for f in flights
        ]
        if not flights:
            lines.append(f"Nenhum voo encontrado saindo de {code}.")
        return "\n".join(lines) + "\n"

    def describe_routes(self, origin: str, destination: str) -> str:
        """Text listing of every route between two airports."""
        found = self.routes(origin, destination)
        lines = ["", f"=== Possiveis trajetos de {origin} para {destination} ===", ""]
        count = 0
        for count, route in enumerate(found, start=1):
            lines.append(route.format(count))
        if count == 0:
            lines.append(f"Nenhum trajeto encontrado de {origin} para {destination}.")
        else:
            lines += ["", f"Total de trajetos encontrados: {count}"]
        return "\n".join(lines) + "\n"