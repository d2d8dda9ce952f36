# airroutes

A small flight network: airports are nodes and flights are directed edges.
It registers airports and flights, removes flights, shows the departures
from an airport, and lists every route between two airports (paths that
never visit an airport twice), with the flight number of each leg.

Messages and listings are in Portuguese.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## The interactive menu

    airroutes

or, equivalently:

    python -m airroutes.cli

The program registers five airports (CNF, BSB, GIG, SSA, GRU) and a
default set of flights, printing a line for each, then shows a menu:

1. Register an airport (a three-letter code, then the city on its own line)
2. Register a flight (origin, destination and a flight number above zero)
3. Remove a flight by its number
4. Show the flights leaving an airport
5. Show every possible route between two airports
6. Quit

The menu ends on option 6 or when input runs out. An unknown option
prints an error and the menu is shown again; a failed operation prints
the reason and returns to the menu.

Rules the network enforces:

- An airport code is exactly three letters; it is stored in upper case
  and looked up without regard to case. A city name must be shorter
  than 50 characters. A code may be registered only once.
- A flight number must be above zero and unique across the network.
- There is at most one flight from a given origin to a given destination,
  and a flight cannot start and end at the same airport.

## As a library

```python
from airroutes.graph import FlightGraph, FlightError

graph = FlightGraph()
graph.add_airport("CNF", "Belo Horizonte")
graph.add_airport("GRU", "Sao Paulo")
graph.add_airport("GIG", "Rio de Janeiro")
graph.add_flight("GRU", "CNF", 102)
graph.add_flight("CNF", "GIG", 555)
graph.add_flight("GRU", "GIG", 51)

for number, route in enumerate(graph.routes("GRU", "GIG"), start=1):
    print(route.stops(), route.format(number))

print(graph.describe_routes("GRU", "GIG"))

try:
    graph.add_flight("GRU", "GIG", 77)
except FlightError as exc:
    print(exc)
```

What is available:

- `airroutes.airport.Airport` — a frozen dataclass with `code` and `city`.
  `Airport.create(code, city)` validates and upper-cases the code;
  `matches(code)` compares codes ignoring case; `str()` gives
  `"CODE - City"`. Invalid input raises `AirportError` (a `ValueError`).
- `airroutes.graph.FlightGraph`:
  - `add_airport(code, city)` returns the new `Airport`, or raises
    `AirportError` for an invalid or already registered code.
  - `find_airport(code)` returns the `Airport` or `None`.
  - `airports` is a tuple of the airports in registration order;
    `len(graph)` is their count.
  - `add_flight(origin, destination, number)` and `remove_flight(number)`
    return a `Flight` (`number`, `origin`, `destination`) or raise
    `FlightError`.
  - `departures(code)` lists the `Flight`s leaving an airport.
  - `routes(origin, destination)` yields `Route`s depth first; each has
    `airports`, `flights`, `stops()` and `format(number)`.
  - `describe_departures(code)` and `describe_routes(origin, destination)`
    return the same text the menu prints.
- `airroutes.cli.default_graph()` returns the preset network the menu
  starts with, and `airroutes.cli.run(graph, stdin, stdout)` runs the menu
  on any pair of text streams.

## What it does not do

The network lives only in memory. Nothing is saved: airports and flights
added in the menu are gone when the program exits, and every run starts
again from the preset network.