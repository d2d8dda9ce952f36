import pytest

from airroutes.airport import Airport, AirportError
from airroutes.graph import FlightError, FlightGraph, Route

AIRPORTS = [
    ("CNF", "Belo Horizonte"),
    ("BSB", "Brasilia"),
    ("GIG", "Rio de Janeiro"),
    ("SSA", "Salvador"),
    ("GRU", "Sao Paulo"),
]
FLIGHTS = [
    ("GRU", "BSB", 50),
    ("GIG", "CNF", 554),
    ("GRU", "CNF", 102),
    ("SSA", "CNF", 215),
    ("CNF", "GIG", 555),
    ("GRU", "GIG", 51),
    ("CNF", "GRU", 101),
    ("GIG", "GRU", 90),
    ("BSB", "SSA", 107),
    ("CNF", "SSA", 108),
]


@pytest.fixture
def graph():
    g = FlightGraph()
    for code, city in AIRPORTS:
        g.add_airport(code, city)
    for origin, destination, number in FLIGHTS:
        g.add_flight(origin, destination, number)
    return g


def test_add_airport_and_len():
    g = FlightGraph()
    airport = g.add_airport("poa", "Porto Alegre")
    assert airport == Airport("POA", "Porto Alegre")
    assert len(g) == 1


def test_duplicate_airport_rejected(graph):
    with pytest.raises(AirportError):
        graph.add_airport("cnf", "Outra")
    assert len(graph) == len(AIRPORTS)


def test_invalid_airport_not_added():
    g = FlightGraph()
    with pytest.raises(AirportError):
        g.add_airport("A1B", "Lugar")
    assert len(g) == 0


def test_find_airport(graph):
    assert graph.find_airport("gig") == Airport("GIG", "Rio de Janeiro")
    assert graph.find_airport("XYZ") is None


def test_add_flight_returns_flight(graph):
    flight = graph.add_flight("BSB", "GRU", 999)
    assert flight.number == 999
    assert flight.origin.code == "BSB"
    assert flight.destination.code == "GRU"


@pytest.mark.parametrize(
    "origin, destination, number, message",
    [
        ("CNF", "BSB", 0, "maior que zero"),
        ("CNF", "XYZ", 1, "nao encontrado"),
        ("CNF", "cnf", 1, "nao podem ser iguais"),
        ("CNF", "GIG", 1, "Ja existe um voo"),
        ("CNF", "BSB", 50, "ja cadastrado"),
    ],
)
def test_add_flight_errors(graph, origin, destination, number, message):
    with pytest.raises(FlightError, match=message):
        graph.add_flight(origin, destination, number)


def test_add_flight_without_airports():
    with pytest.raises(FlightError, match="Nenhum aeroporto"):
        FlightGraph().add_flight("CNF", "GIG", 1)


def test_departures_follow_registration_order(graph):
    flights = graph.departures("CNF")
    assert [f.destination.code for f in flights] == ["GIG", "SSA", "GRU"]
    assert [f.number for f in flights] == [555, 108, 101]


def test_departures_unknown_airport(graph):
    with pytest.raises(FlightError, match="XYZ nao encontrado"):
        graph.departures("XYZ")


def test_remove_flight(graph):
    flight = graph.remove_flight(50)
    assert (flight.origin.code, flight.destination.code) == ("GRU", "BSB")
    assert all(f.number != 50 for f in graph.departures("GRU"))
    with pytest.raises(FlightError, match="Voo 50 nao encontrado"):
        graph.remove_flight(50)


def test_removed_number_can_be_reused(graph):
    graph.remove_flight(50)
    assert graph.add_flight("BSB", "GRU", 50).number == 50


def test_remove_from_empty_graph():
    with pytest.raises(FlightError):
        FlightGraph().remove_flight(1)


def test_routes_are_simple_paths(graph):
    routes = list(graph.routes("GRU", "SSA"))
    assert len(routes) == 3
    for route in routes:
        codes = [a.code for a in route.airports]
        assert codes[0] == "GRU" and codes[-1] == "SSA"
        assert len(set(codes)) == len(codes)
        assert len(route.flights) == route.stops()
        for origin, destination, number in zip(codes, codes[1:], route.flights):
            assert (origin, destination, number) in FLIGHTS


def test_routes_errors(graph):
    with pytest.raises(FlightError, match="nao encontrado"):
        graph.routes("GRU", "XYZ")
    with pytest.raises(FlightError, match="iguais"):
        graph.routes("GRU", "gru")


def test_route_format():
    route = Route(
        (Airport("CNF", "Belo Horizonte"), Airport("GIG", "Rio de Janeiro")),
        (555,),
    )
    assert route.format(1) == "Trajeto 1: CNF  --(voo: 555)--> GIG  (1 escala)"


def test_route_format_plural():
    route = Route((Airport("A", "a"), Airport("B", "b"), Airport("C", "c")), (1, 2))
    assert route.format(2).endswith("(2 escalas)")


def test_describe_departures_without_flights():
    g = FlightGraph()
    g.add_airport("CNF", "Belo Horizonte")
    text = g.describe_departures("CNF")
    assert "=== Voos saindo de CNF (Belo Horizonte) ===" in text
    assert "Nenhum voo encontrado saindo de CNF." in text


def test_describe_routes_counts(graph):
    text = graph.describe_routes("GRU", "SSA")
    lines = [line for line in text.splitlines() if line.startswith("Trajeto")]
    assert f"Total de trajetos encontrados: {len(lines)}" in text


def test_describe_routes_none_found(graph):
    graph.add_airport("POA", "Porto Alegre")
    text = graph.describe_routes("CNF", "POA")
    assert "Nenhum trajeto encontrado de CNF para POA." in text