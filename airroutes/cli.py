"""Interactive menu for managing airports and flights."""

from __future__ import annotations

import argparse
import io
import sys
from typing import TextIO

from airroutes.airport import AirportError
from airroutes.graph import FlightError, FlightGraph

DEFAULT_AIRPORTS = (
    ("CNF", "Belo Horizonte"),
    ("BSB", "Brasilia"),
    ("GIG", "Rio de Janeiro"),
    ("SSA", "Salvador"),
    ("GRU", "Sao Paulo"),
)

DEFAULT_FLIGHTS = (
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
)

MENU = """
=== Menu ===
1. Cadastrar Aeroporto
2. Cadastrar Voo
3. Remover Voo
4. Exibir Voos
5. Exibir Possiveis trajetos entre aeroportos
6. Sair
Escolha uma opcao: """


class _Input:
    """Reads whitespace-separated words and whole lines from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._rest = ""

    def _fill(self) -> None:
        while not self._rest.strip():
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._rest = line
        self._rest = self._rest.lstrip()

    def word(self) -> str:
        self._fill()
        parts = self._rest.split(maxsplit=1)
        self._rest = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def line(self) -> str:
        self._fill()
        value = self._rest.rstrip("\r\n")
        self._rest = ""
        return value

    def discard_line(self) -> None:
        self._rest = ""


def _populate(out: TextIO) -> FlightGraph:
    graph = FlightGraph()
    for code, city in DEFAULT_AIRPORTS:
        airport = graph.add_airport(code, city)
        print(f"Aeroporto {airport} cadastrado com sucesso!", file=out)
    print(f"{len(graph)} aeroportos inicializados!\n", file=out)
    print("=== Inicializando voos por padrao ===", file=out)
    for origin, destination, number in DEFAULT_FLIGHTS:
        graph.add_flight(origin, destination, number)
        print(f"Voo {number} cadastrado de {origin} para {destination} com sucesso!", file=out)
    return graph


def default_graph() -> FlightGraph:
    """The network of airports and flights the program starts with."""
    return _populate(io.StringIO())


def _read_number(reader: _Input) -> int:
    text = reader.word()
    try:
        return int(text)
    except ValueError:
        raise FlightError(f"Numero do voo invalido: {text}.") from None


def run(graph: FlightGraph, stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu loop until the user quits or input ends."""
    reader = _Input(stdin)

    def say(text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=stdout)

    while True:
        say(MENU, end="")
        try:
            choice_text = reader.word()
            reader.discard_line()
            choice = int(choice_text) if choice_text.isdigit() else None

            if choice == 1:
                say("Digite o codigo do aeroporto (3 letras): ", end="")
                code = reader.word()
                say("Digite o nome da cidade: ", end="")
                city = reader.line()
                try:
                    airport = graph.add_airport(code, city)
                except AirportError as exc:
                    say(f"Erro: {exc}")
                    say("Erro ao cadastrar aeroporto.")
                else:
                    say(f"Aeroporto {airport} cadastrado com sucesso!")
                    say("Aeroporto cadastrado com sucesso!")
            elif choice == 2:
                say("Digite o codigo do aeroporto de origem: ", end="")
                origin = reader.word()
                say("Digite o codigo do aeroporto de destino: ", end="")
                destination = reader.word()
                say("Digite o numero do voo: ", end="")
                try:
                    number = _read_number(reader)
                    graph.add_flight(origin, destination, number)
                except FlightError as exc:
                    say(f"Erro: {exc}")
                    say("Erro ao cadastrar voo.")
                else:
                    say(f"Voo {number} cadastrado de {origin} para {destination} com sucesso!")
                    say("Voo cadastrado com sucesso!")
            elif choice == 3:
                say("Digite o numero do voo a ser removido: ", end="")
                try:
                    flight = graph.remove_flight(_read_number(reader))
                except FlightError as exc:
                    say(f"Erro: {exc}")
                    say("Erro ao remover voo.")
                else:
                    say(
                        f"Voo {flight.number} removido: "
                        f"{flight.origin.code} -> {flight.destination.code}"
                    )
                    say("Voo removido com sucesso!")
            elif choice == 4:
                say("Digite o codigo do aeroporto: ", end="")
                code = reader.word()
                try:
                    say(graph.describe_departures(code), end="")
                except FlightError as exc:
                    say(f"Erro: {exc}")
            elif choice == 5:
                say("Digite o codigo do aeroporto de origem: ", end="")
                origin = reader.word()
                say("Digite o codigo do aeroporto de destino: ", end="")
                destination = reader.word()
                try:
                    say(graph.describe_routes(origin, destination), end="")
                except FlightError as exc:
                    say(f"\nErro: {exc}")
            elif choice == 6:
                say("Saindo...")
                return
            else:
                say("Opcao invalida. Tente novamente.")
        except EOFError:
            say()
            return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu with the default network loaded."""
    parser = argparse.ArgumentParser(
        prog="airroutes", description="Manage airports, flights and routes."
    )
    parser.parse_args(argv)
    print("=== Inicializando aeroportos conforme especificação ===")
    graph = _populate(sys.stdout)
    run(graph, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())