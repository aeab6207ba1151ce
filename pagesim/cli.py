"""Interactive menu for the paging simulator."""

import argparse
import random
import re
import sys
from typing import TextIO

from .process import Simulator, SimulatorError

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INTEGER = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")

MENU = (
    "\n--- Simulador de Gerenciamento de Memória com Paginação ---\n"
    "1. Visualizar Memória\n"
    "2. Criar Processo\n"
    "3. Visualizar Tabela de Páginas de um Processo\n"
    "4. Sair\n"
    "Escolha uma opção: "
)


def read_int(stream: TextIO | None = None, out: TextIO | None = None) -> int:
    """Read lines until one holds a whole 32-bit integer; raise EOFError at end of input."""
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    while True:
        out.flush()
        line = stream.readline()
        if not line:
            raise EOFError("end of input")
        text = line.split("\n", 1)[0]
        if not _INTEGER.fullmatch(text):
            out.write("Entrada inválida. Por favor, insira um número inteiro: ")
            continue
        value = int(text.strip(" \t\n\v\f\r"))
        if not INT_MIN <= value <= INT_MAX:
            out.write("Valor fora do intervalo permitido. Tente novamente: ")
            continue
        return value


def _create_process(sim: Simulator, stream: TextIO, out: TextIO) -> None:
    out.write("Digite o PID do novo processo: ")
    pid = read_int(stream, out)
    out.write("Digite o tamanho do processo em bytes: ")
    size = read_int(stream, out)
    try:
        process = sim.create_process(pid, size)
    except SimulatorError as error:
        print(error, file=out)
    else:
        print(
            f"Processo {pid} criado com sucesso, ocupando {process.page_count} páginas.",
            file=out,
        )


def _show_page_table(sim: Simulator, stream: TextIO, out: TextIO) -> None:
    out.write("Digite o PID do processo para visualizar a tabela de páginas: ")
    pid = read_int(stream, out)
    try:
        out.write(sim.render_page_table(pid))
    except SimulatorError as error:
        print(error, file=out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pagesim", description="Paged memory management simulator."
    )
    parser.add_argument("--seed", type=int, help="seed for process contents")
    args = parser.parse_args(argv)

    stream, out = sys.stdin, sys.stdout
    sim = Simulator(rng=random.Random(args.seed))
    memory = sim.memory
    print("Simulador inicializado com sucesso.", file=out)
    print(
        f"Memória Física: {memory.size} bytes, Tamanho da Página: {memory.page_size} bytes, "
        f"Total de Quadros: {memory.frame_count}",
        file=out,
    )

    try:
        while True:
            out.write(MENU)
            choice = read_int(stream, out)
            if choice == 1:
                out.write(sim.render_memory())
            elif choice == 2:
                _create_process(sim, stream, out)
            elif choice == 3:
                _show_page_table(sim, stream, out)
            elif choice == 4:
                print("Encerrando o simulador...", file=out)
                break
            else:
                print("Opção inválida. Por favor, tente novamente.", file=out)
    except EOFError:
        return 1

    print("Recursos do simulador liberados.", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())