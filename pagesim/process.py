"""Processes, their page tables, and the simulator that places them in memory."""

import random
from dataclasses import dataclass, field

from .memory import MAX_PROCESS_SIZE, MAX_PROCESSES, PhysicalMemory

_RULE = "----------------------------------"
_TABLE_RULE = "+---------------+---------------+"


class SimulatorError(Exception):
    """A request the simulator refuses to carry out."""


@dataclass
class Process:
    """A process with a logical size and a page table mapping pages to frames."""

    pid: int
    logical_size: int
    page_table: list[int] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.page_table)


class Simulator:
    """Creates processes and allocates frames of physical memory to their pages."""

    def __init__(
        self,
        memory: PhysicalMemory | None = None,
        max_processes: int = MAX_PROCESSES,
        max_process_size: int = MAX_PROCESS_SIZE,
        rng: random.Random | None = None,
    ):
        self.memory = memory if memory is not None else PhysicalMemory()
        self.max_processes = max_processes
        self.max_process_size = max_process_size
        self.rng = rng if rng is not None else random.Random()
        self._slots: list[Process | None] = [None] * max_processes

    @property
    def processes(self) -> list[Process]:
        return [process for process in self._slots if process is not None]

    def create_process(self, pid: int, size: int) -> Process:
        """Create a process, fill its frames with random bytes and return it."""
        if self.find_process(pid) is not None:
            raise SimulatorError(f"Erro: PID {pid} já está em uso.")
        if size <= 0 or size > self.max_process_size:
            raise SimulatorError(
                f"Erro: Tamanho do processo ({size} bytes) é inválido ou excede "
                f"o máximo permitido ({self.max_process_size} bytes)."
            )
        page_size = self.memory.page_size
        pages = -(-size // page_size)
        if self.memory.free_frame_count() < pages:
            raise SimulatorError(
                f"Erro: Memória física insuficiente para alocar {pages} páginas "
                f"para o processo {pid}."
            )
        try:
            slot = self._slots.index(None)
        except ValueError:
            raise SimulatorError(
                f"Erro: Limite máximo de processos ({self.max_processes}) atingido."
            ) from None

        process = Process(pid, size)
        for page in range(pages):
            frame = self.memory.find_free_frame()
            self.memory.mark_occupied(frame)
            process.page_table.append(frame)
            used = min(page_size, size - page * page_size)
            self.memory.write_frame(frame, self.rng.randbytes(used))

        self._slots[slot] = process
        return process

    def find_process(self, pid: int) -> Process | None:
        return next((p for p in self.processes if p.pid == pid), None)

    def frame_owner(self, frame: int) -> tuple[int, int] | None:
        """The (pid, page) that maps to a frame, or None if no process does."""
        for process in self.processes:
            for page, mapped in enumerate(process.page_table):
                if mapped == frame:
                    return process.pid, page
        return None

    def render_memory(self) -> str:
        """A report of every frame: free, or its owner and first bytes."""
        total = self.memory.frame_count
        used = self.memory.used_frame_count()
        percent = used / total * 100.0 if total > 0 else 0.0
        lines = [
            "",
            "--- Estado da Memória Física ---",
            f"Ocupação: {used} / {total} quadros ({percent:.2f}%)",
            _RULE,
        ]
        for frame in range(total):
            prefix = f"Quadro {frame:03d}: "
            if self.memory.is_frame_free(frame):
                lines.append(prefix + "[ Livre ]")
                continue
            pid, page = self.frame_owner(frame) or (-1, -1)
            content = "".join(f"{byte:02X} " for byte in self.memory.frame_bytes(frame)[:8])
            lines.append(
                f"{prefix}[ Ocupado por P{pid}, Página {page} ] Conteúdo: {content}..."
            )
        lines.append(_RULE)
        return "\n".join(lines) + "\n"

    def render_page_table(self, pid: int) -> str:
        """A table of a process's logical pages and the frames holding them."""
        process = self.find_process(pid)
        if process is None:
            raise SimulatorError(f"Erro: Processo com PID {pid} não encontrado.")
        lines = [
            "",
            f"--- Tabela de Páginas do Processo {pid} ---",
            f"Tamanho Lógico: {process.logical_size} bytes, Páginas: {process.page_count}",
            _TABLE_RULE,
            "| Página Lógica | Quadro Físico |",
            _TABLE_RULE,
        ]
        lines.extend(
            f"| {page:<13d} | {frame:<13d} |" for page, frame in enumerate(process.page_table)
        )
        lines.append(_TABLE_RULE)
        return "\n".join(lines) + "\n"