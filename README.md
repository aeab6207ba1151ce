# pagesim

pagesim is an interactive simulator of memory management with paging,
for use in teaching. It models a small physical memory, 64 KB by default,
that is divided into 4 KB frames. You can create processes, see how their
pages map to frames, and look at what each frame holds. The menu and its
messages are in Portuguese.

## Installation

```
pip install .
```

## Running the simulator

```
pagesim
pagesim --seed 42
```

`--seed` seeds the random generator that fills process memory, so that a
session can be repeated with the same contents.

A menu appears. Each option asks for integers. Anything that is not a
whole integer in the 32-bit signed range is refused and you are asked
again. If the input ends, the program stops with exit status 1.

1. **Visualizar Memória** shows how many frames are in use and then every
   frame. For a frame in use it shows the process and page that own it and
   the first eight bytes it holds, in hexadecimal.
2. **Criar Processo** asks for a PID and a size in bytes. It gives the
   process the lowest-numbered free frames its pages need and fills them
   with random bytes. If the last page is not full, the rest of that frame
   is filled with zeros.
3. **Visualizar Tabela de Páginas de um Processo** asks for a PID and
   prints the table that maps each logical page to a physical frame.
4. **Sair** quits with exit status 0.

The default limits are:

- 64 KB of physical memory
- a page size of 4 KB, so there are 16 frames
- at most 16 KB for one process
- at most 10 processes

A process cannot be created if its PID is already in use, if its size is
zero, negative or over the limit, if there are too few free frames, or if
the process table is full.

## Library use

```python
import random

from pagesim.memory import PhysicalMemory
from pagesim.process import Simulator, SimulatorError

memory = PhysicalMemory(64 * 1024, 4096)
sim = Simulator(memory, 10, 16 * 1024, random.Random(0))

process = sim.create_process(1, 5000)
print(process.page_table)          # [0, 1]
print(process.page_count)          # 2
print(sim.frame_owner(1))          # (1, 1)
print(sim.render_page_table(1))
print(sim.render_memory())

try:
    sim.create_process(1, 100)
except SimulatorError as exc:
    print(exc)
```

`PhysicalMemory` (in `pagesim.memory`) holds the raw bytes and a bitmap of
which frames are in use. Both its size and its page size must be powers of
two, or `ValueError` is raised. It offers `mark_occupied`, `mark_free`,
`is_frame_free`, `find_free_frame`, `free_frame_count`, `used_frame_count`,
`frame_bytes` and `write_frame`.

`Simulator` (in `pagesim.process`) keeps the process table. Its
`create_process` returns a `Process` and raises `SimulatorError` when the
request is refused; `find_process`, `frame_owner`, `render_memory` and
`render_page_table` look at what it holds, and `processes` lists the
processes in the table. Every argument of `Simulator` is optional and
defaults to the limits above.

`pagesim.cli` holds `main`, the entry point of the `pagesim` command, and
`read_int`, which reads integers the way the menu does.

## What it does not do

There is no way to end a process: once created, a process keeps its frames
for the rest of the session. Nothing is saved between sessions.