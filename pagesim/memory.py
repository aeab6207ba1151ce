"""Physical memory split into fixed-size frames with an occupancy bitmap."""

PHYSICAL_MEMORY_SIZE = 64 * 1024
PAGE_SIZE = 4096
MAX_PROCESS_SIZE = 16 * 1024
MAX_PROCESSES = 10


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


class PhysicalMemory:
    """A byte array divided into page-sized frames, each either free or occupied."""

    def __init__(self, size: int = PHYSICAL_MEMORY_SIZE, page_size: int = PAGE_SIZE):
        if not _is_power_of_two(size):
            raise ValueError(f"memory size must be a positive power of two, got {size}")
        if not _is_power_of_two(page_size):
            raise ValueError(f"page size must be a positive power of two, got {page_size}")
        self.size = size
        self.page_size = page_size
        self.frame_count = size // page_size
        self._data = bytearray(size)
        self._bitmap = bytearray((self.frame_count + 7) // 8)

    def _in_range(self, frame: int) -> bool:
        return 0 <= frame < self.frame_count

    def mark_occupied(self, frame: int) -> None:
        """Mark a frame as occupied; frames out of range are ignored."""
        if self._in_range(frame):
            self._bitmap[frame // 8] |= 1 << (frame % 8)

    def mark_free(self, frame: int) -> None:
        """Mark a frame as free; frames out of range are ignored."""
        if self._in_range(frame):
            self._bitmap[frame // 8] &= ~(1 << (frame % 8)) & 0xFF

    def is_frame_free(self, frame: int) -> bool:
        """Whether the frame exists and is free."""
        if not self._in_range(frame):
            return False
        return not self._bitmap[frame // 8] & (1 << (frame % 8))

    def find_free_frame(self) -> int | None:
        """The lowest-numbered free frame, or None when memory is full."""
        return next(
            (frame for frame in range(self.frame_count) if self.is_frame_free(frame)),
            None,
        )

    def free_frame_count(self) -> int:
        return sum(1 for frame in range(self.frame_count) if self.is_frame_free(frame))

    def used_frame_count(self) -> int:
        return self.frame_count - self.free_frame_count()

    def frame_bytes(self, frame: int) -> bytes:
        """A copy of the contents of a frame."""
        if not self._in_range(frame):
            raise IndexError(f"frame {frame} out of range")
        base = frame * self.page_size
        return bytes(self._data[base:base + self.page_size])

    def write_frame(self, frame: int, data: bytes) -> None:
        """Store data at the start of a frame, zero-filling the rest of it."""
        if not self._in_range(frame):
            raise IndexError(f"frame {frame} out of range")
        if len(data) > self.page_size:
            raise ValueError(
                f"{len(data)} bytes do not fit in a frame of {self.page_size} bytes"
            )
        base = frame * self.page_size
        self._data[base:base + self.page_size] = bytes(data).ljust(self.page_size, b"\x00")