from dataclasses import dataclass
from typing import Optional, Tuple

MIN_SIZE = 5
DEFAULT_SIZE = 21


@dataclass
class MazeConfig:
    size: int = DEFAULT_SIZE
    seed: Optional[int] = None
    crate_chance: float = 0.2
    torch_chance: float = 0.1
    entry: Optional[Tuple[int, int]] = None
    exit: Optional[Tuple[int, int]] = None

    def entry_pos(self) -> Tuple[int, int]:
        return self.entry if self.entry is not None else (1, 1)

    def exit_pos(self) -> Tuple[int, int]:
        return self.exit if self.exit is not None else (self.size - 2, self.size - 2)


__all__ = ["MazeConfig", "MIN_SIZE", "DEFAULT_SIZE"]
