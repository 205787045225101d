from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .blocks import BlockCatalog, Passability


class Cell:
    """One grid position.

    ``id`` is assigned once by the world and never changes, so a renderer can
    tell "same cell, new contents" apart from "different cell, same screen
    position". ``passability`` always reflects the current top block.
    """

    __slots__ = ("_id", "_stack", "_passability")

    def __init__(self, cell_id: int, stack: Iterable[int], blocks: BlockCatalog) -> None:
        self._id = cell_id
        self._stack: List[int] = []
        self._passability = Passability.AIR
        self.set_stack(stack, blocks)

    @property
    def id(self) -> int:
        return self._id

    @property
    def block_stack(self) -> Tuple[int, ...]:
        """Block ids from bottom to top."""
        return tuple(self._stack)

    @property
    def passability(self) -> Passability:
        return self._passability

    @property
    def top(self) -> Optional[int]:
        return self._stack[-1] if self._stack else None

    @property
    def is_open(self) -> bool:
        return self._passability is not Passability.SOLID

    def set_stack(self, stack: Iterable[int], blocks: BlockCatalog) -> None:
        new_stack = [int(block_id) for block_id in stack]
        # Resolve first so a bad id leaves the cell untouched
        passability = blocks.passability_of(new_stack)
        for block_id in new_stack[:-1]:
            blocks.get(block_id)
        self._stack = new_stack
        self._passability = passability

    def __repr__(self) -> str:
        return f"Cell(id={self._id}, stack={self._stack}, passability={self._passability.value})"
