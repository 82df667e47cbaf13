from dataclasses import dataclass
from typing import Iterable, Iterator

from intcode.common.errors import IntcodeError


class BoundsError(IntcodeError):
    def __init__(self, address: int, size: int):
        self.address = address
        self.size = size
        super().__init__(f'Address {address} is out of bounds [0, {size})')


@dataclass(frozen=True)
class Memory:
    ''' Flat word-addressed memory; updates produce a new snapshot '''

    cells: tuple[int, ...] = ()

    @staticmethod
    def from_words(words: Iterable[int]) -> 'Memory':
        return Memory(tuple(words))

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[int]:
        return iter(self.cells)

    def check(self, address: int):
        if address < 0 or address >= len(self.cells):
            raise BoundsError(address, len(self.cells))

    def read(self, address: int) -> int:
        self.check(address)
        return self.cells[address]

    def write(self, address: int, value: int) -> 'Memory':
        self.check(address)
        cells = self.cells
        return Memory(cells[:address] + (value,) + cells[address + 1:])

    def to_list(self) -> list[int]:
        return list(self.cells)
