from dataclasses import dataclass
from typing import List, TypeVar

T = TypeVar("T")

GOLDEN = 0x6D2B79F5   # additive step per draw
MASK32 = 0xFFFFFFFF
SCALE = 4294967296.0  # 2^32

def imul(a: int, b: int) -> int:
    # 32-bit wrapping multiply
    return (a * b) & MASK32

def mix32(state: int) -> int:
    """Scramble a 32-bit state into an output word (two xor-shift/multiply rounds)."""
    t = state
    t = imul(t ^ (t >> 15), t | 1)
    t ^= (t + imul(t ^ (t >> 7), t | 61)) & MASK32
    return (t ^ (t >> 14)) & MASK32

@dataclass
class Mulberry32:
    state: int

    def __post_init__(self) -> None:
        self.state &= MASK32

    def next32(self) -> int:
        self.state = (self.state + GOLDEN) & MASK32
        return mix32(self.state)

    def random(self) -> float:
        return self.next32() / SCALE

    def below(self, n: int) -> int:
        """Integer in [0, n) from a single draw."""
        if n <= 0:
            raise ValueError("below() needs n > 0")
        return int(self.random() * n)

    def shuffle(self, items: List[T]) -> None:
        """Fisher–Yates, in place. Consumes len(items)-1 draws."""
        for i in range(len(items) - 1, 0, -1):
            j = self.below(i + 1)
            items[i], items[j] = items[j], items[i]

def make_rng(seed: int) -> Mulberry32:
    # Negative and oversized seeds wrap like the browser's 32-bit int coercion
    return Mulberry32(seed & MASK32)
