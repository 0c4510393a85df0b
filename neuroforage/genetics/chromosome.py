"""Flat float32 genotype shared by the genetic operators."""

from typing import Iterable, Iterator, Union

import numpy as np


class Chromosome:
    """Ordered sequence of real-valued genes."""

    __slots__ = ("genes",)

    def __init__(self, genes: Union[Iterable[float], np.ndarray]):
        if isinstance(genes, np.ndarray):
            self.genes = np.array(genes, dtype=np.float32).reshape(-1)
        else:
            self.genes = np.fromiter(genes, dtype=np.float32)

    def __len__(self) -> int:
        return self.genes.size

    def __iter__(self) -> Iterator[float]:
        return iter(self.genes.tolist())

    def __getitem__(self, index):
        return self.genes[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        return np.array_equal(self.genes, other.genes)

    # genes are mutated in place
    __hash__ = None

    def __repr__(self):
        return f"Chromosome(len={len(self)}, genes={self.genes.tolist()})"

    def copy(self) -> "Chromosome":
        return Chromosome(self.genes)
