"""
Computation registry.

An ordered, read-only mapping from index to computation. One slot holds the
assessor itself, modelled as a computation over a single natural number.
"""

import logging
from collections.abc import Mapping
from typing import Dict, Iterator, Optional

from halting.models.assessment import Computation

logger = logging.getLogger(__name__)


class RegistryConfigurationError(ValueError):
    """Raised when a registry cannot be built from the given settings."""


class ComputationRegistry(Mapping):
    """Immutable mapping of index (1..N) to Computation."""

    def __init__(self, entries: Dict[int, Computation], distinguished_index: int):
        self._entries = dict(sorted(entries.items()))
        self._distinguished_index = distinguished_index

    def __getitem__(self, index: int) -> Computation:
        return self._entries[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"ComputationRegistry(size={len(self)}, "
            f"assessor_index={self.assessor_index})"
        )

    @property
    def size(self) -> int:
        return len(self._entries)

    @property
    def distinguished_index(self) -> int:
        """Slot reserved for the assessor, whether or not it is bound there."""
        return self._distinguished_index

    @property
    def assessor_index(self) -> Optional[int]:
        """Index of the entry tagged as the assessor, or None when absent."""
        for index, computation in self._entries.items():
            if computation.is_assessor:
                return index
        return None

    def is_assessor(self, index: int) -> bool:
        """Whether the computation bound at ``index`` is the assessor."""
        computation = self._entries.get(index)
        return computation is not None and computation.is_assessor


def build_registry(
    size: int = 8,
    distinguished_index: int = 6,
    include_assessor: bool = True
) -> ComputationRegistry:
    """
    Build the registry of computations for indices 1..size.

    Args:
        size: Number of computations (N)
        distinguished_index: Slot bound to the assessor-as-computation
        include_assessor: When False the slot holds an ordinary placeholder

    Returns:
        ComputationRegistry

    Raises:
        RegistryConfigurationError: If size < 1 or the distinguished index
            lies outside 1..size
    """
    if size < 1:
        raise RegistryConfigurationError(f"Registry size must be at least 1, got {size}")
    if not 1 <= distinguished_index <= size:
        raise RegistryConfigurationError(
            f"Distinguished index {distinguished_index} is outside 1..{size}"
        )

    entries = {
        index: Computation(
            index=index,
            is_assessor=include_assessor and index == distinguished_index
        )
        for index in range(1, size + 1)
    }
    registry = ComputationRegistry(entries, distinguished_index)

    logger.info(
        f"Built registry of {size} computations "
        f"(assessor at {registry.assessor_index})"
    )
    return registry
