"""Containers grouping values per component, per commitment tree and per column."""

from __future__ import annotations

from itertools import chain
from typing import Callable, Iterable


class ComponentVec(list):
    """A list of column lists, one for each component of the air."""

    def flatten(self) -> list:
        """All columns of all components, in order."""
        return list(chain.from_iterable(self))

    def flatten_cols(self) -> list:
        """All values of all columns of all components, in order."""
        return [value for component in self for column in component for value in column]


class TreeVec(list):
    """A list holding one element for each commitment tree."""

    def map(self, f: Callable) -> "TreeVec":
        return TreeVec(f(tree) for tree in self)

    def zip(self, other: Iterable) -> "TreeVec":
        """Pair elements tree by tree; raises ValueError if lengths differ."""
        return TreeVec(zip(self, other, strict=True))

    def map_cols(self, f: Callable) -> "TreeVec":
        """Apply ``f`` to every column entry of every tree."""
        return TreeVec([f(value) for value in tree] for tree in self)

    def zip_cols(self, other: Iterable) -> "TreeVec":
        """Pair entries of two trees-of-columns with the same shape.

        Raises ValueError if the number of trees or of columns differs.
        """
        return TreeVec(
            list(zip(mine, theirs, strict=True))
            for mine, theirs in zip(self, other, strict=True)
        )

    def flatten(self) -> list:
        """All column entries of all trees, in order."""
        return list(chain.from_iterable(self))

    def flatten_cols(self) -> list:
        """All values of all column lists of all trees, in order."""
        return [value for tree in self for column in tree for value in column]