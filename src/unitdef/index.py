"""Ancestry index over parsed unit trees.

Units carry no parent pointer, so ancestry is answered by an index built
from a single walk of the tree(s).

Example usage:
    units = parse(text)
    index = UnitIndex(units)
    job = index.get("/ROOT/NET/JOB1")
    print(index.parent_of(job).name)  # "NET"
"""

from collections.abc import Iterable, Iterator

from .ast import FullQualifiedName, Unit, walk


def _as_fqn(target: "Unit | FullQualifiedName | str") -> FullQualifiedName:
    if isinstance(target, Unit):
        return target.fqn
    if isinstance(target, str):
        return FullQualifiedName.parse(target)
    return target


class UnitIndex:
    """Maps each unit's full qualified name to the unit."""

    def __init__(self, roots: Unit | Iterable[Unit]):
        if isinstance(roots, Unit):
            roots = [roots]
        self.roots: list[Unit] = list(roots)
        self._units: dict[FullQualifiedName, Unit] = {}
        for root in self.roots:
            for unit in walk(root):
                self._units[unit.fqn] = unit

    def __contains__(self, target: "Unit | FullQualifiedName | str") -> bool:
        return _as_fqn(target) in self._units

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units.values())

    def get(self, target: "FullQualifiedName | str") -> Unit | None:
        return self._units.get(_as_fqn(target))

    def parent_of(self, target: "Unit | FullQualifiedName | str") -> Unit | None:
        parent = _as_fqn(target).parent
        if parent is None:
            return None
        return self._units.get(parent)

    def ancestors_of(self, target: "Unit | FullQualifiedName | str") -> list[Unit]:
        """Ancestors nearest first, ending at the root."""
        result = []
        parent = self.parent_of(target)
        while parent is not None:
            result.append(parent)
            parent = self.parent_of(parent)
        return result

    def find(self, name: str) -> list[Unit]:
        """All indexed units called ``name``, in depth-first order."""
        return [u for u in self._units.values() if u.name == name]
