"""Dense integer indexing of the individuals in one family."""

from typing import Dict, Iterable, List, Tuple

from ..core.record import Identifier, PedigreeRecord, is_absent


class FamilyIndex:
    """Maps a family's individuals to dense integer indices.

    Individuals are enumerated as all samples, then all fathers, then all
    mothers, each in first-seen row order and without repeats. Implied
    parents (no own row) are included.
    """

    def __init__(self, rows: List[PedigreeRecord]):
        """
        Build the index for one family.

        Args:
            rows: The family's records
        """
        self.rows = rows
        self.individuals: List[Identifier] = []
        self.index: Dict[Identifier, int] = {}

        for who in self._enumerate(rows):
            if who not in self.index:
                self.index[who] = len(self.individuals)
                self.individuals.append(who)

    @staticmethod
    def _enumerate(rows: List[PedigreeRecord]) -> Iterable[Identifier]:
        for record in rows:
            yield record.sample
        for record in rows:
            if not is_absent(record.father):
                yield record.father
        for record in rows:
            if not is_absent(record.mother):
                yield record.mother

    def __len__(self) -> int:
        return len(self.individuals)

    def parent_links(self) -> List[Tuple[int, int]]:
        """Get (parent, child) index pairs for every recorded parent, father first."""
        links = []
        for record in self.rows:
            if not record.has_parents():
                continue
            child = self.index[record.sample]
            for parent in record.parents():
                links.append((self.index[parent], child))
        return links

    def identifiers(self, indices: Iterable[int]) -> List[Identifier]:
        """Map indices back to identifiers, in enumeration order."""
        return [self.individuals[i] for i in sorted(indices)]
