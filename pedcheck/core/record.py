"""Record class for representing one row of a pedigree."""

from dataclasses import dataclass, replace
from typing import Any, List, Mapping, Optional, Union

from .sex import normalize_sex

# Family and individual identifiers
Identifier = Union[str, int]


def is_absent(value: Any) -> bool:
    """Check whether a parent field means "no parent recorded".

    None, the empty string and integer 0 are the blank markers callers
    use for a missing parent. The string "0" is a real identifier.
    """
    return value is None or value == "" or value == 0


@dataclass(slots=True)
class PedigreeRecord:
    """One row of a pedigree.

    Attributes:
        family: Family identifier
        sample: Identifier of the individual this row defines
        mother: Identifier of the mother, or a blank marker (see is_absent)
        father: Identifier of the father, or a blank marker (see is_absent)
        sex: Raw or canonical sex value (see normalize_sex)
    """

    family: Identifier
    sample: Identifier
    mother: Optional[Identifier] = None
    father: Optional[Identifier] = None
    sex: Any = None

    def parents(self) -> List[Identifier]:
        """Get the recorded parents, father first.

        Returns:
            List containing father and/or mother (excluding absent values)
        """
        parents = []
        if not is_absent(self.father):
            parents.append(self.father)
        if not is_absent(self.mother):
            parents.append(self.mother)
        return parents

    def has_parents(self) -> bool:
        """Check whether any parent is recorded (False for a proband)."""
        return not (is_absent(self.father) and is_absent(self.mother))

    def with_normalized_sex(self) -> 'PedigreeRecord':
        """Return a copy of this record with its sex normalized."""
        return replace(self, sex=normalize_sex(self.sex))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'PedigreeRecord':
        """Create a record from an already parsed mapping.

        Args:
            data: Mapping with 'family' and 'sample' keys, and optionally
                'mother', 'father' and 'sex'

        Returns:
            New PedigreeRecord

        Raises:
            ValueError: If 'family' or 'sample' is missing or None
        """
        for key in ('family', 'sample'):
            if data.get(key) is None:
                raise ValueError(f"Pedigree record is missing required field '{key}': {dict(data)!r}")

        return cls(
            family=data['family'],
            sample=data['sample'],
            mother=data.get('mother'),
            father=data.get('father'),
            sex=data.get('sex'),
        )


def coerce_record(row: Union[PedigreeRecord, Mapping[str, Any]]) -> PedigreeRecord:
    """Accept either a PedigreeRecord or a mapping and return a record.

    Raises:
        TypeError: If the row is neither a record nor a mapping
    """
    if isinstance(row, PedigreeRecord):
        return row
    if isinstance(row, Mapping):
        return PedigreeRecord.from_dict(row)
    raise TypeError(f"Expected PedigreeRecord or mapping, got {type(row).__name__}")
