"""
Pedigree validation engine.

Runs the checks in a fixed order so that the verdict is reproducible:
empty -> multiple families -> shared individuals -> duplicate rows ->
dual parental role -> sex/role consistency -> connectivity -> cycles.
Connectivity and cycles are analysed per family, families in first-seen
order, and each is reported once for the whole pedigree.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..core.policy import STRICT, CheckCategory, Policy, resolve_policy
from ..core.record import PedigreeRecord, coerce_record
from .connectivity import check_connectivity
from .consistency import check_consistency
from .cycles import check_cycles
from .families import check_families, partition_families
from .kinship import FamilyIndex
from .messages import EMPTY_REASON
from .verdict import PolicyReporter, Verdict

logger = logging.getLogger(__name__)

RecordLike = Union[PedigreeRecord, Mapping[str, Any]]
PolicyLike = Union[Policy, str, Mapping[str, Any], None]


class PedigreeValidator:
    """
    Validates the structure of a pedigree under a severity policy.

    The validator holds no state between calls; one instance may be
    shared freely.
    """

    def __init__(self, policy: PolicyLike = STRICT):
        """
        Initialize the validator.

        Args:
            policy: A Policy, a preset name ('strict', 'permissive'), a
                total mapping of category to severity, or None for strict
        """
        self.policy = resolve_policy(policy)

    def validate(self, records: Iterable[RecordLike]) -> Verdict:
        """
        Validate a pedigree.

        Args:
            records: PedigreeRecord instances or mappings with the same keys

        Returns:
            The verdict for these records
        """
        reporter = PolicyReporter(self.policy)
        rows = self._prepare(records)

        if not rows:
            reporter.add_problem(CheckCategory.EMPTY, EMPTY_REASON)
            return self._finish(reporter)

        families = partition_families(rows)
        check_families(families, reporter)
        check_consistency(rows, reporter)

        indexed = [(family_id, FamilyIndex(family_rows)) for family_id, family_rows in families.items()]
        check_connectivity(indexed, reporter)
        check_cycles(indexed, reporter)

        return self._finish(reporter)

    @staticmethod
    def _prepare(records: Iterable[RecordLike]) -> List[PedigreeRecord]:
        """Coerce records and normalize sex on copies, leaving the caller's rows intact."""
        return [coerce_record(row).with_normalized_sex() for row in records]

    @staticmethod
    def _finish(reporter: PolicyReporter) -> Verdict:
        verdict = reporter.finish()
        logger.info(str(verdict))
        return verdict


def validate(records: Iterable[RecordLike], options: Optional[PolicyLike] = STRICT) -> Verdict:
    """
    Validate a pedigree under a severity policy.

    Args:
        records: PedigreeRecord instances or mappings with the same keys
        options: A Policy, a preset name, a total mapping of category to
            severity, or None for strict

    Returns:
        The verdict for these records
    """
    return PedigreeValidator(options).validate(records)
