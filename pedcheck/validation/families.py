"""
Family partitioning of pedigree records.

Groups records by family and detects individuals who are mentioned in
more than one family.
"""

import logging
from typing import Dict, List

from ..core.policy import CheckCategory
from ..core.record import Identifier, PedigreeRecord
from .messages import MULTIPLE_FAMILIES_REASON, ONE_FAMILY_REASON, ONE_FAMILY_WHY
from .verdict import PolicyReporter, explain

logger = logging.getLogger(__name__)


def partition_families(records: List[PedigreeRecord]) -> Dict[Identifier, List[PedigreeRecord]]:
    """
    Group records by family identifier.

    Args:
        records: Pedigree records

    Returns:
        Dict of family id to its records, in first-seen family order
    """
    families: Dict[Identifier, List[PedigreeRecord]] = {}
    for record in records:
        families.setdefault(record.family, []).append(record)
    return families


def find_shared_individuals(families: Dict[Identifier, List[PedigreeRecord]]) -> List[Identifier]:
    """
    Find individuals mentioned in more than one family.

    An individual is mentioned in a family when it appears there as
    sample, father or mother.

    Returns:
        Shared individuals, in order of first mention
    """
    memberships: Dict[Identifier, set] = {}
    for family_id, rows in families.items():
        for record in rows:
            for who in [record.sample] + record.parents():
                memberships.setdefault(who, set()).add(family_id)

    return [who for who, family_ids in memberships.items() if len(family_ids) > 1]


def check_families(
    families: Dict[Identifier, List[PedigreeRecord]],
    reporter: PolicyReporter
) -> None:
    """
    Report multiple families and individuals shared between families.

    The shared-individual check runs whatever the severity of the
    multiple-families check.
    """
    if len(families) > 1:
        logger.debug(f"Pedigree has {len(families)} families")
        reporter.add_problem(CheckCategory.MULTIPLE_FAMILIES, MULTIPLE_FAMILIES_REASON)

    shared = find_shared_individuals(families)
    if shared:
        logger.debug(f"{len(shared)} individual(s) belong to more than one family")
        reporter.add_problem(
            CheckCategory.ONE_FAMILY,
            ONE_FAMILY_REASON,
            explain(shared, ONE_FAMILY_WHY)
        )
