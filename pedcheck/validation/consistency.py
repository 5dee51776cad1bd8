"""
Pedigree-wide consistency checks.

These checks look at all records together, across families:
- Individuals defined by more than one row
- Individuals used as both a father and a mother
- Mothers who are not female and fathers who are not male
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ..core.policy import CheckCategory
from ..core.record import Identifier, PedigreeRecord, is_absent
from ..core.sex import Sex
from .messages import (
    DUPLICATE_ROWS_REASON,
    DUPLICATE_ROWS_WHY,
    DUAL_ROLE_REASON,
    DUAL_ROLE_WHY,
    MOTHER_SEX_REASON,
    MOTHER_SEX_WHY,
    FATHER_SEX_REASON,
    FATHER_SEX_WHY,
)
from .verdict import PolicyReporter, explain

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ParentalRoles:
    """Individuals seen in each role, in first-seen order.

    Dicts with None values are used as ordered sets.
    """
    samples: Dict[Identifier, None] = field(default_factory=dict)
    fathers: Dict[Identifier, None] = field(default_factory=dict)
    mothers: Dict[Identifier, None] = field(default_factory=dict)
    duplicates: Dict[Identifier, None] = field(default_factory=dict)

    def dual_role(self) -> List[Identifier]:
        """Individuals listed both as a father and as a mother."""
        return [who for who in self.fathers if who in self.mothers]


def collect_roles(records: List[PedigreeRecord]) -> ParentalRoles:
    """
    Index samples, fathers and mothers over all records.

    A row for an already seen sample is recorded as a duplicate and its
    parents are not indexed.
    """
    roles = ParentalRoles()
    for record in records:
        if record.sample in roles.samples:
            roles.duplicates[record.sample] = None
            continue
        roles.samples[record.sample] = None
        if not is_absent(record.father):
            roles.fathers[record.father] = None
        if not is_absent(record.mother):
            roles.mothers[record.mother] = None
    return roles


def find_sex_mismatches(records: List[PedigreeRecord], roles: ParentalRoles):
    """
    Find mothers who are not female and fathers who are not male.

    Only individuals with their own row are checked; implied parents
    have no recorded sex. Records must already have normalized sex.

    Returns:
        Tuple of (mothers, fathers) lists, in row order
    """
    mothers: Dict[Identifier, None] = {}
    fathers: Dict[Identifier, None] = {}
    for record in records:
        if record.sex is not Sex.FEMALE and record.sample in roles.mothers:
            mothers[record.sample] = None
        if record.sex is not Sex.MALE and record.sample in roles.fathers:
            fathers[record.sample] = None
    return list(mothers), list(fathers)


def check_consistency(records: List[PedigreeRecord], reporter: PolicyReporter) -> None:
    """
    Report duplicate rows, dual parental roles and sex/role mismatches.

    Args:
        records: All records, with normalized sex
        reporter: Reporter receiving the findings
    """
    roles = collect_roles(records)

    if roles.duplicates:
        logger.debug(f"{len(roles.duplicates)} individual(s) defined more than once")
        reporter.add_problem(
            CheckCategory.DUPLICATES,
            DUPLICATE_ROWS_REASON,
            explain(roles.duplicates, DUPLICATE_ROWS_WHY)
        )

    both = roles.dual_role()
    if both:
        logger.debug(f"{len(both)} individual(s) used as both father and mother")
        reporter.add_problem(
            CheckCategory.DUPLICATES,
            DUAL_ROLE_REASON,
            explain(both, DUAL_ROLE_WHY)
        )

    bad_mothers, bad_fathers = find_sex_mismatches(records, roles)
    if bad_mothers:
        reporter.add_problem(
            CheckCategory.INCONSISTENT_SEX,
            MOTHER_SEX_REASON,
            explain(bad_mothers, MOTHER_SEX_WHY)
        )
    if bad_fathers:
        reporter.add_problem(
            CheckCategory.INCONSISTENT_SEX,
            FATHER_SEX_REASON,
            explain(bad_fathers, FATHER_SEX_WHY)
        )
