"""
Validation engine for pedigrees.

Provides family partitioning, pedigree-wide consistency checks,
per-family connectivity and cycle analysis, and the policy-driven
reporter that turns findings into a verdict.
"""

from .verdict import Verdict, PolicyReporter
from .families import partition_families, find_shared_individuals
from .consistency import ParentalRoles, collect_roles, find_sex_mismatches
from .kinship import FamilyIndex
from .connectivity import kinship_components, find_unconnected
from .cycles import find_cyclic
from .validator import PedigreeValidator, validate

__all__ = [
    # Verdict
    'Verdict',
    'PolicyReporter',

    # Checks
    'partition_families',
    'find_shared_individuals',
    'ParentalRoles',
    'collect_roles',
    'find_sex_mismatches',
    'FamilyIndex',
    'kinship_components',
    'find_unconnected',
    'find_cyclic',

    # Engine
    'PedigreeValidator',
    'validate',
]
