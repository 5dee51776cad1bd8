"""
Data model for pedigree validation.

Provides pedigree records, sex normalization and the severity policy
that governs how each check category is reported.
"""

from .sex import Sex, normalize_sex
from .record import Identifier, PedigreeRecord, coerce_record, is_absent
from .policy import (
    Severity,
    CheckCategory,
    Policy,
    STRICT,
    PERMISSIVE,
    PRESETS,
    get_preset,
    resolve_policy,
)

__all__ = [
    # Records
    'Identifier',
    'PedigreeRecord',
    'coerce_record',
    'is_absent',
    'Sex',
    'normalize_sex',

    # Policy
    'Severity',
    'CheckCategory',
    'Policy',
    'STRICT',
    'PERMISSIVE',
    'PRESETS',
    'get_preset',
    'resolve_policy',
]
