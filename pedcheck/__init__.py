"""pedcheck - Structural validation of pedigrees for genetic analysis pipelines."""

__version__ = "0.1.0"

from .core.sex import Sex, normalize_sex
from .core.record import PedigreeRecord
from .core.policy import Severity, CheckCategory, Policy, STRICT, PERMISSIVE, get_preset
from .validation.verdict import Verdict
from .validation.validator import PedigreeValidator, validate

__all__ = [
    'Sex',
    'normalize_sex',
    'PedigreeRecord',
    'Severity',
    'CheckCategory',
    'Policy',
    'STRICT',
    'PERMISSIVE',
    'get_preset',
    'Verdict',
    'PedigreeValidator',
    'validate',
]
