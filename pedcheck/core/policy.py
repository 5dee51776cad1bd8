"""
Severity policy for pedigree checks.

Each of the seven check categories is assigned a severity:
- IGNORE: findings are discarded
- WARNING: findings are reported but validation still passes
- ERROR: findings are reported and validation fails
"""

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, Mapping, Union


class Severity(Enum):
    """How a check category's findings are treated."""
    IGNORE = "ignore"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def parse(cls, value: Union['Severity', str]) -> 'Severity':
        """Convert a member or its string value into a Severity.

        Raises:
            ValueError: If the value is not a known severity
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise ValueError(
            f"Unknown severity {value!r}; expected one of "
            f"{', '.join(s.value for s in cls)}"
        )


class CheckCategory(Enum):
    """The fixed set of check categories, valued by their option names."""
    EMPTY = "empty"
    DUPLICATES = "duplicates"
    INCONSISTENT_SEX = "inconsistentSex"
    MULTIPLE_FAMILIES = "multipleFamilies"
    ONE_FAMILY = "oneFamily"
    FULLY_CONNECTED = "fullyConnected"
    CYCLES = "cycles"

    @property
    def field_name(self) -> str:
        """Name of the matching Policy attribute."""
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Policy:
    """Severity assigned to every check category."""
    empty: Severity
    duplicates: Severity
    inconsistent_sex: Severity
    multiple_families: Severity
    one_family: Severity
    fully_connected: Severity
    cycles: Severity

    def __post_init__(self):
        # Accept plain strings so presets and overrides can be written tersely
        for f in fields(self):
            object.__setattr__(self, f.name, Severity.parse(getattr(self, f.name)))

    def severity_for(self, category: CheckCategory) -> Severity:
        """Get the configured severity for a category."""
        return getattr(self, category.field_name)

    def with_overrides(self, **changes: Union[Severity, str]) -> 'Policy':
        """Return a copy with some categories changed.

        Keyword names may be attribute names or option names, e.g.
        ``STRICT.with_overrides(empty="error", fullyConnected="warning")``.
        """
        return replace(self, **{_field_name(key): value for key, value in changes.items()})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Policy':
        """Create a policy from a mapping of category to severity.

        The mapping must be total: every category appears exactly once,
        under its option name (``inconsistentSex``) or attribute name
        (``inconsistent_sex``).

        Raises:
            ValueError: On unknown, missing or repeated categories, or
                unknown severities
        """
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _field_name(key)
            if name in values:
                raise ValueError(f"Category {key!r} is given more than once")
            values[name] = value

        missing = [c.value for c in CheckCategory if c.field_name not in values]
        if missing:
            raise ValueError(f"Policy is missing categories: {', '.join(missing)}")

        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        """Convert to a mapping of option name to severity string."""
        return {c.value: self.severity_for(c).value for c in CheckCategory}


def _field_name(key: str) -> str:
    """Resolve an option name or attribute name to the Policy attribute."""
    for category in CheckCategory:
        if key in (category.value, category.field_name):
            return category.field_name
    raise ValueError(f"Unknown check category {key!r}")


STRICT = Policy(
    empty="ignore",
    duplicates="error",
    inconsistent_sex="error",
    multiple_families="error",
    one_family="error",
    fully_connected="error",
    cycles="error",
)

PERMISSIVE = Policy(
    empty="ignore",
    duplicates="warning",
    inconsistent_sex="error",
    multiple_families="ignore",
    one_family="ignore",
    fully_connected="warning",
    cycles="error",
)

PRESETS: Dict[str, Policy] = {
    'strict': STRICT,
    'permissive': PERMISSIVE,
}


def get_preset(name: str) -> Policy:
    """Look up a named preset policy.

    Raises:
        ValueError: If no preset has that name
    """
    try:
        return PRESETS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown policy preset {name!r}; expected one of {', '.join(PRESETS)}"
        ) from None


def resolve_policy(options: Union[Policy, str, Mapping[str, Any], None]) -> Policy:
    """Turn the accepted forms of validation options into a Policy.

    Args:
        options: A Policy, a preset name, a total mapping, or None for strict

    Raises:
        ValueError: If the options cannot be turned into a policy
        TypeError: If the options are of an unsupported type
    """
    if options is None:
        return STRICT
    if isinstance(options, Policy):
        return options
    if isinstance(options, str):
        return get_preset(options)
    if isinstance(options, Mapping):
        return Policy.from_dict(options)
    raise TypeError(f"Unsupported validation options of type {type(options).__name__}")
