"""
Verdict and policy-driven reporting for pedigree validation.

Every check emits its findings through a PolicyReporter, which applies
the configured severity for the check's category:
- ERROR: marks the verdict as failed, then reports as for WARNING
- WARNING: records the reason and the per-individual explanations
- IGNORE: no effect
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from ..core.policy import CheckCategory, Policy, Severity
from ..core.record import Identifier

logger = logging.getLogger(__name__)

# (individual, explanation) pairs attached to a finding
Finding = Tuple[Identifier, str]


@dataclass(slots=True)
class Verdict:
    """Outcome of validating one pedigree.

    Attributes:
        ok: False once any ERROR-severity finding has been reported
        reasons: Pedigree-level findings, in reporting order
        problematic: Individuals with at least one explanation
        whys: Explanations per individual, in reporting order
    """

    ok: bool = True
    reasons: List[str] = field(default_factory=list)
    problematic: Set[Identifier] = field(default_factory=set)
    whys: Dict[Identifier, List[str]] = field(default_factory=dict)

    def __str__(self) -> str:
        """Human-readable result."""
        status = "OK" if self.ok else "FAILED"
        return f"Pedigree {status}: {len(self.reasons)} finding(s), {len(self.whys)} individual(s) flagged"

    def get_summary(self) -> str:
        """Get a multi-line summary of the verdict."""
        lines = [str(self)]

        if self.reasons:
            lines.append(f"\nFindings ({len(self.reasons)}):")
            for reason in self.reasons:
                lines.append(f"  - {reason}")

        if self.whys:
            lines.append(f"\nIndividuals ({len(self.whys)}):")
            for who, why in self.whys.items():
                lines.append(f"  {who}: {'; '.join(why)}")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary.

        ``problematic`` is listed in the order individuals were first flagged.
        """
        return {
            'ok': self.ok,
            'reasons': list(self.reasons),
            'problematic': list(self.whys),
            'whys': {who: list(why) for who, why in self.whys.items()},
        }


class PolicyReporter:
    """Accumulates findings into a Verdict according to a Policy.

    A reporter is created for a single validation call and owns the
    verdict until finish() hands it back.
    """

    def __init__(self, policy: Policy):
        """
        Initialize the reporter.

        Args:
            policy: Severity policy to apply
        """
        self.policy = policy
        self.verdict = Verdict()

    def add_problem(
        self,
        category: CheckCategory,
        reason: str,
        findings: Optional[Iterable[Finding]] = None
    ) -> None:
        """
        Report a finding for a check category.

        Args:
            category: Check category the finding belongs to
            reason: Pedigree-level description of the finding
            findings: Optional (individual, explanation) pairs
        """
        severity = self.policy.severity_for(category)
        logger.debug(f"{category.value} ({severity.value}): {reason}")

        if severity is Severity.ERROR:
            self.verdict.ok = False

        if severity in (Severity.ERROR, Severity.WARNING):
            self.verdict.reasons.append(reason)
            for who, why in findings or ():
                self.verdict.problematic.add(who)
                self.verdict.whys.setdefault(who, []).append(why)

    def finish(self) -> Verdict:
        """Return the accumulated verdict."""
        return self.verdict


def explain(individuals: Iterable[Identifier], why: str) -> List[Finding]:
    """Pair every individual with the same explanation."""
    return [(who, why) for who in individuals]
