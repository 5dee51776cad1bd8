"""
Connectivity analysis, one family at a time.

Every individual in a family should belong to one kinship graph. The
individuals are merged into components through their parent links, the
largest component is taken as the family proper, and everyone outside
it is flagged.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from networkx.utils import UnionFind

from ..core.policy import CheckCategory
from ..core.record import Identifier
from .kinship import FamilyIndex
from .messages import CONNECTIVITY_REASON, CONNECTIVITY_WHY
from .verdict import PolicyReporter, explain

logger = logging.getLogger(__name__)


def kinship_components(family: FamilyIndex) -> List[List[int]]:
    """
    Partition a family's individuals into connected components.

    Returns:
        Components as index lists, ordered by first member in
        enumeration order; members are in enumeration order too
    """
    uf = UnionFind(range(len(family)))
    for parent, child in family.parent_links():
        uf.union(child, parent)

    components: Dict[int, List[int]] = {}
    for i in range(len(family)):
        components.setdefault(uf[i], []).append(i)
    return list(components.values())


def find_unconnected(family: FamilyIndex) -> List[Identifier]:
    """
    Find the individuals outside the family's main component.

    The main component is the largest one; on a tie the first
    component in enumeration order wins.

    Returns:
        Unconnected individuals in enumeration order (empty if the
        family is fully connected)
    """
    components = kinship_components(family)
    if len(components) <= 1:
        return []

    main: List[int] = []
    for component in components:
        if len(component) > len(main):
            main = component

    connected = set(main)
    return family.identifiers(i for i in range(len(family)) if i not in connected)


def check_connectivity(families: Iterable[Tuple[Identifier, FamilyIndex]], reporter: PolicyReporter) -> None:
    """
    Report individuals not connected to the rest of their family.

    Findings from all families are reported together as one finding,
    families in the given order.
    """
    unconnected: List[Identifier] = []
    for family_id, family in families:
        found = find_unconnected(family)
        if found:
            logger.debug(f"Family {family_id}: {len(found)} individual(s) not connected")
            unconnected.extend(found)

    if unconnected:
        reporter.add_problem(
            CheckCategory.FULLY_CONNECTED,
            CONNECTIVITY_REASON,
            explain(unconnected, CONNECTIVITY_WHY)
        )
