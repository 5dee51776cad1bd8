"""
Ancestry cycle detection, one family at a time.

No individual may be their own ancestor. Direct self-parentage is caught
while building the parent->child graph; longer cycles show up as
strongly connected components with more than one member.
"""

import logging
from typing import Dict, Iterable, List, Set, Tuple

import networkx as nx

from ..core.policy import CheckCategory
from ..core.record import Identifier
from .kinship import FamilyIndex
from .messages import CYCLES_REASON, CYCLES_WHY
from .verdict import PolicyReporter, explain

logger = logging.getLogger(__name__)


def build_descent_graph(family: FamilyIndex, self_parents: Set[int]) -> nx.DiGraph:
    """
    Build the directed parent->child graph of a family.

    Self-loops are left out of the graph and collected in self_parents.
    """
    graph = nx.DiGraph()
    graph.add_nodes_from(range(len(family)))
    for parent, child in family.parent_links():
        if parent == child:
            self_parents.add(child)
            continue
        graph.add_edge(parent, child)
    return graph


def find_cyclic(family: FamilyIndex) -> List[Identifier]:
    """
    Find every individual who is their own ancestor.

    Returns:
        Cyclic individuals in enumeration order
    """
    cyclic: Set[int] = set()
    graph = build_descent_graph(family, cyclic)

    for component in nx.strongly_connected_components(graph):
        # Singletons are acyclic once self-loops are excluded
        if len(component) > 1:
            cyclic.update(component)

    return family.identifiers(cyclic)


def check_cycles(families: Iterable[Tuple[Identifier, FamilyIndex]], reporter: PolicyReporter) -> None:
    """
    Report individuals who are their own ancestor.

    Findings from all families are reported together as one finding;
    an individual cyclic in several families is listed once.
    """
    cyclic: Dict[Identifier, None] = {}
    for family_id, family in families:
        found = find_cyclic(family)
        if found:
            logger.debug(f"Family {family_id}: {len(found)} individual(s) in ancestry cycles")
            cyclic.update(dict.fromkeys(found))

    if cyclic:
        reporter.add_problem(
            CheckCategory.CYCLES,
            CYCLES_REASON,
            explain(cyclic, CYCLES_WHY)
        )
