"""Tests for family indexing, connectivity and cycle detection."""

from pedcheck.core.record import PedigreeRecord
from pedcheck.validation.connectivity import find_unconnected, kinship_components
from pedcheck.validation.cycles import find_cyclic
from pedcheck.validation.kinship import FamilyIndex


def family(*rows):
    return FamilyIndex([PedigreeRecord(family='FAM01', sample=s, father=f, mother=m) for s, f, m in rows])


class TestFamilyIndex:
    """Test individual enumeration."""

    def test_enumeration_order(self):
        """Test samples come first, then fathers, then mothers."""
        index = family(('C1', 'D', 'M'), ('C2', 'D2', None), ('D', None, None))

        assert index.individuals == ['C1', 'C2', 'D', 'D2', 'M']
        assert index.index['M'] == 4
        assert len(index) == 5

    def test_parent_links(self):
        """Test parent->child index pairs, father first."""
        index = family(('C1', 'D', 'M'))
        assert index.parent_links() == [(1, 0), (2, 0)]

    def test_identifiers_sorted_by_index(self):
        """Test identifiers come back in enumeration order."""
        index = family(('A', None, None), ('B', None, None), ('C', None, None))
        assert index.identifiers({2, 0}) == ['A', 'C']

    def test_mixed_identifier_types(self):
        """Test integer and string identifiers coexist."""
        index = family((1, '1', None))
        assert index.individuals == [1, '1']


class TestConnectivity:
    """Test connected component analysis."""

    def test_trio_with_implied_parents(self):
        """Test a trio is one component."""
        index = family(('C', 'D', 'M'))
        assert len(kinship_components(index)) == 1
        assert find_unconnected(index) == []

    def test_two_probands(self):
        """Test the later of two equal components is flagged."""
        index = family(('SAM001', None, None), ('SAM002', None, None))
        assert find_unconnected(index) == ['SAM002']

    def test_largest_component_wins(self):
        """Test a smaller earlier component is flagged."""
        index = family(('A', None, None), ('B', 'D', 'M'))
        assert find_unconnected(index) == ['A']

    def test_random_pedigree(self):
        """Test a forest of three components keeps only the biggest."""
        index = family(
            ('S0', None, None),
            ('S1', None, None),
            ('S2', 'S1', None),
            ('S3', 'S0', None),
            ('S4', None, None),
            ('S5', 'S0', None),
            ('S6', 'S0', 'S3'),
            ('S7', None, None),
            ('S8', None, 'S2'),
            ('S9', 'S0', 'S3'),
            ('S10', 'S7', 'S4'),
            ('S11', 'S8', 'S2'),
        )
        assert find_unconnected(index) == ['S1', 'S2', 'S4', 'S7', 'S8', 'S10', 'S11']


class TestCycles:
    """Test ancestry cycle detection."""

    def test_acyclic(self):
        """Test a three-generation pedigree has no cycles."""
        index = family(('C', 'D', 'M'), ('D', 'GD', 'GM'))
        assert find_cyclic(index) == []

    def test_self_parent(self):
        """Test an individual who is their own father."""
        index = family(('S31', 'S31', 'S32'), ('S32', None, None))
        assert find_cyclic(index) == ['S31']

    def test_two_cycle(self):
        """Test a parent who is also a child of their child."""
        index = family(('SAM001', 'SAM003', 'SAM002'), ('SAM002', None, None), ('SAM003', None, 'SAM001'))
        assert find_cyclic(index) == ['SAM001', 'SAM003']

    def test_long_cycle_excludes_outsiders(self):
        """Test only the members of a longer cycle are flagged."""
        index = family(('A', 'C', 'X'), ('B', 'A', None), ('C', 'B', None))
        assert find_cyclic(index) == ['A', 'B', 'C']
