"""Tests for hierarchy traversal and compaction."""

import h3
import pytest

from h3query.grid import HierarchyWalker, IDENTIFIER_CODEC

from .conftest import HIERARCHY_LAT, HIERARCHY_LNG


class TestParents:
    """Test single-step and chained parent lookups."""

    def test_ancestor_chain(self, queries):
        """Test ancestors run from the immediate parent down to resolution 0."""
        cell = queries.latlng_to_cell(HIERARCHY_LAT, HIERARCHY_LNG, 14)
        parents = queries.cell_to_parents(cell)

        assert len(parents) == 14
        for index, parent in enumerate(parents):
            expected_res = 14 - index - 1
            assert queries.get_resolution(parent) == expected_res
            assert parent == queries.cell_to_parent(cell, expected_res)

    def test_resolution_zero_has_no_ancestors(self, queries):
        cell = queries.latlng_to_cell(HIERARCHY_LAT, HIERARCHY_LNG, 0)
        assert queries.cell_to_parents(cell) == []

    def test_direct_parent(self, queries, hierarchy_cell):
        parent = queries.cell_direct_parent(hierarchy_cell)

        assert queries.get_resolution(parent) == 4
        assert parent == queries.cell_to_parent(hierarchy_cell, 4)

    def test_direct_parent_of_resolution_zero(self, queries):
        cell = queries.latlng_to_cell(HIERARCHY_LAT, HIERARCHY_LNG, 0)

        with pytest.raises(h3.H3BaseException):
            queries.cell_direct_parent(cell)

    def test_parent_finer_than_cell(self, queries, hierarchy_cell):
        with pytest.raises(h3.H3BaseException):
            queries.cell_to_parent(hierarchy_cell, 6)

    def test_missing_arguments(self, queries, hierarchy_cell):
        assert queries.cell_to_parent(None, 3) is None
        assert queries.cell_to_parent(hierarchy_cell, None) is None
        assert queries.cell_direct_parent(None) is None
        assert queries.cell_to_parents(None) is None


class TestChildren:
    """Test children, descendants and center-child chains."""

    def test_children(self, queries, hierarchy_cell):
        children = queries.cell_to_children(hierarchy_cell, 6)

        assert len(children) == 7
        assert all(queries.cell_direct_parent(child) == hierarchy_cell for child in children)

    def test_descendants_levels_in_order(self, queries, hierarchy_cell):
        """Test descendants concatenate each finer level, coarsest first."""
        descendants = queries.cell_to_descendants(hierarchy_cell, 3)

        assert len(descendants) == 7 + 49 + 343
        assert descendants[:7] == queries.cell_to_children(hierarchy_cell, 6)
        assert descendants[7:56] == queries.cell_to_children(hierarchy_cell, 7)
        assert descendants[56:] == queries.cell_to_children(hierarchy_cell, 8)

    def test_descendants_deep(self, queries, hierarchy_cell):
        descendants = queries.cell_to_descendants(hierarchy_cell, 5)
        resolutions = [queries.get_resolution(cell) for cell in descendants]

        assert len(descendants) == sum(7**level for level in range(1, 6))
        assert resolutions == sorted(resolutions)
        assert set(resolutions) == {6, 7, 8, 9, 10}
        for cell in descendants:
            assert queries.cell_to_parent(cell, 5) == hierarchy_cell

    @pytest.mark.parametrize("depth", [0, -1, None])
    def test_descendants_without_depth(self, queries, hierarchy_cell, depth):
        assert queries.cell_to_descendants(hierarchy_cell, depth) is None

    def test_descendants_missing_cell(self, queries):
        assert queries.cell_to_descendants(None, 2) is None

    def test_center_descendants(self, queries, hierarchy_cell):
        chain = queries.cell_to_center_descendants(hierarchy_cell, 4)

        assert chain == [
            queries.cell_to_center_child(hierarchy_cell, res) for res in range(6, 10)
        ]
        assert [queries.get_resolution(cell) for cell in chain] == [6, 7, 8, 9]

    @pytest.mark.parametrize("depth", [0, -2])
    def test_center_descendants_non_positive_depth(self, queries, hierarchy_cell, depth):
        assert queries.cell_to_center_descendants(hierarchy_cell, depth) == []

    def test_center_child_inside_parent(self, queries, hierarchy_cell):
        center = queries.cell_to_center_child(hierarchy_cell, 9)
        assert queries.cell_to_parent(center, 5) == hierarchy_cell

    def test_missing_arguments(self, queries, hierarchy_cell):
        assert queries.cell_to_children(None, 6) is None
        assert queries.cell_to_children(hierarchy_cell, None) is None
        assert queries.cell_to_center_child(None, 6) is None
        assert queries.cell_to_center_child(hierarchy_cell, None) is None
        assert queries.cell_to_center_descendants(None, 2) is None
        assert queries.cell_to_center_descendants(hierarchy_cell, None) is None


class TestCompaction:
    """Test compact and uncompact round trips."""

    @pytest.mark.parametrize("res", range(5, 11))
    def test_round_trip(self, queries, res):
        """Test uncompacting a compacted disk restores the original cells."""
        origin = queries.latlng_to_cell(HIERARCHY_LAT, HIERARCHY_LNG, res)
        disk = queries.grid_disk(origin, 4)

        compacted = queries.compact_cells(disk)
        restored = queries.uncompact_cells(compacted, res)

        assert len(compacted) <= len(disk)
        assert sorted(restored) == sorted(disk)

    def test_full_children_compact_to_parent(self, queries, hierarchy_cell):
        children = queries.cell_to_children(hierarchy_cell, 7)
        assert queries.compact_cells(children) == [hierarchy_cell]

    def test_uncompact_to_finer_resolution(self, queries, hierarchy_cell):
        assert sorted(queries.uncompact_cells([hierarchy_cell], 7)) == sorted(
            queries.cell_to_children(hierarchy_cell, 7)
        )

    def test_missing_arguments(self, queries, hierarchy_cell):
        assert queries.compact_cells(None) is None
        assert queries.uncompact_cells(None, 5) is None
        assert queries.uncompact_cells([hierarchy_cell], None) is None


class TestHierarchyWalker:
    """Test the walker directly, outside the facade."""

    def test_walker_uses_codec_api(self):
        walker = HierarchyWalker(IDENTIFIER_CODEC)
        cell = walker.api.latlng_to_cell(HIERARCHY_LAT, HIERARCHY_LNG, 2)

        assert walker.api is IDENTIFIER_CODEC.api
        assert walker.ancestors(cell) == [
            walker.parent(cell, 1),
            walker.parent(cell, 0),
        ]
