"""
H3 hierarchy traversal for the H3 query facade.

Builds ancestor chains, bounded-depth descendant sets and center-child chains
out of single-step parent/child primitive calls, and passes compaction and
uncompaction through to the grid library.
"""

from typing import Any, List, Optional

from ..common import get_logger, TimedLogger, log_cell_operation
from .representation import CellCodec

logger = get_logger("grid.hierarchy")


class HierarchyWalker:
    """Walks up and down the H3 resolution hierarchy for one cell encoding."""

    def __init__(self, codec: CellCodec):
        """
        Initialize hierarchy walker.

        Args:
            codec: Cell encoding whose h3 API module performs each step
        """
        self.codec = codec
        self.api = codec.api
        self.logger = logger

    def parent(self, cell: Any, parent_res: Optional[int]) -> Any:
        """Get the ancestor of a cell at parent_res."""
        if cell is None or parent_res is None:
            return None
        return self.api.cell_to_parent(cell, parent_res)

    def direct_parent(self, cell: Any) -> Any:
        """
        Get the immediate parent of a cell (one resolution coarser).

        Resolution 0 cells have no parent; the grid library rejects the
        request with its own resolution error.
        """
        if cell is None:
            return None
        return self.api.cell_to_parent(cell, self.api.get_resolution(cell) - 1)

    def ancestors(self, cell: Any) -> Optional[List[Any]]:
        """
        Get every ancestor of a cell, immediate parent first.

        Args:
            cell: Cell at resolution R

        Returns:
            Cells at resolutions R-1, R-2, ..., 0 (empty for resolution 0),
            or None when cell is None
        """
        if cell is None:
            return None

        resolution = self.api.get_resolution(cell)
        return [
            self.api.cell_to_parent(cell, res) for res in range(resolution - 1, -1, -1)
        ]

    def children(self, cell: Any, child_res: Optional[int]) -> Optional[List[Any]]:
        """Get the children of a cell at child_res."""
        if cell is None or child_res is None:
            return None
        return list(self.api.cell_to_children(cell, child_res))

    def descendants(self, cell: Any, depth: Optional[int]) -> Optional[List[Any]]:
        """
        Get all descendants of a cell down to depth resolutions below it.

        Each level is computed directly from the root cell, not refined from
        the previous level.

        Args:
            cell: Root cell at resolution R
            depth: Number of finer resolutions to enumerate

        Returns:
            Children at R+1, then R+2, ..., R+depth concatenated in that order,
            or None when cell or depth is None or depth is not positive
        """
        if cell is None or depth is None or depth <= 0:
            return None

        resolution = self.api.get_resolution(cell)
        with TimedLogger(
            self.logger, "cell_to_descendants", resolution=resolution, depth=depth
        ):
            result = []
            for offset in range(1, depth + 1):
                result.extend(self.api.cell_to_children(cell, resolution + offset))

            self.logger.debug(
                f"Enumerated {len(result)} descendants",
                extra=log_cell_operation(
                    "cell_to_descendants",
                    cells_out=len(result),
                    resolution=resolution,
                    depth=depth,
                ),
            )
            return result

    def center_child(self, cell: Any, child_res: Optional[int]) -> Any:
        """Get the center child of a cell at child_res."""
        if cell is None or child_res is None:
            return None
        return self.api.cell_to_center_child(cell, child_res)

    def center_descendants(
        self, cell: Any, depth: Optional[int]
    ) -> Optional[List[Any]]:
        """
        Get the center child of a cell at each of the next depth resolutions.

        Args:
            cell: Root cell at resolution R
            depth: Number of finer resolutions

        Returns:
            One cell per resolution R+1 ... R+depth (empty when depth <= 0),
            or None when cell or depth is None
        """
        if cell is None or depth is None:
            return None

        resolution = self.api.get_resolution(cell)
        return [
            self.api.cell_to_center_child(cell, resolution + offset)
            for offset in range(1, depth + 1)
        ]

    def compact(self, cells: Optional[List[Any]]) -> Optional[List[Any]]:
        """Compact a single-resolution cell set into a mixed-resolution cover."""
        if cells is None:
            return None

        compacted = list(self.api.compact_cells(cells))
        self.logger.debug(
            "Compacted cell set",
            extra=log_cell_operation(
                "compact_cells", cells_in=len(cells), cells_out=len(compacted)
            ),
        )
        return compacted

    def uncompact(
        self, cells: Optional[List[Any]], res: Optional[int]
    ) -> Optional[List[Any]]:
        """Expand a mixed-resolution cell set to cells at resolution res."""
        if cells is None or res is None:
            return None

        uncompacted = list(self.api.uncompact_cells(cells, res))
        self.logger.debug(
            "Uncompacted cell set",
            extra=log_cell_operation(
                "uncompact_cells",
                cells_in=len(cells),
                cells_out=len(uncompacted),
                resolution=res,
            ),
        )
        return uncompacted
