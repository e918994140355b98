# fe_worksheets/kernel/dof.py
"""
DOF MANAGER: Element-Level Degree of Freedom Ordering
=====================================================

PURPOSE:
--------
Every element matrix in the worksheets uses node-interleaved ordering:

    2D continuum:  [u1, v1, u2, v2, ...]           (2 DOF/node)
    3D brick:      [u1, v1, w1, u2, v2, w2, ...]   (3 DOF/node)
    Beam:          [v1, θ1, v2, θ2]                (2 DOF/node)

The B matrix columns, the expansion of the scalar mass matrix into a
vector-valued one, and the direction-wise mass checks in lumping all need
the same map from (node, local_dof) to a row/column index. Keeping that
map in one place stops the element code from hand-writing index tables.

USAGE:
------
    dof = DOFManager(dof_per_node=2)
    dof.idx(node_id=2, local_dof=1)     # → 5 (v of the third node)
    dof.direction_dofs(0, n_nodes=4)    # → [0, 2, 4, 6] (all u DOFs)
"""

from dataclasses import dataclass
from typing import List


@dataclass
class DOFManager:
    """
    Maps (node, local DOF) to an element matrix index.

    Attributes:
    -----------
    dof_per_node : int
        2 for plane elements and beams, 3 for the brick.

    Examples:
    ---------
    >>> dof = DOFManager(dof_per_node=2)
    >>> dof.idx(0, 1)
    1
    >>> dof.idx(3, 0)
    6
    >>> dof.ndof(8)
    16
    """
    dof_per_node: int

    def idx(self, node_id: int, local_dof: int) -> int:
        """Index of local DOF `local_dof` (0=u, 1=v, 2=w) of node `node_id`."""
        return self.dof_per_node * node_id + local_dof

    def ndof(self, n_nodes: int) -> int:
        """Total DOFs of an element with n_nodes nodes."""
        return self.dof_per_node * n_nodes

    def node_dofs(self, node_id: int) -> List[int]:
        """
        All indices belonging to one node.

        >>> DOFManager(dof_per_node=3).node_dofs(2)
        [6, 7, 8]
        """
        base = self.dof_per_node * node_id
        return list(range(base, base + self.dof_per_node))

    def element_dof_map(self, node_ids: List[int]) -> List[int]:
        """
        Flattened indices for a list of nodes.

        >>> DOFManager(dof_per_node=2).element_dof_map([0, 3])
        [0, 1, 6, 7]
        """
        result = []
        for node_id in node_ids:
            result.extend(self.node_dofs(node_id))
        return result

    def direction_dofs(self, direction: int, n_nodes: int) -> List[int]:
        """
        Indices of one displacement direction over all nodes.

        >>> DOFManager(dof_per_node=2).direction_dofs(1, 3)
        [1, 3, 5]
        """
        if not 0 <= direction < self.dof_per_node:
            raise ValueError(
                f"direction {direction} out of range [0, {self.dof_per_node})"
            )
        return [self.idx(n, direction) for n in range(n_nodes)]


# Convenience: pre-configured managers
DOF_PLANE = DOFManager(dof_per_node=2)   # u, v
DOF_SOLID = DOFManager(dof_per_node=3)   # u, v, w
