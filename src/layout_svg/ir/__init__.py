"""Layout snapshot: node, edge, and cluster geometry from the layout collaborator."""

from layout_svg.ir.graph import ClusterNode, ClusterTree, EdgeGeometry, LayoutGraph, NodeGeometry

__all__ = [
    "ClusterNode",
    "ClusterTree",
    "EdgeGeometry",
    "LayoutGraph",
    "NodeGeometry",
]
