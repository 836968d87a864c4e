"""
kruskals.py — Kruskal's Minimum Spanning Tree
==============================================
Sort every edge by weight, then accept each edge whose endpoints are in
different union-find sets.

Steps emitted:
  1. Initial graph                                     →  INIT
  2. Edges sorted (highlight order = sorted order)     →  SORT_EDGES
  3. Union-find initialised, every node its own set    →  DSU_INIT
  4. Per edge: CONSIDER, CONNECTIVITY (both roots), then
       ACCEPT  (after the union) or REJECT (would close a cycle)
  5. DONE with cost and edge count

Ties in weight keep the graph's edge order (`sorted` is stable).
On a disconnected graph the result is a spanning forest, which is a
normal outcome and is only labelled as such in the final message.
"""

from typing import Generator, List

from graph import Graph
from algorithms.step import GraphStep, GraphStepBuilder, StepEvent
from structures import DisjointSet


PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",                                   # 0
    "    edges ← sort(E, key=weight)",                       # 1
    "    dsu ← DisjointSet(V)",                              # 2
    "    for (u, v) in edges:",                              # 3
    "        if dsu.find(u) ≠ dsu.find(v):",                 # 4
    "            mst.add((u, v));  dsu.union(u, v)",         # 5
    "        else: skip (cycle)",                            # 6
    "    return mst",                                        # 7
]


def kruskals(graph: Graph) -> Generator[GraphStep, None, None]:
    sb = GraphStepBuilder(graph)

    yield sb.build(StepEvent.INIT, "Initial graph.")

    sorted_edges = sorted(graph.edge_list(), key=lambda e: e.weight)
    sb.pseudocode_line = 1
    yield sb.build(
        StepEvent.SORT_EDGES,
        f"Sorted all {len(sorted_edges)} edges by weight (ascending): "
        f"[{', '.join(e.label() for e in sorted_edges)}].",
        highlighted_edges=[e.id for e in sorted_edges],
    )

    node_ids = graph.node_ids()
    dsu = DisjointSet(node_ids)
    sb.pseudocode_line = 2
    yield sb.build(
        StepEvent.DSU_INIT,
        "Initialising the disjoint-set forest. Each node is its own set.",
        highlighted_nodes=node_ids,
        dsu_state=dsu.snapshot(),
    )

    for edge in sorted_edges:
        ends = [edge.source, edge.target]

        sb.pseudocode_line = 3
        yield sb.build(
            StepEvent.CONSIDER,
            f"Considering edge between node {edge.source} and node {edge.target} (weight {edge.weight}).",
            highlighted_nodes=ends,
            highlighted_edges=[edge.id],
            candidate_edge=edge,
            dsu_state=dsu.snapshot(),
        )

        root_source = dsu.find(edge.source)
        root_target = dsu.find(edge.target)
        sb.pseudocode_line = 4
        yield sb.build(
            StepEvent.CONNECTIVITY,
            f"Checking connectivity: node {edge.source} (root {root_source}), "
            f"node {edge.target} (root {root_target}).",
            highlighted_nodes=ends,
            highlighted_edges=[edge.id],
            candidate_edge=edge,
            dsu_state=dsu.snapshot(),
        )

        if root_source != root_target:
            dsu.union(edge.source, edge.target)
            sb.accept(edge)
            sb.pseudocode_line = 5
            yield sb.build(
                StepEvent.ACCEPT,
                f"Nodes {edge.source} and {edge.target} are in different sets. "
                f"Added edge to the MST and merged the sets. MST cost: {sb.mst_cost}.",
                highlighted_nodes=ends,
                highlighted_edges=sb.mst_edge_ids(),
                candidate_edge=edge,
                dsu_state=dsu.snapshot(),
            )
        else:
            sb.pseudocode_line = 6
            yield sb.build(
                StepEvent.REJECT,
                f"Nodes {edge.source} and {edge.target} are already connected (root {root_source}). "
                f"Skipping edge to avoid a cycle.",
                highlighted_nodes=ends,
                highlighted_edges=sb.mst_edge_ids(),
                candidate_edge=edge,
                dsu_state=dsu.snapshot(),
            )

    sb.pseudocode_line = 7
    edges = len(sb.mst_edges)
    if graph.node_count() > 0 and edges < graph.node_count() - 1:
        message = (
            f"Kruskal's algorithm complete. The graph is disconnected, so the result is a spanning forest "
            f"of {dsu.set_count()} trees. Final cost: {sb.mst_cost} ({edges} edges)."
        )
    else:
        message = f"Kruskal's algorithm complete. Final MST cost: {sb.mst_cost} ({edges} edges)."
    yield sb.build(
        StepEvent.DONE,
        message,
        highlighted_edges=sb.mst_edge_ids(),
        dsu_state=dsu.snapshot(),
        is_final=True,
    )


def kruskals_steps(graph: Graph) -> List[GraphStep]:
    return list(kruskals(graph))
