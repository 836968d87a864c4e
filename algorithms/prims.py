"""
prims.py — Prim's Minimum Spanning Tree
========================================
Grows a tree from a start node by repeatedly taking the cheapest edge
that leaves the visited set.

Steps emitted:
  1. Initial graph (states the start node, and any fallback)
  2. Start node marked visited                        →  VISIT
  3. Frontier seeded with the start node's edges      →  FRONTIER
  4. Per extraction: SELECT the cheapest edge, then
       SKIP    if its far end is already visited, or
       ACCEPT  (node visited, edge joins the tree) followed by
       FRONTIER with the newly visited node's edges merged in
  5. DONE with cost and edge count (notes a disconnected graph)

A graph with zero nodes yields a single ERROR step.

Frontier edges are re-oriented so `source` is the visited end and
`target` the unvisited end; edge ids are unchanged.
"""

from typing import Generator, List, Optional, Set

from graph import Graph
from algorithms.step import GraphStep, GraphStepBuilder, StepEvent
from structures import EdgeFrontier


PSEUDOCODE: List[str] = [
    "def Prim(graph, start):",                                  # 0
    "    visited ← {start}",                                     # 1
    "    pq ← edges incident to start",                          # 2
    "    while pq not empty and |visited| < |V|:",               # 3
    "        (u, v) ← pq.extract_min()",                         # 4
    "        if v in visited: continue",                         # 5
    "        visited.add(v);  mst.add((u, v))",                  # 6
    "        for each edge (v, w) with w not in visited:",       # 7
    "            pq.insert_or_improve((v, w))",                  # 8
    "    return mst",                                            # 9
]


def prims(graph: Graph, start_node_id: Optional[int] = 0) -> Generator[GraphStep, None, None]:
    if graph.node_count() == 0:
        sb = GraphStepBuilder(graph)
        yield sb.build(StepEvent.ERROR, "Graph has no nodes. Nothing to span.", is_final=True)
        return

    requested = start_node_id
    if not graph.has_node(start_node_id):
        start_node_id = graph.first_node_id()

    sb = GraphStepBuilder(graph, start_node_id=start_node_id)
    visited: Set[int] = set()
    frontier = EdgeFrontier()
    total = graph.node_count()

    def visited_ids() -> List[int]:
        # insertion order of the graph, not set order
        return [nid for nid in graph.nodes if nid in visited]

    def frontier_ids() -> List[str]:
        return [e.id for e in frontier.peek_all()]

    # -- initial --
    message = f"Initial graph. Starting Prim's algorithm from node {start_node_id}."
    if requested != start_node_id:
        message = (
            f"Start node {requested} is not in the graph; falling back to the first node, "
            f"{start_node_id}. " + message
        )
    yield sb.build(StepEvent.INIT, message)

    # -- start node --
    visited.add(start_node_id)
    sb.pseudocode_line = 1
    yield sb.build(
        StepEvent.VISIT,
        f"Adding start node {start_node_id} to the visited set.",
        highlighted_nodes=[start_node_id],
    )

    for edge in graph.incident_edges(start_node_id):
        far = edge.other_end(start_node_id)
        if far not in visited:
            frontier.insert_or_improve(edge.oriented_from(start_node_id), edge.weight)

    sb.pseudocode_line = 2
    yield sb.build(
        StepEvent.FRONTIER,
        f"Added edges of node {start_node_id} to the priority queue. PQ: [{_pq_text(frontier)}]",
        highlighted_nodes=[start_node_id],
        highlighted_edges=frontier_ids(),
        frontier=frontier.peek_all(),
    )

    # -- main loop --
    while not frontier.is_empty() and len(visited) < total:
        edge = frontier.extract_min()
        nxt = edge.target

        sb.pseudocode_line = 4
        yield sb.build(
            StepEvent.SELECT,
            f"Selecting edge {edge.id} ({edge.source}-{edge.target}) with minimum weight {edge.weight}. "
            f"Considering node {nxt}.",
            highlighted_nodes=visited_ids(),
            highlighted_edges=sb.mst_edge_ids() + [edge.id],
            candidate_edge=edge,
            frontier=frontier.peek_all(),
        )

        if nxt in visited:
            sb.pseudocode_line = 5
            yield sb.build(
                StepEvent.SKIP,
                f"Node {nxt} is already visited. Skipping edge {edge.id}.",
                highlighted_nodes=visited_ids(),
                highlighted_edges=sb.mst_edge_ids(),
                candidate_edge=edge,
                frontier=frontier.peek_all(),
            )
            continue

        visited.add(nxt)
        sb.accept(edge)
        sb.pseudocode_line = 6
        yield sb.build(
            StepEvent.ACCEPT,
            f"Adding node {nxt} to the visited set and edge {edge.id} to the MST. MST cost: {sb.mst_cost}.",
            highlighted_nodes=visited_ids(),
            highlighted_edges=sb.mst_edge_ids(),
            candidate_edge=edge,
            frontier=frontier.peek_all(),
        )

        changed = []
        for incident in graph.incident_edges(nxt):
            far = incident.other_end(nxt)
            if far in visited:
                continue
            oriented = incident.oriented_from(nxt)
            if frontier.insert_or_improve(oriented, oriented.weight):
                changed.append(oriented.label())

        sb.pseudocode_line = 8
        yield sb.build(
            StepEvent.FRONTIER,
            f"Added/updated edges of node {nxt} in the PQ: [{', '.join(changed)}]. PQ: [{_pq_text(frontier)}]",
            highlighted_nodes=visited_ids(),
            highlighted_edges=sb.mst_edge_ids() + frontier_ids(),
            frontier=frontier.peek_all(),
        )

    # -- terminal --
    sb.pseudocode_line = 9
    edges = len(sb.mst_edges)
    if len(visited) == total:
        message = f"Prim's algorithm complete. Final MST cost: {sb.mst_cost}. Edges: {edges}."
    else:
        message = (
            f"Prim's algorithm complete, but the graph is disconnected. "
            f"Visited nodes: {len(visited)}/{total}. Final MST cost: {sb.mst_cost}. Edges: {edges}."
        )
    yield sb.build(
        StepEvent.DONE,
        message,
        highlighted_nodes=visited_ids(),
        highlighted_edges=sb.mst_edge_ids(),
        is_final=True,
    )


def _pq_text(frontier: EdgeFrontier) -> str:
    return ", ".join(f"{e.id}({e.weight})" for e in frontier.peek_all())


def prims_steps(graph: Graph, start_node_id: Optional[int] = 0) -> List[GraphStep]:
    return list(prims(graph, start_node_id))
