import networkx as nx
import random

from typing import Any, Callable, Iterable

from kruskal import Edge

def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)

def to_lines(g: nx.classes.graph.Graph,
             decide_weight: Callable[[Any, Any], int],
             nodename: Callable[[Any], str]= lambda x: str(x)) -> list[str]:
    # one line per source node, listing every neighbour not already written
    lines = []
    seen = set()

    for u in g.nodes:
        pairs = []
        for v in g.adj[u]:
            if v in seen:
                continue
            pairs.append(f'{decide_weight(u, v)}, {nodename(v)}')
        seen.add(u)

        if pairs:
            lines.append(', '.join([nodename(u)] + pairs))

    return lines

def to_output_file(g: nx.classes.graph.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   nodename: Callable[[Any], str]= lambda x: str(x)) -> None:
    with open(fname, 'w') as f:
        for line in to_lines(g, decide_weight, nodename):
            f.write(f'{line}\n')

def to_nx_graph(edges: Iterable[Edge]) -> nx.Graph:
    g = nx.Graph()

    for edge in edges:
        # parallel edges collapse onto the lightest one
        if g.has_edge(edge.u, edge.v) and g[edge.u][edge.v]['weight'] <= edge.weight:
            continue
        g.add_edge(edge.u, edge.v, weight=edge.weight)

    return g

def reference_weight(edges: Iterable[Edge], algorithm: str='prim') -> int:
    tree = nx.minimum_spanning_tree(to_nx_graph(edges), algorithm=algorithm)
    return sum(w for _u, _v, w in tree.edges(data='weight'))
