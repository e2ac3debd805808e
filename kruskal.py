import re
import sys

from typing import Iterable, Optional

WEIGHT_RE = re.compile(r'[+-]?\d+')
DELIMITER_RE = re.compile(r'\s*,\s*')


class ParseError(ValueError):
    def __init__(self, lineno: int, line: str, reason: str) -> None:
        self.lineno = lineno
        self.line = line
        self.reason = reason
        super().__init__(f'line {lineno}: {reason}: {line!r}')


class UnknownNodeError(KeyError):
    def __str__(self):
        return f'unknown node {self.args[0]!r}'


class UnionFind:
    '''
    Disjoint set keyed by node name.

    A node maps to its parent, or to None while it is the root of its
    component. Nodes have to be registered with add() before find/union.
    '''

    def __init__(self, nodes: Iterable[str] = ()) -> None:
        self.parents: dict[str, Optional[str]] = {}
        for node in nodes:
            self.add(node)

    def add(self, node: str) -> None:
        # re-registering keeps the existing parent link
        self.parents.setdefault(node, None)

    def __contains__(self, node: str) -> bool:
        return node in self.parents

    def __len__(self) -> int:
        return len(self.parents)

    def parent(self, node: str) -> Optional[str]:
        if node not in self.parents:
            raise UnknownNodeError(node)
        return self.parents[node]

    def find(self, node: str) -> str:
        parent = self.parent(node)

        while parent is not None:
            node = parent
            parent = self.parents[node]

        return node

    def union(self, a: str, b: str) -> str:
        '''
        Merge the components of a and b, returning the surviving root.

        When a is a root and b is not, a's tree goes under b's root.
        Otherwise b's root goes under a's root.
        '''
        root_a = self.find(a)
        root_b = self.find(b)

        if root_a == root_b:
            return root_a

        if a == root_a and b != root_b:
            self.parents[root_a] = root_b
            return root_b

        self.parents[root_b] = root_a
        return root_a

    def connected(self, a: str, b: str) -> bool:
        return self.find(a) == self.find(b)

    def components(self) -> list[list[str]]:
        groups: dict[str, list[str]] = {}
        for node in self.parents:
            groups.setdefault(self.find(node), []).append(node)
        return list(groups.values())


class Edge:
    __slots__ = ('u', 'v', 'weight')

    def __init__(self, a: str, b: str, weight: int) -> None:
        # endpoints are stored in lexicographic order
        self.u, self.v = (a, b) if a <= b else (b, a)
        self.weight = weight

    def key(self) -> tuple[str, str, int]:
        return (self.u, self.v, self.weight)

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __lt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight

    def __gt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight > other.weight

    def __repr__(self):
        return f'({self.u}, {self.v}, {self.weight})'

    def __str__(self):
        return f'{self.u},{self.weight},{self.v}'


def parse_line(line: str, lineno: int = 1) -> list[Edge]:
    '''
    Parse `source, w1, dest1, w2, dest2, ...` into its edges.

    Raises ParseError without producing any edge when the line is malformed.
    '''
    tokens = DELIMITER_RE.split(line.strip())
    source = tokens[0]

    if not source:
        raise ParseError(lineno, line, 'missing source node')
    if len(tokens) < 3:
        raise ParseError(lineno, line, 'expected at least one weight, destination pair')
    if len(tokens) % 2 == 0:
        raise ParseError(lineno, line, 'dangling weight without a destination')

    edges = []
    for i in range(1, len(tokens), 2):
        weight, dest = tokens[i], tokens[i + 1]
        if not WEIGHT_RE.fullmatch(weight):
            raise ParseError(lineno, line, f'weight {weight!r} is not an integer')
        if not dest:
            raise ParseError(lineno, line, 'missing destination node')
        edges.append(Edge(source, dest, int(weight)))

    return edges


def parse_edges(lines: Iterable[str]) -> tuple[list[Edge], UnionFind]:
    '''
    Parse every line into a deduplicated edge list plus a forest holding
    each node seen as its own root.

    The first occurrence of an edge wins, later copies are dropped.
    '''
    edge_set: dict[tuple[str, str, int], Edge] = {}
    forest = UnionFind()

    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        for edge in parse_line(line.rstrip('\r\n'), lineno):
            forest.add(edge.u)
            forest.add(edge.v)
            edge_set.setdefault(edge.key(), edge)

    return list(edge_set.values()), forest


class SpanningResult:
    def __init__(self, nodes: int = 0) -> None:
        self.edges: list[Edge] = []
        self.rejected: list[Edge] = []
        self.weight = 0
        self.nodes = nodes

    def accept(self, edge: Edge) -> None:
        self.edges.append(edge)
        self.weight += edge.weight

    def is_tree(self) -> bool:
        return self.nodes > 0 and len(self.edges) == self.nodes - 1

    def __iter__(self):
        return iter(self.edges)

    def __len__(self):
        return len(self.edges)

    def __repr__(self):
        return f'SpanningResult(edges={self.edges}, weight={self.weight})'


def kruskal(edges: Iterable[Edge], forest: UnionFind) -> SpanningResult:
    '''
    Select the minimum spanning forest of `edges`, updating `forest` as
    edges are accepted. Ties in weight keep their input order.
    '''
    mst = SpanningResult(len(forest))

    for edge in sorted(edges, key=lambda e: e.weight):
        if forest.find(edge.u) != forest.find(edge.v):
            mst.accept(edge)
            forest.union(edge.u, edge.v)
        else:
            mst.rejected.append(edge)

    return mst


def minimum_spanning_tree(lines: Iterable[str]) -> SpanningResult:
    edges, forest = parse_edges(lines)
    return kruskal(edges, forest)


def format_report(mst: SpanningResult) -> str:
    lines = [str(edge) for edge in mst]
    lines.append(f'Min Span Weight: {mst.weight}')
    return '\n'.join(lines)


def print_error(e: Exception) -> None:
    print(f'[Error] {type(e).__name__} - {e}')


def main(argv: Optional[list[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(prog='kruskal',
                                     description='Find the minimum spanning tree of a weighted edge list')
    parser.add_argument('files',
                        nargs='*',
                        metavar='file',
                        help='edge list to read, standard input when omitted')
    parser.add_argument('-v', '--verbose',
                        action='store_true',
                        help='print parse statistics and rejected edges')
    parser.add_argument('-c', '--check',
                        action='store_true',
                        help='verify the total weight against networkx')

    args = parser.parse_args(argv)

    if len(args.files) > 1:
        print(f"[Error] Too many arguments were passed to '{parser.prog}'")
        return 2

    try:
        if args.files:
            with open(args.files[0], 'r') as f:
                edges, forest = parse_edges(f)
        else:
            edges, forest = parse_edges(sys.stdin)
    except (OSError, ParseError) as e:
        print_error(e)
        return 1

    if args.verbose:
        print(f'Parsed {len(edges)} unique edges on {len(forest)} nodes')

    mst = kruskal(edges, forest)

    if args.verbose:
        for edge in mst.rejected:
            print(f'  rejected {edge} (would form a cycle)')
        if mst.nodes and not mst.is_tree():
            print(f'  graph is disconnected: {len(forest.components())} components')

    print(format_report(mst))

    if args.check:
        import nx_utils

        expected = nx_utils.reference_weight(edges)
        if expected != mst.weight:
            print(f'!!! Inconsistent result: networkx found weight {expected}')
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
