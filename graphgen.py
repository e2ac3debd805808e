import argparse
import random
import string

import numpy as np

def node_name(i: int) -> str:
    # spreadsheet style column names: A..Z, AA, AB, ...
    name = ''
    i += 1
    while i > 0:
        i, rem = divmod(i - 1, 26)
        name = string.ascii_uppercase[rem] + name
    return name

def generate_graph(nvertices: int,
                   density: float=0.5,
                   min_weight: int=1,
                   max_weight: int=100,
                   seed: int=0) -> np.ndarray:
    if not 0 <= density <= 1:
        raise ValueError(f'density must be between 0 and 1, got {density}')
    if min_weight < 1 or max_weight < min_weight:
        raise ValueError(f'bad weight range [{min_weight}, {max_weight}]')

    rng = random.Random(seed)
    total_edges = int(density * nvertices * (nvertices-1) / 2)

    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)

    for _ in range(total_edges):
        # Generate a random edge
        new_spot = False

        # keep trying until an unoccupied spot is found
        while not new_spot:
            i = rng.randint(0, nvertices-2)
            j = rng.randint(i+1, nvertices-1) # ensure no self-loops
            if adj_matrix[i, j] == 0:
                new_spot = True

        # Only bother filling upper triangle for undirected graphs
        adj_matrix[i, j] = rng.randint(min_weight, max_weight)

    return adj_matrix

def to_lines(adj_matrix: np.ndarray) -> list[str]:
    lines = []
    for i in range(adj_matrix.shape[0]):
        (dests,) = np.nonzero(adj_matrix[i, i+1:])
        if len(dests) == 0:
            continue
        pairs = [f'{adj_matrix[i, i+1+j]}, {node_name(i+1+j)}' for j in dests]
        lines.append(', '.join([node_name(i)] + pairs))
    return lines

def main(argv: list[str]=None) -> int:
    parser = argparse.ArgumentParser(prog='graphgen',
                                     description='Generate weighted edge lists for the MST solver')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-s', '--seed', default=0, type=int)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args(argv)

    if args.nvertices < 2:
        parser.error('nvertices must be at least 2')

    total_edges = int(args.density * args.nvertices * (args.nvertices-1) / 2)

    if not args.quiet:
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density} ({total_edges} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    try:
        adj_matrix = generate_graph(args.nvertices, args.density,
                                    args.min_weight, args.max_weight, args.seed)
    except ValueError as e:
        parser.error(str(e))

    if args.verbose:
        print()
        print('Graph adjacency matrix:')
        print(adj_matrix)

    with open(args.outfile, 'w') as f:
        for line in to_lines(adj_matrix):
            f.write(f'{line}\n')

    return 0

if __name__ == '__main__':
    raise SystemExit(main())
