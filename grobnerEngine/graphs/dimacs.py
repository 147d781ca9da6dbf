'''
Reader for graphs in the DIMACS edge format:

    c a comment
    p edge 3 3
    e 1 2
    e 2 3
    e 1 3
'''

import logging
from pathlib import Path

from grobnerEngine.graphs.graph import Graph

logger = logging.getLogger(__name__)


def read_dimacs(text: str) -> Graph:
    '''
    Parses a DIMACS graph.

    Args:
    - text: the content of a DIMACS file.

    Returns:
    - the graph.
    '''
    graph = None
    declared_edges = 0

    for number, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if not fields or fields[0] == 'c':
            continue

        if fields[0] == 'p':
            if len(fields) != 4 or fields[1] != 'edge':
                raise ValueError(f'line {number}: expected "p edge <vertices> <edges>"')
            if graph is not None:
                raise ValueError(f'line {number}: duplicate problem line')
            graph = Graph(int(fields[2]))
            declared_edges = int(fields[3])

        elif fields[0] == 'e':
            if graph is None:
                raise ValueError(f'line {number}: edge before the problem line')
            if len(fields) != 3:
                raise ValueError(f'line {number}: expected "e <u> <v>"')
            graph.add_edge(int(fields[1]), int(fields[2]))

        else:
            raise ValueError(f'line {number}: unknown line type {fields[0]!r}')

    if graph is None:
        raise ValueError('missing problem line')

    if len(graph.edges()) != declared_edges:
        logger.warning('the problem line declares %d edges, found %d', declared_edges, len(graph.edges()))

    return graph


def load_dimacs(path: str | Path) -> Graph:
    return read_dimacs(Path(path).read_text())
