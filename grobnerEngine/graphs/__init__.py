from grobnerEngine.graphs.graph import Graph
from grobnerEngine.graphs.dimacs import read_dimacs, load_dimacs

__all__ = ['Graph', 'read_dimacs', 'load_dimacs']
