"""Reading and writing graphs and solver input files.

Graph text format::

    3            <- vertex count n
    1,3 2,3      <- edges leaving vertex 0 as <neighbor>,<weight> tokens
    2,2 0,3      <- vertex 1
    1,2 0,3      <- vertex 2

Missing trailing lines mean the remaining vertices have no outgoing edges and
a blank line is a vertex without outgoing edges. Neighbor ids are not checked
against ``n``.

An input file is a source vertex id on its own line followed by graph text.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from .exceptions import GraphFormatError, InputError
from .graph import Graph, Neighbor
from .pq import INFINITY

PathLike = Union[str, Path]

_UINT = re.compile(r"\+?[0-9]+")


def _parse_uint(token: str) -> int:
    """Parse an unsigned integer no larger than :data:`INFINITY`.

    Raises:
        ValueError: With a short reason when ``token`` is not acceptable.
    """
    if not token:
        raise ValueError("cannot parse integer from empty string")
    if not _UINT.fullmatch(token):
        raise ValueError(f"invalid digit found in {token!r}")
    value = int(token)
    if value > INFINITY:
        raise ValueError(f"number too large to fit in target type: {token!r}")
    return value


def _split_lines(body: str) -> List[str]:
    lines = body.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def _parse_neighbors(line: str, vertex: int) -> List[Neighbor]:
    where = f"vertex {vertex} (line {vertex + 2})"
    neighbors: List[Neighbor] = []
    for token in line.split():
        v_str, sep, w_str = token.partition(",")
        if not sep:
            raise GraphFormatError(f"{where}: edge {token!r} doesn't have a weight with it")
        try:
            v = _parse_uint(v_str)
        except ValueError as exc:
            raise GraphFormatError(f"{where}: cannot parse neighbor id: {exc}") from exc
        try:
            w = _parse_uint(w_str)
        except ValueError as exc:
            raise GraphFormatError(f"{where}: cannot parse weight: {exc}") from exc
        neighbors.append((v, w))
    return neighbors


def parse_graph(text: str) -> Graph:
    """Parse graph text into a :class:`Graph`.

    Args:
        text: Vertex count on the first line, then one neighbor line per vertex.

    Returns:
        The parsed graph.

    Raises:
        GraphFormatError: If the header cannot be split off or parsed, an edge
            token lacks its ``,`` separator, a neighbor id or weight is not an
            unsigned integer, or there are more neighbor lines than vertices.

    Note:
        Vertices past the last neighbor line get no edges. They cost one
        shared empty tuple each, but the graph still holds ``n`` slots, so
        memory grows with the declared count even for a near-empty body.
        Callers reading untrusted input should bound ``n`` first.

    Examples:
        ```python
        >>> parse_graph("3\\n1,3 2,3\\n2,2 0,3\\n1,2 0,3").adjacency[0]
        ((1, 3), (2, 3))
        >>> parse_graph("2\\n").adjacency
        ((), ())
        ```
    """
    header, sep, body = text.partition("\n")
    if not sep:
        raise GraphFormatError("cannot split vertex count from edges: no newline")
    try:
        n = _parse_uint(header.strip())
    except ValueError as exc:
        raise GraphFormatError(f"cannot parse n_vertices: {exc}") from exc

    adj: List[Sequence[Neighbor]] = []
    for vertex, line in enumerate(_split_lines(body)):
        if vertex >= n:
            if line.strip():
                raise GraphFormatError(f"line {vertex + 2}: more neighbor lines than the {n} declared vertices")
            continue
        adj.append(_parse_neighbors(line, vertex))
    # vertices without a line share one empty tuple
    adj.extend([()] * (n - len(adj)))
    return Graph(adj)


def format_graph(graph: Graph) -> str:
    """Serialize ``graph`` into the text format read by :func:`parse_graph`."""
    lines = [str(graph.vertex_count())]
    for neighbors in graph.adjacency:
        lines.append(" ".join(f"{v},{w}" for v, w in neighbors))
    return "\n".join(lines) + "\n"


def parse_input(text: str) -> Tuple[int, Graph]:
    """Split an input document into its source vertex and graph.

    Raises:
        InputError: If the source line is missing or not an unsigned integer.
        GraphFormatError: If the graph text is malformed.
    """
    source_str, sep, graph_text = text.partition("\n")
    if not sep:
        raise InputError("cannot split source vertex from graph: no newline")
    try:
        source = _parse_uint(source_str.strip())
    except ValueError as exc:
        raise InputError(f"cannot parse start vertex: {exc}") from exc
    return source, parse_graph(graph_text)


def read_input(path: PathLike) -> Tuple[int, Graph]:
    """Read and parse an input file.

    Raises:
        InputError: If the file cannot be read or its source line is invalid.
        GraphFormatError: If the graph text is malformed.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"error reading file: {exc}") from exc
    return parse_input(text)


def format_input(source: int, graph: Graph) -> str:
    """Return an input document for ``source`` and ``graph``."""
    return f"{source}\n{format_graph(graph)}"


def write_input(path: PathLike, source: int, graph: Graph) -> None:
    """Write an input file readable by :func:`read_input`."""
    Path(path).write_text(format_input(source, graph), encoding="utf-8")


__all__ = [
    "format_graph",
    "format_input",
    "parse_graph",
    "parse_input",
    "read_input",
    "write_input",
]
