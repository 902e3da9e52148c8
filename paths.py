"""
Path reconstruction and text rendering for algorithm result tables.
"""

from typing import List, Optional, Sequence, TextIO

from algorithms import ResultTable

ARROW = " --> "
NO_PATH = "<no path>"


def reconstruct_path(table: ResultTable, dest: int) -> Optional[List[int]]:
    """
    Walk parent pointers back from dest to the source.

    The source is the vertex that is its own parent. Returns the vertices in
    source -> dest order, or None if dest has no entry or was never reached.
    A table made stale by later mutations is walked as recorded.
    """
    record = table.get(dest)
    if record is None or not record.reached:
        return None

    path = [dest]
    current = dest
    while table[current].parent != current:
        current = table[current].parent
        path.append(current)

    path.reverse()
    return path


def format_metric(value: float) -> str:
    """Render a distance the way a default-formatted stream prints a double."""
    return f"{value:g}"


def format_path(path: Sequence[int]) -> str:
    return ARROW.join(str(v) for v in path)


def write_path(table: ResultTable, dest: int, out: TextIO) -> None:
    """Write `src --> ... --> dest` or `<no path>`, newline-terminated."""
    path = reconstruct_path(table, dest)
    if path is None:
        out.write(NO_PATH + "\n")
        return
    out.write(format_path(path) + "\n")


def write_shortest_path(table: ResultTable, dest: int, out: TextIO) -> None:
    """Like write_path, with ` distance: <value>` appended to the path line."""
    path = reconstruct_path(table, dest)
    if path is None:
        out.write(NO_PATH + "\n")
        return
    out.write(f"{format_path(path)} distance: {format_metric(table[dest].metric)}\n")
