from typing import List, Optional

from .labels import Label


def reconstruct_path(label: Optional[Label]) -> List[str]:
    """
    Reconstruct the ordered airport codes from a terminal label.

    Returns:
        path: airport codes from origin to the label's airport,
        empty when label is None (no route).
    """
    path: List[str] = []

    curr: Optional[Label] = label
    while curr is not None:
        path.append(curr.airport)
        curr = curr.prev

    path.reverse()

    return path


def format_solution(label: Optional[Label]) -> str:
    """
    Render a terminal label as 'A -> B -> C (cost)'.

    Returns:
        Human-readable description, 'no route' when label is None.
    """
    if label is None:
        return "no route"
    return f"{' -> '.join(reconstruct_path(label))} ({label.cost:.5f})"
