def parent(i: int) -> int:
    """Index of the parent of node `i`; -1 for the root."""
    return (i - 1) // 2

def left_child(i: int) -> int:
    """Index of the left child of node `i`."""
    return 2 * i + 1

def right_child(i: int) -> int:
    """Index of the right child of node `i`."""
    return 2 * i + 2
