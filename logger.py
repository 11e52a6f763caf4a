import sys

verbose = False

def set_verbose(enabled: bool) -> None:
    global verbose
    verbose = enabled

def print_(*args, **kwargs):
    """Debug output, written to stderr only when verbose output is enabled."""
    if verbose:
        kwargs.setdefault("file", sys.stderr)
        print(*args, **kwargs)
