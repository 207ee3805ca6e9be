"""Worker count resolution utilities."""
import os
from typing import Union

from ..errors import InvalidParameter


def resolve_workers(workers: Union[str, int]) -> int:
    """Resolve a worker setting to a concrete thread count.
    
    Args:
        workers: 'auto' or a positive integer (string or int)
        
    Returns:
        Number of worker threads to use
        
    Raises:
        InvalidParameter: if workers is neither 'auto' nor a positive integer
    """
    if workers == "auto":
        return os.cpu_count() or 1
    try:
        count = int(workers)
    except (TypeError, ValueError):
        raise InvalidParameter(f"workers must be a positive integer or 'auto', got {workers!r}") from None
    if count < 1:
        raise InvalidParameter(f"workers must be >= 1 or 'auto', got {workers!r}")
    return count
