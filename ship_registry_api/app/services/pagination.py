"""Page slicing for ship listings."""

from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 3


def paginate(items: Sequence[T], page_number: Optional[int] = None, page_size: Optional[int] = None) -> List[T]:
    """Return the ``page_number``-th page (0-indexed) of ``page_size`` items.

    The window is clamped to the end of ``items``; a page starting past
    the end is empty.  Negative arguments are not checked here.
    """
    page = DEFAULT_PAGE_NUMBER if page_number is None else page_number
    size = DEFAULT_PAGE_SIZE if page_size is None else page_size
    start = page * size
    if start >= len(items):
        return []
    return list(items[start:min(start + size, len(items))])
