"""
Tree projections over the flat page and block collections.

Nothing here keeps state of its own: every function derives a parent/child
view from the collections it is given. ``BlockIndex`` precomputes the
parent -> children grouping once so repeated lookups do not rescan the
whole block list.
"""

from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple, TypeVar

from ..models import Block, Page

T = TypeVar("T")


def group_by(items: Sequence[T], key: Callable[[T], Optional[str]]) -> Dict[Optional[str], List[T]]:
    """
    Group items by a key, keeping collection order within each group.

    Args:
        items: The flat collection
        key: Function returning the grouping key of an item

    Returns:
        Mapping from key to the items that share it
    """
    groups: Dict[Optional[str], List[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def child_pages(pages: Sequence[Page], parent_id: Optional[str]) -> List[Page]:
    """Pages directly under ``parent_id`` (root pages when None)."""
    return [page for page in pages if page.parent_id == parent_id]


def has_children(pages: Sequence[Page], page_id: str) -> bool:
    return any(page.parent_id == page_id for page in pages)


def descendant_ids(pages: Sequence[Page], page_id: str) -> List[str]:
    """
    Collect a page and all of its descendants in pre-order.

    Args:
        pages: The flat page collection
        page_id: Root of the subtree

    Returns:
        Ids of the subtree, starting with ``page_id`` itself
    """
    children = group_by(pages, lambda page: page.parent_id)
    collected: List[str] = []
    stack = [page_id]

    while stack:
        current = stack.pop()
        collected.append(current)
        # Reversed so the first child is visited first
        stack.extend(child.id for child in reversed(children.get(current, [])))

    return collected


def visible_pages(pages: Sequence[Page]) -> Iterator[Tuple[int, Page]]:
    """
    Walk the page outline the way the sidebar shows it.

    Yields ``(depth, page)`` pairs in pre-order, descending only into pages
    that are expanded.
    """
    children = group_by(pages, lambda page: page.parent_id)

    def walk(parent_id: Optional[str], depth: int) -> Iterator[Tuple[int, Page]]:
        for page in children.get(parent_id, []):
            yield depth, page
            if page.is_expanded:
                yield from walk(page.id, depth + 1)

    return walk(None, 0)


def top_level_blocks(blocks: Sequence[Block], page_id: str) -> List[Block]:
    """Blocks of a page that are not filed under a container."""
    return [block for block in blocks if block.page_id == page_id and not block.parent_block_id]


def child_blocks(blocks: Sequence[Block], parent_block_id: str) -> List[Block]:
    return [block for block in blocks if block.parent_block_id == parent_block_id]


class BlockIndex:
    """
    Precomputed parent/child views of a block collection.

    The index is a snapshot: it must be rebuilt whenever the collection it
    was built from changes.
    """

    def __init__(self, blocks: Sequence[Block]):
        self._by_id: Dict[str, Block] = {block.id: block for block in blocks}
        self._top_level = group_by(
            [block for block in blocks if not block.parent_block_id],
            lambda block: block.page_id
        )
        self._children = group_by(
            [block for block in blocks if block.parent_block_id],
            lambda block: block.parent_block_id
        )

    def get(self, block_id: str) -> Optional[Block]:
        return self._by_id.get(block_id)

    def page_blocks(self, page_id: str) -> List[Block]:
        return list(self._top_level.get(page_id, []))

    def children_of(self, parent_block_id: str) -> List[Block]:
        return list(self._children.get(parent_block_id, []))
