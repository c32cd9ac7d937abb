"""
Region forest assembly for hierarchical browsing.
"""

import warnings
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
from ..core.records import Region
from ..core.errors import DataIntegrityError, ErrorCode


@dataclass(frozen=True, eq=False, repr=False)
class RegionNode:
    """
    One region together with its full descendant tree.

    ``children`` are ordered by name (ordinal comparison, ties by id).
    Equality, hashing, ``repr`` and ``to_dict`` walk the tree with explicit
    stacks, so arbitrarily deep hierarchies stay within the interpreter's
    recursion limit.
    """

    id: int
    name: str
    parent_id: Optional[int] = None
    description: Optional[str] = None
    children: Tuple["RegionNode", ...] = ()

    def _fields(self) -> tuple:
        return (self.id, self.name, self.parent_id, self.description, len(self.children))

    def __eq__(self, other) -> bool:
        if not isinstance(other, RegionNode):
            return NotImplemented
        stack = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a is b:
                continue
            if a._fields() != b._fields():
                return False
            stack.extend(zip(a.children, b.children))
        return True

    def __hash__(self) -> int:
        return hash(self._fields())

    def __repr__(self) -> str:
        return (
            f"RegionNode(id={self.id!r}, name={self.name!r}, parent_id={self.parent_id!r}, "
            f"children={len(self.children)}, size={self.size()})"
        )

    def walk(self) -> Iterator["RegionNode"]:
        """Iterate this node and all descendants depth-first, pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def size(self) -> int:
        """Number of regions in this subtree, including this one."""
        return sum(1 for _ in self.walk())

    def find(self, region_id: int) -> Optional["RegionNode"]:
        """Find a region by id in this subtree."""
        for node in self.walk():
            if node.id == region_id:
                return node
        return None

    def to_dict(self) -> dict:
        """Convert to the nested region-tree shape returned to callers."""
        def shallow(node: "RegionNode") -> dict:
            return {
                "id": node.id,
                "name": node.name,
                "parentId": node.parent_id,
                "description": node.description,
                "children": [],
            }

        root = shallow(self)
        stack = [(self, root)]
        while stack:
            node, d = stack.pop()
            for child in node.children:
                child_dict = shallow(child)
                d["children"].append(child_dict)
                stack.append((child, child_dict))
        return root


def find_region_cycle(regions: Dict[int, Region]) -> Optional[List[int]]:
    """
    Find a cycle in the parent links of a region mapping.

    Parameters
    ----------
    regions : dict
        Mapping of region id to Region

    Returns
    -------
    cycle : list of int or None
        Region ids forming the cycle in parent-link order, or None if the
        parent links are acyclic. Parents that do not resolve end a chain.
    """
    acyclic = set()

    for start_id in sorted(regions):
        chain: List[int] = []
        on_chain = {}
        current = start_id

        while current is not None and current in regions and current not in acyclic:
            if current in on_chain:
                return chain[on_chain[current]:]
            on_chain[current] = len(chain)
            chain.append(current)
            current = regions[current].parent_id

        acyclic.update(chain)

    return None


def build_region_forest(regions: Iterable[Region], stacklevel: int = 2) -> List[RegionNode]:
    """
    Assemble a flat region list into its forest of trees.

    Parameters
    ----------
    regions : iterable of Region
        All region records
    stacklevel : int
        Passed to warnings.warn for orphaned regions, so the warning points
        at the caller that loaded the data

    Returns
    -------
    roots : list of RegionNode
        Regions without a parent, each carrying its descendants, ordered by name.
        A region whose parent id does not resolve becomes a root (with a warning).

    Raises
    ------
    DataIntegrityError
        On duplicate region ids or if any region is reachable from itself
        through parent links.
    """
    by_id: Dict[int, Region] = {}
    for region in regions:
        if region.id in by_id:
            raise DataIntegrityError(
                f"Duplicate region id {region.id}", ErrorCode.DUPLICATE_REGION_ID
            )
        by_id[region.id] = region

    cycle = find_region_cycle(by_id)
    if cycle is not None:
        ids = " -> ".join(str(rid) for rid in cycle + [cycle[0]])
        raise DataIntegrityError(f"Cycle in region hierarchy: {ids}", ErrorCode.REGION_CYCLE)

    children: Dict[int, List[Region]] = {rid: [] for rid in by_id}
    roots: List[Region] = []
    for region in by_id.values():
        if region.parent_id is None:
            roots.append(region)
        elif region.parent_id not in by_id:
            warnings.warn(
                f"Region {region.id} ('{region.name}') references unknown parent "
                f"{region.parent_id}; treating it as a root",
                UserWarning,
                stacklevel=stacklevel,
            )
            roots.append(region)
        else:
            children[region.parent_id].append(region)

    def by_name(r: Region):
        return (r.name, r.id)

    for siblings in children.values():
        siblings.sort(key=by_name)
    roots.sort(key=by_name)

    # Build bottom-up without recursion so deep hierarchies cannot hit the
    # interpreter's recursion limit.
    order: List[Region] = []
    stack = list(roots)
    while stack:
        region = stack.pop()
        order.append(region)
        stack.extend(children[region.id])

    built: Dict[int, RegionNode] = {}
    for region in reversed(order):
        built[region.id] = RegionNode(
            id=region.id,
            name=region.name,
            parent_id=region.parent_id,
            description=region.description,
            children=tuple(built[child.id] for child in children[region.id]),
        )

    return [built[root.id] for root in roots]


def count_regions(forest: Iterable[RegionNode]) -> int:
    """Total number of regions across a forest."""
    return sum(root.size() for root in forest)
