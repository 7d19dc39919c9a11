"""
Group builder.

Partitions plan items into ordered groups. A group takes the position of the
first item carrying its key; later items with the same key join it even when
other items sit between them. Items without a key become standalone
singleton groups at their own position.
"""

from typing import Optional, Sequence

from ..data.models import PlanItem
from .models import STANDALONE_PREFIX, Group, GroupMember


def build_groups(items: Sequence[Optional[PlanItem]]) -> list[Group]:
    """Build the ordered group list, skipping None holes."""
    members_by_key: dict[str, list[GroupMember]] = {}
    order: list[tuple[str, Optional[str]]] = []        # (group id, key or None)
    standalones: dict[str, GroupMember] = {}

    for index, item in enumerate(items):
        if item is None:
            continue

        key = item.group_number
        member = GroupMember(index=index, item=item)

        if key is None:
            group_id = f"{STANDALONE_PREFIX}{index}"
            standalones[group_id] = member
            order.append((group_id, None))
            continue

        if key not in members_by_key:
            members_by_key[key] = []
            order.append((key, key))
        members_by_key[key].append(member)

    groups = []
    for group_id, key in order:
        if key is None:
            groups.append(Group(id=group_id, members=(standalones[group_id],), is_group=False))
        else:
            groups.append(Group(id=group_id, members=tuple(members_by_key[key]), is_group=True))
    return groups


def index_groups(groups: Sequence[Group]) -> dict[int, Group]:
    """Map every plan index to the real group that owns it."""
    owners = {}
    for group in groups:
        if not group.is_group:
            continue
        for member in group.members:
            owners[member.index] = group
    return owners


def find_group_for_item(groups: Sequence[Group], item_index: int) -> Optional[Group]:
    """Real group containing the item, None for standalone or unknown items."""
    for group in groups:
        if group.is_group and group.position_of(item_index) >= 0:
            return group
    return None


def has_groups(groups: Sequence[Group]) -> bool:
    """True when at least one item is explicitly grouped."""
    return any(group.is_group for group in groups)
