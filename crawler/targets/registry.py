from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Iterable, List

from crawler.core.errors import NotFoundError
from crawler.schemas import DetailRecord, ListItem

ParseList = Callable[[str], Awaitable[List[ListItem]]]
ParseDetail = Callable[[str], Awaitable[DetailRecord]]


@dataclass
class TargetDefinition:
    id: str
    name: str
    url: str
    parse_list: ParseList
    parse_detail: ParseDetail

@dataclass
class TargetGroup:
    id: str
    name: str
    targets: List[TargetDefinition] = field(default_factory=list)

class TargetRegistry:
    """Lookup of crawl targets by group id and target id."""

    def __init__(self, groups: Iterable[TargetGroup]):
        self.groups: Dict[str, TargetGroup] = {}
        self._targets: Dict[str, Dict[str, TargetDefinition]] = {}
        for group in groups:
            self.groups[group.id] = group
            self._targets[group.id] = {target.id: target for target in group.targets}

    def find_group(self, group_id: str) -> TargetGroup:
        group = self.groups.get(group_id)
        if group is None:
            raise NotFoundError("group", group_id)
        return group

    def find_target(self, group_id: str, target_id: str) -> TargetDefinition:
        self.find_group(group_id)
        target = self._targets[group_id].get(target_id)
        if target is None:
            raise NotFoundError("target", target_id)
        return target

    def describe(self) -> List[Dict[str, Any]]:
        """Id, name and url of every group and target, without the parsers"""
        return [
            {
                "id": group.id,
                "name": group.name,
                "targets": [
                    {"id": target.id, "name": target.name, "url": target.url}
                    for target in group.targets
                ],
            }
            for group in self.groups.values()
        ]
