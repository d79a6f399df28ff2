from typing import List

from crawler.schemas import DetailRecord, ListItem
from crawler.targets.registry import TargetDefinition


class BaseParser:
    """
    Contract every source parser implements.

    Source parameters (board ids, selectors, endpoints) are bound in the
    constructor so both methods only take the fetched page. A parser may read
    that page or ignore it and retrieve its data some other way.
    """

    async def parse_list(self, html: str) -> List[ListItem]:
        raise NotImplementedError

    async def parse_detail(self, html: str) -> DetailRecord:
        raise NotImplementedError

    def as_target(self, target_id: str, name: str, url: str) -> TargetDefinition:
        return TargetDefinition(
            id=target_id,
            name=name,
            url=url,
            parse_list=self.parse_list,
            parse_detail=self.parse_detail,
        )
