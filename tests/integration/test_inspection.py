from unittest.mock import AsyncMock

import httpx
import pytest
import respx

from crawler.core.errors import FetchError, NotFoundError, ValidationError
from crawler.parsers.yngogo import DETAIL_API_URL, LIST_API_URL, YngogoParser
from crawler.schemas import DetailRecord
from crawler.services import inspection
from crawler.targets.registry import TargetDefinition, TargetGroup, TargetRegistry

BOARD_URL = "http://www.yngogo.or.kr/subList/20000001"
DETAIL_URL = "http://www.yngogo.or.kr/subList/20000001?pmode=detail&nttSeq=1005200642&bbsSeq=25&sitecntntsSeq=20000003"


@pytest.fixture
def registry():
    parser = YngogoParser(menu_seq="20000001", bbs_seq="25", sitecntnts_seq="20000003")
    return TargetRegistry([
        TargetGroup(
            id="archaeology",
            name="고고학회",
            targets=[parser.as_target("yngogo-notice", "영남고고학회 공지사항", BOARD_URL)],
        )
    ])


@pytest.mark.asyncio
class TestInspectList:
    """Integration tests for list inspection through the cache"""

    async def test_list_flow(self, registry, cache, list_fragment):
        with respx.mock:
            page_route = respx.get(BOARD_URL).mock(return_value=httpx.Response(200, text="<div id='app'></div>"))
            respx.post(LIST_API_URL).mock(return_value=httpx.Response(200, text=list_fragment))

            result = await inspection.inspect_list(registry, cache, "archaeology", "yngogo-notice")

        assert result.url == BOARD_URL
        assert result.html == "<div id='app'></div>"
        assert len(result.items) == 3
        assert result.cached is False
        assert result.timing.total == result.timing.fetch + result.timing.parse
        assert page_route.call_count == 1

    async def test_second_call_served_from_cache(self, registry, cache, list_fragment):
        with respx.mock:
            page_route = respx.get(BOARD_URL).mock(return_value=httpx.Response(200, text="shell"))
            respx.post(LIST_API_URL).mock(return_value=httpx.Response(200, text=list_fragment))

            await inspection.inspect_list(registry, cache, "archaeology", "yngogo-notice")
            second = await inspection.inspect_list(registry, cache, "archaeology", "yngogo-notice")
            forced = await inspection.inspect_list(
                registry, cache, "archaeology", "yngogo-notice", skip_cache=True
            )

        assert second.cached is True
        assert forced.cached is False
        assert page_route.call_count == 2

    async def test_custom_url(self, registry, cache, list_fragment):
        custom = BOARD_URL + "?page=2"
        with respx.mock:
            route = respx.get(custom).mock(return_value=httpx.Response(200, text="shell"))
            respx.post(LIST_API_URL).mock(return_value=httpx.Response(200, text=list_fragment))

            result = await inspection.inspect_list(
                registry, cache, "archaeology", "yngogo-notice", custom_url=custom
            )

        assert result.url == custom
        assert route.call_count == 1
        assert inspection.cache_stats(cache).urls == [custom]

    async def test_url_scheme_is_case_insensitive(self, cache):
        parse_detail = AsyncMock(return_value=DetailRecord(content="ok"))
        registry = TargetRegistry([
            TargetGroup(id="g", name="Group", targets=[
                TargetDefinition(
                    id="t",
                    name="Target",
                    url="https://example.com/list",
                    parse_list=AsyncMock(return_value=[]),
                    parse_detail=parse_detail,
                ),
            ]),
        ])
        with respx.mock:
            respx.get("https://example.com/post/2").mock(return_value=httpx.Response(200, text="<p>post</p>"))
            result = await inspection.inspect_detail(registry, cache, "g", "t", "HTTPS://example.com/post/2")

        assert result.url == "HTTPS://example.com/post/2"
        assert result.article.content == "ok"

    async def test_invalid_custom_url(self, registry, cache):
        with pytest.raises(ValidationError) as exc_info:
            await inspection.inspect_list(
                registry, cache, "archaeology", "yngogo-notice", custom_url="ftp://example.com"
            )
        assert exc_info.value.field == "custom_url"

    async def test_unknown_target_in_known_group(self, registry, cache):
        with pytest.raises(NotFoundError) as exc_info:
            await inspection.inspect_list(registry, cache, "archaeology", "missing-board")

        assert exc_info.value.resource == "target"
        assert exc_info.value.identifier == "missing-board"
        assert "missing-board" in str(exc_info.value)

    async def test_unknown_group(self, registry, cache):
        with pytest.raises(NotFoundError) as exc_info:
            await inspection.inspect_list(registry, cache, "history", "yngogo-notice")

        assert exc_info.value.resource == "group"

    async def test_page_fetch_error_propagates(self, registry, cache):
        with respx.mock:
            respx.get(BOARD_URL).mock(return_value=httpx.Response(404))
            with pytest.raises(FetchError) as exc_info:
                await inspection.inspect_list(registry, cache, "archaeology", "yngogo-notice")

        assert exc_info.value.status == 404
        assert inspection.cache_stats(cache).size == 0


@pytest.mark.asyncio
class TestInspectDetail:
    """Integration tests for detail inspection"""

    async def test_detail_flow(self, registry, cache, detail_fragment):
        shell = "<script>var q = 'pmode=detail&nttSeq=1005200642';</script>"
        with respx.mock:
            respx.get(DETAIL_URL).mock(return_value=httpx.Response(200, text=shell))
            respx.post(DETAIL_API_URL).mock(return_value=httpx.Response(200, text=detail_fragment))

            result = await inspection.inspect_detail(
                registry, cache, "archaeology", "yngogo-notice", DETAIL_URL
            )

        assert result.url == DETAIL_URL
        assert result.cached is False
        assert result.article.has_attachment is True
        assert "정기학술발표회" in result.article.content

    async def test_detail_url_required(self, registry, cache):
        with pytest.raises(ValidationError) as exc_info:
            await inspection.inspect_detail(registry, cache, "archaeology", "yngogo-notice", None)

        assert exc_info.value.field == "detail_url"
        assert str(exc_info.value) == "detail_url is required"

    async def test_parser_receives_page(self, cache):
        parse_detail = AsyncMock(return_value=DetailRecord(content="ok"))
        registry = TargetRegistry([
            TargetGroup(id="g", name="Group", targets=[
                TargetDefinition(
                    id="t",
                    name="Target",
                    url="https://example.com/list",
                    parse_list=AsyncMock(return_value=[]),
                    parse_detail=parse_detail,
                ),
            ]),
        ])
        with respx.mock:
            respx.get("https://example.com/post/1").mock(return_value=httpx.Response(200, text="<p>post</p>"))
            result = await inspection.inspect_detail(registry, cache, "g", "t", "https://example.com/post/1")

        parse_detail.assert_awaited_once_with("<p>post</p>")
        assert result.article.content == "ok"


class TestCacheMaintenanceService:
    def test_clear_cache(self, cache):
        assert inspection.clear_cache(cache) == {"success": True, "message": "Cache cleared"}
        assert inspection.cache_stats(cache).size == 0
