import pytest

from crawler.cache.store import FetchCache


class FakeClock:
    """Manually advanced clock for TTL tests"""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


# Fragment returned by the board list endpoint: one header row and three posts
LIST_FRAGMENT = """
<table class="basic-table01">
    <tr>
        <th>번호</th><th>제목</th><th>작성자</th><th>등록일</th>
    </tr>
    <tr>
        <td>3</td>
        <td><a href="#" onclick="fnView('1005200642', 'admin', '', '','');">2024년 정기학술발표회 안내</a></td>
        <td>관리자</td>
        <td>2024-05-01</td>
    </tr>
    <tr>
        <td>2</td>
        <td><a href="#" onclick="fnView('1005200641', 'admin', '', '','');">회비 납부 안내</a></td>
        <td>관리자</td>
        <td>2024-04-15</td>
    </tr>
    <tr>
        <td>1</td>
        <td><a href="#" onclick="fnView('1005200640', 'admin', '', '','');">학회지 원고 모집</a></td>
        <td>관리자</td>
        <td>2024.03.02</td>
    </tr>
</table>
"""

DETAIL_FRAGMENT = """
<div class="view">
    <div class="conM_txt">
        <h2>정기학술발표회</h2>
        <p>일시: 2024년 6월 1일 <strong>오후 1시</strong></p>
        <p><img src="/upload/poster.jpg" alt="poster"></p>
    </div>
    <div id="atchFile_div">
        <a href="/download?fileId=1">poster.pdf</a>
    </div>
</div>
"""

SHELL_PAGE = """
<html>
<head><title>영남고고학회</title></head>
<body>
    <div id="bbsArea"></div>
    <script>
        var query = "pmode=detail&nttSeq='1005200644'&bbsSeq=BBS_0000001";
        fnLoadDetail();
    </script>
</body>
</html>
"""


@pytest.fixture
def clock():
    return FakeClock()

@pytest.fixture
def cache(clock):
    return FetchCache(ttl_seconds=300, clock=clock)

@pytest.fixture
def list_fragment():
    return LIST_FRAGMENT

@pytest.fixture
def detail_fragment():
    return DETAIL_FRAGMENT

@pytest.fixture
def shell_page():
    return SHELL_PAGE
