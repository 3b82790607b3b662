from unittest.mock import MagicMock

import pytest
import requests

from tastelog.services.naver_search import (
    NaverLocalSearch,
    SearchNotConfiguredError,
    UpstreamSearchError,
    leaf_category,
    strip_tags,
)

NAVER_PAYLOAD = {
    "total": 2,
    "display": 2,
    "items": [
        {
            "title": "<b>성수</b> 칼국수",
            "link": "https://example.com/1",
            "category": "음식점>한식>칼국수,만두",
            "description": "",
            "telephone": "02-123-4567",
            "address": "서울특별시 성동구 성수동1가 1-1",
            "roadAddress": "서울특별시 성동구 왕십리로 1",
            "mapx": "1270445000",
            "mapy": "375446000",
        },
        {
            "title": "카페 <b>온도</b>",
            "category": "",
            "description": "조용한 카페",
            "address": "서울특별시 성동구 성수동2가 2-2",
            "mapx": 1270450000,
            "mapy": 375450000,
        },
    ],
}


def _client(response=None, error=None, client_id="id", client_secret="secret"):
    session = MagicMock()
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return NaverLocalSearch(client_id, client_secret, "https://naver.test/local.json", session=session), session


def _response(ok=True, status_code=200, payload=None, text=""):
    response = MagicMock()
    response.ok = ok
    response.status_code = status_code
    response.json.return_value = payload
    response.text = text
    return response


def test_strip_tags_and_leaf_category():
    assert strip_tags("<b>맛집</b> 이름") == "맛집 이름"
    assert leaf_category("음식점>카페,디저트") == "카페,디저트"
    assert leaf_category("음식점> ") == "기타"
    assert leaf_category(None) == "기타"


def test_search_maps_items():
    client, session = _client(_response(payload=NAVER_PAYLOAD))
    result = client.search("성수 맛집", display=2)

    assert result.total == 2
    assert result.display == 2
    first, second = result.items
    assert first.id == "naver-0"
    assert first.name == "성수 칼국수"
    assert first.category == "칼국수,만두"
    assert first.phone == "02-123-4567"
    assert first.highlight == "네이버 검색 결과"
    assert first.distance_m is None and first.rating is None
    assert second.id == "naver-1"
    assert second.category == "기타"
    assert second.phone == ""
    assert second.mapx == "1270450000"
    assert second.highlight == "조용한 카페"

    _, kwargs = session.get.call_args
    assert kwargs["params"] == {"query": "성수 맛집", "display": 2}
    assert kwargs["headers"]["X-Naver-Client-Id"] == "id"
    assert kwargs["headers"]["X-Naver-Client-Secret"] == "secret"


@pytest.mark.parametrize(
    "client_id, client_secret",
    [(None, "secret"), ("id", None), ("", ""), ("발급받은_클라이언트_ID", "secret")],
)
def test_missing_credentials_fail_before_calling(client_id, client_secret):
    client, session = _client(_response(payload=NAVER_PAYLOAD), client_id=client_id, client_secret=client_secret)
    with pytest.raises(SearchNotConfiguredError):
        client.search("성수")
    session.get.assert_not_called()


def test_upstream_error_keeps_status_and_body():
    client, _ = _client(_response(ok=False, status_code=401, text='{"errorCode":"024"}'))
    with pytest.raises(UpstreamSearchError) as excinfo:
        client.search("성수")
    assert excinfo.value.status == 401
    assert excinfo.value.detail == '{"errorCode":"024"}'


def test_network_error_becomes_upstream_error():
    client, _ = _client(error=requests.ConnectionError("connection refused"))
    with pytest.raises(UpstreamSearchError) as excinfo:
        client.search("성수")
    assert excinfo.value.status is None
    assert "connection refused" in excinfo.value.detail
