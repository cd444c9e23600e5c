import pytest

from search.contracts import SearchCategory, SearchResult, SearchResultSet


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, SearchCategory.CODE),
        ("docs", SearchCategory.DOCS),
        (" Debug ", SearchCategory.DEBUG),
        ("learn", SearchCategory.LEARN),
        ("unknown", SearchCategory.CODE),
        (42, SearchCategory.CODE),
        (SearchCategory.LEARN, SearchCategory.LEARN),
    ],
)
def test_category_parse(raw, expected):
    assert SearchCategory.parse(raw) == expected


def test_category_is_known():
    assert SearchCategory.is_known("docs")
    assert not SearchCategory.is_known("recipes")
    assert not SearchCategory.is_known(None)


def test_from_payload_non_mapping_is_absent():
    assert SearchResultSet.from_payload(None) is None
    assert SearchResultSet.from_payload("oops") is None


def test_from_payload_tolerates_missing_and_malformed_results():
    assert SearchResultSet.from_payload({}) == SearchResultSet(answer=None, results=[])
    result_set = SearchResultSet.from_payload({"answer": "A", "results": "nope"})
    assert result_set.answer == "A"
    assert result_set.results == []


def test_from_payload_skips_non_mapping_entries():
    result_set = SearchResultSet.from_payload({"results": [None, "x", {"url": "https://a.dev"}]})
    assert [r.url for r in result_set.results] == ["https://a.dev"]


def test_result_reads_snake_and_camel_raw_content():
    assert SearchResult.from_payload({"url": "u", "raw_content": "body"}).raw_content == "body"
    assert SearchResult.from_payload({"url": "u", "rawContent": "body"}).raw_content == "body"
    assert SearchResult.from_payload({"url": "u", "raw_content": 3}).raw_content is None


def test_result_coerces_missing_fields_to_empty_text():
    result = SearchResult.from_payload({"url": "u", "title": None})
    assert result.title == ""
    assert result.content == ""


def test_non_string_answer_is_dropped():
    assert SearchResultSet.from_payload({"answer": 5, "results": []}).answer is None


def test_is_empty():
    assert SearchResultSet().is_empty
    assert not SearchResultSet(answer="A").is_empty
    assert not SearchResultSet(results=[SearchResult(url="u")]).is_empty
