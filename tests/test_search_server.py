import pytest

from docsearch.inverted_index import InvertedIndex
from docsearch.search_server import RelativeIndex, SearchServer


def _server(docs, limit=5):
    idx = InvertedIndex()
    idx.update_document_base(docs)
    return SearchServer(idx, limit)


def _repeat(**counts):
    """Join each word repeated the given number of times, in keyword order."""
    return " ".join(word for word, n in counts.items() for _ in range(n))


MILK_DOCS = [
    _repeat(milk=4, water=3),
    _repeat(milk=1, water=2),
    _repeat(milk=5, water=5),
    "americano cappuccino",
]

_CITY_COUNTRY = [
    ("london", "great britain"), ("paris", "france"), ("berlin", "germany"),
    ("rome", "italy"), ("madrid", "spain"), ("lisboa", "portugal"),
    ("bern", "switzerland"), ("moscow", "russia"), ("kiev", "ukraine"),
    ("minsk", "belarus"), ("astana", "kazakhstan"), ("beijing", "china"),
    ("tokyo", "japan"), ("bangkok", "thailand"), ("amsterdam", "netherlands"),
    ("helsinki", "finland"), ("oslo", "norway"), ("stockholm", "sweden"),
    ("riga", "latvia"), ("tallinn", "estonia"), ("warsaw", "poland"),
]


def _capitals():
    docs = [f"{city} is the capital of {country}" for city, country in _CITY_COUNTRY]
    welcome = " ".join(["welcome", "to", "moscow", "the", "capital", "of", "russia"])
    docs.insert(14, welcome + " the third rome")
    return docs


CAPITALS = _capitals()
MOSCOW_QUERY = " ".join(["moscow", "is", "the", "capital", "of", "russia"])


def test_capitals_fixture_positions():
    server = _server(CAPITALS, limit=30)
    (welcome,) = server.search(["welcome"])
    assert welcome == [RelativeIndex(14, 1.0)]
    (moscow,) = server.search(["moscow"])
    assert sorted(r.doc_id for r in moscow) == [7, 14]
    (capital,) = server.search(["capital"])
    assert len(capital) == 22


def test_simple():
    result = _server(MILK_DOCS).search(["milk water", "sugar"])
    assert len(result) == 2
    assert [r.doc_id for r in result[0]] == [2, 0, 1]
    assert [r.rank for r in result[0]] == pytest.approx([1, 0.7, 0.3])
    assert result[1] == []


def test_top5():
    (result,) = _server(CAPITALS).search([MOSCOW_QUERY])
    assert [r.doc_id for r in result] == [7, 14, 0, 1, 2]
    assert [r.rank for r in result] == pytest.approx(
        [1, 1, 0.666666687, 0.666666687, 0.666666687], rel=1e-6
    )


def test_limit_truncates():
    (result,) = _server(CAPITALS, limit=2).search([MOSCOW_QUERY])
    assert [r.doc_id for r in result] == [7, 14]


@pytest.mark.parametrize("limit", [0, -3])
def test_non_positive_limit_gives_nothing(limit):
    assert _server(MILK_DOCS, limit=limit).search(["milk"]) == [[]]


def test_repeated_query_words_count_once():
    server = _server(MILK_DOCS)
    assert server.search(["milk milk water"]) == server.search(["milk water"])


def test_best_match_has_rank_one_and_ranks_descend():
    (result,) = _server(MILK_DOCS).search(["water cappuccino"])
    assert result[0].rank == 1.0
    ranks = [r.rank for r in result]
    assert ranks == sorted(ranks, reverse=True)


def test_single_match():
    assert _server(MILK_DOCS).search(["americano"]) == [[RelativeIndex(3, 1.0)]]


def test_empty_query():
    assert _server(MILK_DOCS).search(["   ", ""]) == [[], []]