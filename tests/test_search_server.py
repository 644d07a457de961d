import math

import pytest

from docsearch.document import DocumentStatus
from docsearch.search_server import (
    MAX_RESULT_DOCUMENT_COUNT,
    ExecutionPolicy,
    SearchServer,
)

TEXTS = [
    "white cat and yellow hat",
    "curly cat curly tail",
    "nasty dog with big eyes",
    "nasty pigeon john",
]


@pytest.fixture
def server():
    srv = SearchServer("and with")
    for doc_id, text in enumerate(TEXTS, start=1):
        srv.add_document(doc_id, text, DocumentStatus.ACTUAL, [1, 2])
    return srv


def ids(documents):
    return [d.id for d in documents]


def test_demo_query_ranking(server):
    found = server.find_top_documents("curly nasty cat")
    assert ids(found)[:2] == [2, 4]
    assert set(ids(found)[2:]) == {1, 3}
    relevances = [d.relevance for d in found]
    assert relevances == sorted(relevances, reverse=True)


def test_banned_status_finds_nothing(server):
    assert server.find_top_documents(
        "curly nasty cat", DocumentStatus.BANNED, policy=ExecutionPolicy.SEQ
    ) == []


def test_predicate_even_ids_parallel(server):
    found = server.find_top_documents(
        "curly nasty cat",
        lambda doc_id, status, rating: doc_id % 2 == 0,
        policy=ExecutionPolicy.PAR,
    )
    assert ids(found) == [2, 4]


def test_parallel_matches_sequential(server):
    seq = server.find_top_documents("curly nasty cat -tail")
    par = server.find_top_documents("curly nasty cat -tail", policy=ExecutionPolicy.PAR)
    assert ids(seq) == ids(par)
    for a, b in zip(seq, par):
        assert a.rating == b.rating
        assert math.isclose(a.relevance, b.relevance)


def test_minus_word_excludes_document(server):
    found = server.find_top_documents("cat -curly")
    assert ids(found) == [1]


def test_stop_words_are_not_searchable(server):
    assert server.find_top_documents("and with") == []


def test_stop_words_from_iterable():
    srv = SearchServer(["in", "the", ""])
    srv.add_document(0, "cat in the city", DocumentStatus.ACTUAL, [1])
    assert srv.find_top_documents("in") == []
    assert ids(srv.find_top_documents("city")) == [0]


def test_invalid_stop_word_raises():
    with pytest.raises(ValueError):
        SearchServer(["good", "ba\x12d"])


def test_result_count_is_limited():
    srv = SearchServer("")
    for doc_id in range(10):
        srv.add_document(doc_id, "cat", DocumentStatus.ACTUAL, [doc_id])
    found = srv.find_top_documents("cat")
    assert len(found) == MAX_RESULT_DOCUMENT_COUNT


def test_equal_relevance_sorted_by_rating():
    srv = SearchServer("")
    srv.add_document(1, "cat", DocumentStatus.ACTUAL, [1])
    srv.add_document(2, "cat", DocumentStatus.ACTUAL, [9])
    srv.add_document(3, "dog", DocumentStatus.ACTUAL, [5])
    found = srv.find_top_documents("cat")
    assert ids(found) == [2, 1]


def test_rating_is_truncated_average():
    srv = SearchServer("")
    srv.add_document(1, "cat", DocumentStatus.ACTUAL, [-1, -2])
    srv.add_document(2, "cat", DocumentStatus.ACTUAL, [])
    ratings = {d.id: d.rating for d in srv.find_top_documents("cat")}
    assert ratings == {1: -1, 2: 0}


@pytest.mark.parametrize("doc_id", [-1, 1])
def test_bad_document_id_raises(server, doc_id):
    with pytest.raises(ValueError):
        server.add_document(doc_id, "some text", DocumentStatus.ACTUAL, [1])


def test_invalid_document_word_raises(server):
    with pytest.raises(ValueError):
        server.add_document(10, "bad\x01word", DocumentStatus.ACTUAL, [1])
    assert server.get_document_count() == 4


@pytest.mark.parametrize("query", ["--cat", "-", "cat\x02", "cat  dog"])
def test_invalid_queries_raise(server, query):
    with pytest.raises(ValueError):
        server.find_top_documents(query)


def test_match_document(server):
    words, status = server.match_document("curly cat dog", 2)
    assert words == ["cat", "curly"]
    assert status is DocumentStatus.ACTUAL


def test_match_document_minus_word(server):
    assert server.match_document("cat -tail", 2) == ([], DocumentStatus.ACTUAL)


@pytest.mark.parametrize("policy", [None, ExecutionPolicy.SEQ, ExecutionPolicy.PAR])
def test_match_document_policies_agree(server, policy):
    words, _ = server.match_document("tail cat curly cat unknown", 2, policy=policy)
    assert words == ["cat", "curly", "tail"]


def test_match_document_errors(server):
    with pytest.raises(KeyError):
        server.match_document("cat", 42)
    with pytest.raises(ValueError):
        server.match_document("cat\x03", 1)


def test_iteration_and_count(server):
    assert list(server) == [1, 2, 3, 4]
    assert server.get_document_count() == 4


def test_word_frequencies(server):
    freqs = server.get_word_frequencies(2)
    assert list(freqs) == sorted(freqs)
    assert math.isclose(sum(freqs.values()), 1.0)
    assert set(freqs) == {"curly", "cat", "tail"}
    assert server.get_word_frequencies(99) == {}


@pytest.mark.parametrize("policy", [None, ExecutionPolicy.SEQ, ExecutionPolicy.PAR])
def test_remove_document(server, policy):
    server.remove_document(2, policy=policy)
    assert list(server) == [1, 3, 4]
    assert server.get_document_count() == 3
    assert server.get_word_frequencies(2) == {}
    assert server.find_top_documents("curly") == []
    assert 2 not in ids(server.find_top_documents("cat"))


def test_remove_unknown_document_is_ignored(server):
    server.remove_document(77)
    assert list(server) == [1, 2, 3, 4]


def test_removed_id_can_be_reused(server):
    server.remove_document(4)
    server.add_document(4, "pigeon", DocumentStatus.IRRELEVANT, [3])
    assert ids(server.find_top_documents("pigeon", DocumentStatus.IRRELEVANT)) == [4]
    assert server.find_top_documents("pigeon") == []