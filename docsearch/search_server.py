"""In-memory TF-IDF search over short text documents."""

from __future__ import annotations

import enum
import functools
import math
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Union

from docsearch.concurrent_map import ConcurrentMap
from docsearch.document import Document, DocumentStatus
from docsearch.string_processing import make_unique_non_empty_strings, split_into_words

MAX_DIFFERENCE = 1e-6
MAX_RESULT_DOCUMENT_COUNT = 5

_CONCURRENT_MAP_BUCKETS = 100

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]
MatchResult = tuple[list[str], DocumentStatus]


class ExecutionPolicy(enum.Enum):
    """How a query is evaluated: in the calling thread or across worker threads."""

    SEQ = "seq"
    PAR = "par"


@dataclass(frozen=True)
class _DocumentData:
    rating: int
    status: DocumentStatus


@dataclass(frozen=True)
class _QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass
class _Query:
    plus_words: list[str] = field(default_factory=list)
    minus_words: list[str] = field(default_factory=list)


def _is_valid_word(word: str) -> bool:
    return not any(ord(c) < 32 for c in word)


def _average_rating(ratings: Iterable[int]) -> int:
    values = list(ratings)
    if not values:
        return 0
    total = sum(values)
    count = len(values)
    # Integer division truncating toward zero.
    return total // count if total >= 0 else -(-total // count)


def _compare_documents(lhs: Document, rhs: Document) -> int:
    if abs(lhs.relevance - rhs.relevance) < MAX_DIFFERENCE:
        return (rhs.rating > lhs.rating) - (rhs.rating < lhs.rating)
    return (rhs.relevance > lhs.relevance) - (rhs.relevance < lhs.relevance)


def _dedup_sorted(words: list[str]) -> list[str]:
    return sorted(set(words))


class SearchServer:
    """Indexes documents and ranks them against plus/minus word queries."""

    def __init__(self, stop_words: str | Iterable[str] = "") -> None:
        if isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)
        self._stop_words = make_unique_non_empty_strings(stop_words)
        if not all(_is_valid_word(word) for word in self._stop_words):
            raise ValueError("Some of stop words are invalid")
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}
        self._word_frequencies: dict[int, dict[str, float]] = {}
        self._documents: dict[int, _DocumentData] = {}

    # ----------------------------------------------------------------- indexing

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Iterable[int],
    ) -> None:
        """Index ``document`` under ``document_id``."""
        if document_id < 0 or document_id in self._documents:
            raise ValueError("Invalid document_id")
        words = self._split_into_words_no_stop(document)
        frequencies: dict[str, float] = {}
        if words:
            inv_word_count = 1.0 / len(words)
            for word in words:
                postings = self._word_to_document_freqs.setdefault(word, {})
                postings[document_id] = postings.get(document_id, 0.0) + inv_word_count
                frequencies[word] = frequencies.get(word, 0.0) + inv_word_count
        self._word_frequencies[document_id] = frequencies
        self._documents[document_id] = _DocumentData(_average_rating(ratings), status)

    def remove_document(
        self, document_id: int, *, policy: ExecutionPolicy | None = None
    ) -> None:
        """Drop ``document_id`` from the index; unknown ids are ignored."""
        if document_id not in self._documents:
            return
        words = list(self._word_frequencies[document_id])
        if policy is ExecutionPolicy.PAR:
            detached = [self._word_to_document_freqs[word] for word in words]
            with ThreadPoolExecutor() as pool:
                list(pool.map(lambda postings: postings.pop(document_id, None), detached))
        else:
            for word in words:
                self._word_to_document_freqs[word].pop(document_id, None)
        for word in words:
            if not self._word_to_document_freqs[word]:
                del self._word_to_document_freqs[word]
        del self._documents[document_id]
        del self._word_frequencies[document_id]

    # ---------------------------------------------------------------- inspection

    def get_document_count(self) -> int:
        """Number of indexed documents."""
        return len(self._documents)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._documents))

    def get_word_frequencies(self, document_id: int) -> dict[str, float]:
        """Term frequencies of a document ordered by word; empty if it is unknown."""
        return dict(sorted(self._word_frequencies.get(document_id, {}).items()))

    # ------------------------------------------------------------------ querying

    def find_top_documents(
        self,
        raw_query: str,
        key: Union[DocumentStatus, DocumentPredicate, None] = None,
        *,
        policy: ExecutionPolicy | None = None,
    ) -> list[Document]:
        """Best matches for ``raw_query`` filtered by status or predicate ``key``."""
        predicate = self._make_predicate(key)
        query = self._parse_query(raw_query)
        if policy is ExecutionPolicy.PAR:
            matched = self._find_all_documents_parallel(query, predicate)
        else:
            matched = self._find_all_documents(query, predicate)
        matched.sort(key=functools.cmp_to_key(_compare_documents))
        return matched[:MAX_RESULT_DOCUMENT_COUNT]

    def match_document(
        self,
        raw_query: str,
        document_id: int,
        *,
        policy: ExecutionPolicy | None = None,
    ) -> MatchResult:
        """Plus words of the query found in the document, with its status.

        The word list is empty when any minus word occurs in the document.
        """
        if document_id not in self._documents:
            raise KeyError("Nonexistent document id")
        if not _is_valid_word(raw_query):
            raise ValueError("Invalid raw query")
        status = self._documents[document_id].status
        query = self._parse_query(raw_query, dedup=policy is not ExecutionPolicy.PAR)

        def occurs(word: str) -> bool:
            return document_id in self._word_to_document_freqs.get(word, {})

        if any(occurs(word) for word in query.minus_words):
            return [], status
        matched = [word for word in query.plus_words if occurs(word)]
        if policy is ExecutionPolicy.PAR:
            matched = _dedup_sorted(matched)
        return matched, status

    # ------------------------------------------------------------------- helpers

    @staticmethod
    def _make_predicate(
        key: Union[DocumentStatus, DocumentPredicate, None],
    ) -> DocumentPredicate:
        if key is None:
            key = DocumentStatus.ACTUAL
        if isinstance(key, DocumentStatus):
            wanted = key
            return lambda _id, status, _rating: status == wanted
        if callable(key):
            return key
        raise TypeError("key must be a DocumentStatus or a predicate")

    def _is_stop_word(self, word: str) -> bool:
        return word in self._stop_words

    def _split_into_words_no_stop(self, text: str) -> list[str]:
        words = []
        for word in split_into_words(text):
            if not _is_valid_word(word):
                raise ValueError(f"Word {word} is invalid")
            if not self._is_stop_word(word):
                words.append(word)
        return words

    def _parse_query_word(self, text: str) -> _QueryWord:
        if not text:
            raise ValueError("Query word is empty")
        word = text
        is_minus = word.startswith("-")
        if is_minus:
            word = word[1:]
        if not word or word.startswith("-") or not _is_valid_word(word):
            raise ValueError(f"Query word {text} is invalid")
        return _QueryWord(word, is_minus, self._is_stop_word(word))

    def _parse_query(self, text: str, dedup: bool = True) -> _Query:
        query = _Query()
        for raw_word in split_into_words(text):
            word = self._parse_query_word(raw_word)
            if word.is_stop:
                continue
            target = query.minus_words if word.is_minus else query.plus_words
            target.append(word.data)
        if dedup:
            query.minus_words = _dedup_sorted(query.minus_words)
            query.plus_words = _dedup_sorted(query.plus_words)
        return query

    def _inverse_document_freq(self, word: str) -> float:
        return math.log(
            self.get_document_count() / len(self._word_to_document_freqs[word])
        )

    def _relevance_terms(
        self, word: str, predicate: DocumentPredicate
    ) -> Iterator[tuple[int, float]]:
        postings = self._word_to_document_freqs.get(word)
        if not postings:
            return
        idf = self._inverse_document_freq(word)
        for document_id, term_freq in postings.items():
            data = self._documents[document_id]
            if predicate(document_id, data.status, data.rating):
                yield document_id, term_freq * idf

    def _to_documents(self, relevance: dict[int, float]) -> list[Document]:
        return [
            Document(document_id, value, self._documents[document_id].rating)
            for document_id, value in sorted(relevance.items())
        ]

    def _find_all_documents(
        self, query: _Query, predicate: DocumentPredicate
    ) -> list[Document]:
        relevance: dict[int, float] = {}
        for word in query.plus_words:
            for document_id, value in self._relevance_terms(word, predicate):
                relevance[document_id] = relevance.get(document_id, 0.0) + value
        for word in query.minus_words:
            for document_id in self._word_to_document_freqs.get(word, {}):
                relevance.pop(document_id, None)
        return self._to_documents(relevance)

    def _find_all_documents_parallel(
        self, query: _Query, predicate: DocumentPredicate
    ) -> list[Document]:
        relevance = ConcurrentMap(_CONCURRENT_MAP_BUCKETS)

        def add_word(word: str) -> None:
            for document_id, value in self._relevance_terms(word, predicate):
                relevance.add(document_id, value)

        def erase_word(word: str) -> None:
            for document_id in list(self._word_to_document_freqs.get(word, {})):
                relevance.erase(document_id)

        with ThreadPoolExecutor() as pool:
            list(pool.map(add_word, query.plus_words))
            list(pool.map(erase_word, query.minus_words))
        return self._to_documents(relevance.build_ordinary_map())