"""Keeps a rolling day of search requests and counts those with no results."""

from __future__ import annotations

from collections import deque
from typing import Union

from docsearch.document import Document, DocumentStatus
from docsearch.search_server import DocumentPredicate, SearchServer

MINUTES_IN_DAY = 1440


class RequestQueue:
    """Runs queries against a server and tracks empty results over the last day."""

    def __init__(self, search_server: SearchServer) -> None:
        self._search_server = search_server
        self._requests: deque[int] = deque()
        self._no_result = 0

    def add_find_request(
        self,
        raw_query: str,
        key: Union[DocumentStatus, DocumentPredicate, None] = None,
    ) -> list[Document]:
        """Run ``raw_query`` filtered by status or predicate ``key`` and record it."""
        result = self._search_server.find_top_documents(raw_query, key)
        if not result:
            self._no_result += 1
        if len(self._requests) >= MINUTES_IN_DAY:
            # A request leaves the one-day window with every new one once it is full.
            self._requests.popleft()
            self._no_result -= 1
        self._requests.append(len(result))
        return result

    def no_result_requests(self) -> int:
        """Number of requests in the window that found nothing."""
        return self._no_result