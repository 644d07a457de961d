"""Running many queries against one server concurrently."""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from itertools import chain

from docsearch.document import Document
from docsearch.search_server import SearchServer


def process_queries(
    search_server: SearchServer, queries: Iterable[str]
) -> list[list[Document]]:
    """Top documents for each query, in the order of ``queries``."""
    query_list = list(queries)
    if not query_list:
        return []
    with ThreadPoolExecutor() as pool:
        return list(pool.map(search_server.find_top_documents, query_list))


def process_queries_joined(
    search_server: SearchServer, queries: Iterable[str]
) -> list[Document]:
    """Results of all queries concatenated into one list."""
    return list(chain.from_iterable(process_queries(search_server, queries)))