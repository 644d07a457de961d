"""Demonstration of searching a small set of documents."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from docsearch.document import Document, DocumentStatus
from docsearch.search_server import ExecutionPolicy, SearchServer

_TEXTS = (
    "white cat and yellow hat",
    "curly cat curly tail",
    "nasty dog with big eyes",
    "nasty pigeon john",
)


def print_document(document: Document, out: TextIO | None = None) -> None:
    """Write one document on its own line."""
    print(document, file=out if out is not None else sys.stdout)


def main(argv: Sequence[str] | None = None) -> int:
    """Index sample documents and print several searches over them."""
    server = SearchServer("and with")
    for doc_id, text in enumerate(_TEXTS, start=1):
        server.add_document(doc_id, text, DocumentStatus.ACTUAL, [1, 2])

    query = "curly nasty cat"
    print("ACTUAL by default:")
    for document in server.find_top_documents(query):
        print_document(document)

    print("BANNED:")
    for document in server.find_top_documents(
        query, DocumentStatus.BANNED, policy=ExecutionPolicy.SEQ
    ):
        print_document(document)

    print("Even ids:")
    for document in server.find_top_documents(
        query,
        lambda document_id, status, rating: document_id % 2 == 0,
        policy=ExecutionPolicy.PAR,
    ):
        print_document(document)
    return 0


if __name__ == "__main__":
    sys.exit(main())