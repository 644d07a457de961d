"""Removing documents whose word sets repeat an earlier document's."""

from __future__ import annotations

import sys
from typing import TextIO

from docsearch.search_server import SearchServer


def remove_duplicates(search_server: SearchServer, out: TextIO | None = None) -> None:
    """Remove every document with the same set of words as one with a smaller id.

    Each removed id is reported on ``out`` (standard output by default).
    """
    stream = out if out is not None else sys.stdout
    seen: dict[frozenset[str], int] = {}
    duplicates: set[int] = set()
    for document_id in search_server:
        words = frozenset(search_server.get_word_frequencies(document_id))
        if words in seen:
            current = seen[words]
            duplicates.add(max(current, document_id))
            seen[words] = min(current, document_id)
        else:
            seen[words] = document_id

    for document_id in sorted(duplicates):
        print(f"Found duplicate document id {document_id}", file=stream)
        search_server.remove_document(document_id)