# docsearch

docsearch is a small in-memory search server for short text documents. It ranks
documents by TF-IDF relevance. When two relevances differ by less than `1e-6`,
the document with the higher average rating comes first.

## Features

- `docsearch.search_server.SearchServer`:
  - Stop words are set when the server is created, either as one
    space-separated string or as an iterable of words. They are ignored in
    documents and in queries.
  - Documents are split on single spaces.
  - A query word written as `-word` is a minus word. A document that contains
    any minus word is left out of the results.
  - `find_top_documents` filters results by a `DocumentStatus` (default
    `ACTUAL`) or by a predicate `(document_id, status, rating) -> bool`. It
    returns at most five `Document` records.
  - `match_document` returns the query's plus words that occur in a document,
    together with the document's status. The list is empty when a minus word
    occurs in the document.
  - `remove_document` takes a document out of the index. Unknown ids are
    ignored.
  - `get_word_frequencies` returns the term frequencies of a document.
  - `get_document_count` returns the number of documents. Iterating over the
    server yields the document ids in ascending order.
  - Searching, matching and removal accept `policy=ExecutionPolicy.SEQ` or
    `ExecutionPolicy.PAR`. With `PAR` the work is spread over worker threads.
- `docsearch.document`: `Document` (id, relevance, rating) and the
  `DocumentStatus` enum (`ACTUAL`, `IRRELEVANT`, `BANNED`, `REMOVED`).
- `docsearch.request_queue.RequestQueue` runs queries against a server.
  `no_result_requests()` returns how many of the last 1440 requests found
  nothing.
- `docsearch.remove_duplicates.remove_duplicates` removes every document whose
  set of words equals the set of a document with a smaller id. It prints
  `Found duplicate document id N` for each removed document.
- `docsearch.process_queries`: `process_queries` runs many queries concurrently
  and returns one result list per query. `process_queries_joined` returns all
  results as one list.
- `docsearch.paginator`: `paginate(items, page_size)` returns a `Paginator`,
  which you can iterate as lists of at most `page_size` items.
- `docsearch.concurrent_map.ConcurrentMap` is a lock-per-bucket map that sums
  values under integer keys.
- `docsearch.log_duration.LogDuration` is a context manager. When its block
  ends it writes `"<id>: <ms> ms"` to a stream, standard error by default.
- `docsearch.read_input`: `read_line` and `read_line_with_number` read from a
  text stream, standard input by default.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from docsearch.document import DocumentStatus
from docsearch.search_server import SearchServer, ExecutionPolicy

server = SearchServer("and with")
server.add_document(1, "white cat and yellow hat", DocumentStatus.ACTUAL, [1, 2])
server.add_document(2, "curly cat curly tail", DocumentStatus.ACTUAL, [1, 2])
server.add_document(3, "nasty dog with big eyes", DocumentStatus.ACTUAL, [1, 2])

for document in server.find_top_documents("curly nasty cat"):
    print(document)  # { document_id = 2, relevance = ..., rating = 1 }

# Only even ids, searched in parallel
even = server.find_top_documents(
    "curly nasty cat",
    lambda document_id, status, rating: document_id % 2 == 0,
    policy=ExecutionPolicy.PAR,
)

words, status = server.match_document("curly -dog", 2)
```

## Errors

The following raise `ValueError`:

- stop words that contain control characters;
- an invalid document id, either negative or already in use;
- a document word that contains control characters;
- a malformed query word, such as `-`, `--word` or an empty word (for example
  from two adjacent spaces);
- a query passed to `match_document` that contains control characters.

`match_document` raises `KeyError` when the document id does not exist.

## Limitations

The index lives in memory only. docsearch has no storage, no network server and
no interactive command. Documents must be added through the Python API.

## Demo

To index a few sample documents and print the results for sequential,
status-filtered and parallel searches, run:

```
docsearch-demo
```