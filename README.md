# docsearch

docsearch is a small full-text search engine for plain-text documents.
It builds an inverted index over a set of files and answers a list of
search requests. It ranks the documents by relative relevance and writes
the results to a JSON answers file.

## Installation

```
pip install .
```

To include the test dependencies, install with `pip install .[test]`.

## Input files

`config.json` names the engine, sets the maximum number of answers per
request, and lists the documents to index:

```json
{
    "config": {
        "name": "DocSearch",
        "max_responses": 5
    },
    "files": [
        "resources/file001.txt",
        "resources/file002.txt"
    ]
}
```

- `config.name` must be a string.
- `config.max_responses` must be an integer.
- `files` must be a list of paths. Relative paths are resolved against
  the current working directory.

Only the first line of each listed file is indexed. Words are separated by
whitespace. The search is case-sensitive and does no stemming.

`requests.json` holds the search requests:

```json
{
    "requests": [
        "milk water",
        "sugar"
    ]
}
```

## Running

From the directory that holds the input files, run:

```
docsearch
```

The command does the following:

1. Prints `Starting <name>`.
2. Indexes the documents.
3. Runs every request.
4. Writes the answers.

The file locations can be changed with these options:

```
docsearch --config path/to/config.json --requests path/to/requests.json --answers path/to/answers.json
```

Each option defaults to `config.json`, `requests.json` and `answers.json`
in the current directory.

The command exits with status 1 and prints `Exception: <message>` to
standard error when any of these happen:

- A file cannot be read.
- A file is not valid JSON.
- A required setting is missing or has the wrong type.

On success it exits with status 0.

## How ranking works

For each request, the distinct words of the request are looked up in the
index. Each document's absolute relevance is the sum of the occurrence
counts of those words in it. A document's rank is its absolute relevance
divided by the highest absolute relevance among the matching documents, so
the best match has rank `1.0`.

Results are ordered by decreasing rank. Documents with equal rank are
ordered by document id. At most `max_responses` results are kept.

## Answers format

The answers file is a JSON object with a single `answers` key. Under that
key, each request is numbered `request001`, `request002`, and so on:

- A request with no matches gets `"result": false`.
- A request with a single match gets `"result": true` plus `docid` and
  `rank` directly.
- A request with several matches gets `"result": true` plus a `relevance`
  list of `{"docid": ..., "rank": ...}` objects.

The file is indented with four spaces and its keys are sorted.

## Using it as a library

```python
from docsearch.inverted_index import InvertedIndex
from docsearch.search_server import SearchServer

index = InvertedIndex()
index.update_document_base([
    "milk milk water",
    "milk water water",
])
server = SearchServer(index, max_responses=5)
for hits in server.search(["milk", "water milk"]):
    print([(hit.doc_id, hit.rank) for hit in hits])
```

`docsearch.inverted_index`:

- `InvertedIndex.update_document_base(docs)` rebuilds the index. A
  document's id is its position in `docs`.
- `InvertedIndex.get_word_count(word)` returns the `Entry` records
  (`doc_id`, `count`) for a word, sorted by document id. It returns an
  empty list for an unknown word.
- `InvertedIndex.format_frequencies()` returns the whole dictionary as
  text, one word per line in sorted order.

`docsearch.search_server`:

- `SearchServer(index, max_responses=5).search(queries)` returns one list
  of `RelativeIndex` records (`doc_id`, `rank`) per query.

`docsearch.converter`:

- `ConverterJSON(config_path, requests_path, answers_path)` reads the input
  files and writes the answers file. It provides `get_name()`,
  `get_responses_limit()`, `get_text_documents()`, `get_requests()` and
  `put_answers(answers)`.
- Problems with the input files raise `ConfigError`.
- `build_answers(answers)` returns the answers document as a dictionary
  without writing it.

## What it does not do

docsearch runs a single indexing and search pass, then exits.

- It does not run as a server.
- It does not keep the index between runs.
- It does not watch the documents for changes.
- It does not read past the first line of a document.