# toybox

A handful of small, self-contained programs bundled into one package. The
largest is a tiny key-value database: every write goes to an append-only log
file, and the log is replayed into memory when the database is opened. A small
HTTP front end serves it.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The key-value store

```python
from toybox.database import Database

db = Database("data.db")
db.put("greeting", "hello")
db.put("greeting", "hi")        # later writes win
print(db.get("greeting"))       # "hi"
print(db.get("missing"))        # None

# Reopening the file replays the log
print(Database("data.db").get("greeting"))  # "hi"
```

Each record in the file is a length-prefixed key followed by a length-prefixed
value; every length is an 8-byte big-endian unsigned integer and the text is
UTF-8. You can work at that level through `toybox.storage.Storage`:

- `append(key, value)` adds a record to the end of the file.
- `open_reader()` creates the file if needed and opens it for reading.
- `read_record(file)` returns the next `(key, value)` pair, or `None` when no
  complete record follows.
- `records()` yields every complete record, oldest first.

Nothing is ever compacted or deleted: the file grows with every `put`.

### Serving it over HTTP

```
toybox-kvserver
```

This opens `test.db` in the current directory and listens on `0.0.0.0:3000`:

- `POST /set/<key>` with the value as the request body stores it and answers `200`.
- `GET /get/<key>` answers `200` with the value as plain text, or `404` if the
  key is unknown.

Keys are URL-decoded. Any other path answers `404`; using `GET` on a `/set/`
path or `POST` on a `/get/` path answers `405`.

```
curl -X POST --data 'hello' http://localhost:3000/set/greeting
curl http://localhost:3000/get/greeting
```

`toybox.kvserver.make_server(database, host, port)` builds the same threaded
server for use in your own code; call `serve_forever()` on it.

## HTTP request parsing and a bare server

`toybox.http_request.parse_request(buf)` turns the raw bytes of a request
line into a `Request` with `method` (a `Method` enum member), `path` and
`query_string` (the text after `?`, or `None`). It raises `ParseError` when
the bytes are not valid UTF-8, the request line is incomplete, the protocol
is not `HTTP/1.1`, or the method is unknown. Headers and body are not parsed:
`Request.headers` is always empty and `Request.body` always `""`.

```
toybox-server
```

listens on `127.0.0.1:8080`, reads up to 1024 bytes from each connection,
prints what it received along with any parsing error, and closes the
connection. It sends no response; it is a request logger, not a web server.
`Server(addr).handle_connection(conn)` does the same for one socket and
returns the parsed `Request`, or `None`.

## Other programs

| Command                  | What it does                                                        |
|--------------------------|---------------------------------------------------------------------|
| `toybox-bank`            | Moves money between two accounts and prints a bank summary          |
| `toybox-cards`           | Builds a nine-card deck, shuffles it and deals a hand of three      |
| `toybox-mars`            | Asks for your weight in kg and prints what it would be on Mars      |
| `toybox-leetcode`        | Prints a greeting, or runs one of the exercises (see below)         |
| `toybox-logs [FILE]`     | Prints every line of `FILE`, by default `logs.txt`                  |

`toybox-leetcode` takes one of these subcommands:

```
toybox-leetcode palindrome 121      # true
toybox-leetcode pascal 5            # five rows of Pascal's triangle
toybox-leetcode dedupe 1 1 2        # count of unique values, then the values
```

The same exercises are available as functions in `toybox.leetcode`:
`is_palindrome(x)`, `generate(num_rows)` (always at least one row) and
`remove_duplicates(nums)`, which compacts a sorted list in place and returns
the number of unique values.

In `toybox.bank`, `Account.deposit` and `Account.withdraw` raise
`InsufficientFundsError` or `InvalidAmountError` instead of moving money
that is not there. `toybox.cards.Deck.deal` raises `ValueError` when asked
for more cards than the deck holds.