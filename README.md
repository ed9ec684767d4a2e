# citatnik

citatnik is a small HTTP service that keeps quotes in memory. Its JSON API
lets you add quotes, list them all, filter them by author, fetch a random one
and delete one by its id.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Running

Set the port to listen on, then start the server:

```
HTTP_PORT=8080 citatnik
```

The server listens on all interfaces. It runs until it receives SIGINT
(Ctrl+C) or SIGTERM, or until the server itself fails, and then shuts down.
If the configuration is missing or malformed, the command logs the problem
and exits with status 1.

### Configuration

Settings come from environment variables. If the working directory holds a
`.env` file, that file is read first, and its values replace any variables
of the same name that are already set. Each line has the form `KEY=value`.
Blank lines and lines that begin with `#` are skipped. Spaces around the key
and the value are removed, and so are quote characters (`"` and `'`) at
either end of the value. A line with no `=` is an error.

| Variable                | Default   | Meaning                                             |
|-------------------------|-----------|-----------------------------------------------------|
| `HTTP_PORT`             | required  | Port to listen on                                   |
| `HTTP_READ_TIMEOUT`     | `30s`     | Socket timeout for a connection (see below)         |
| `HTTP_WRITE_TIMEOUT`    | `30s`     | Socket timeout for a connection (see below)         |
| `HTTP_IDLE_TIMEOUT`     | `60s`     | Parsed and stored, but the server does not use it   |
| `HTTP_MAX_HEADER_BYTES` | `1048576` | Largest request header; larger ones get a 431 reply |
| `HTTP_SHUTDOWN_TIMEOUT` | `5s`      | How long shutdown waits for open requests           |

An empty variable counts as unset.

Each connection's socket timeout is the smaller of the read and write
timeouts that are above zero. If neither is above zero, connections have no
timeout. The configuration is refused if either of these timeouts is
negative.

Durations are written as one or more numbers, each followed by a unit: `ns`,
`us` (or `µs`), `ms`, `s`, `m` or `h`. Examples are `300ms`, `1.5s` and
`1h30m`. The value may begin with a sign, and a bare `0` is allowed.

## API

| Method   | Path                  | Result                                                  |
|----------|-----------------------|---------------------------------------------------------|
| `POST`   | `/quotes`             | Adds a quote and returns it                             |
| `GET`    | `/quotes`             | Lists all quotes                                        |
| `GET`    | `/quotes?author=Name` | Lists the quotes whose author is exactly `Name`         |
| `GET`    | `/quotes/random`      | Returns one quote at random, or 404 if there are none   |
| `DELETE` | `/quotes/{id}`        | Deletes a quote: 204 on success, 404 if the id is unknown |

A request body for `POST` looks like this:

```json
{"author": "Seneca", "quote": "While we wait for life, life passes."}
```

Key names are matched without regard to case. Unknown keys and `null` values
are ignored. A body that is not a JSON object, or a field that is not a
string, gets a 400 reply.

A quote comes back in the same shape, `{"author": "...", "quote": "..."}`.
Responses do not include the quote's id. Ids are assigned in order of
creation, beginning at `1`, and are not reused after a deletion.

An empty `author` parameter behaves as if there were none, so all quotes are
listed.

Errors from the endpoints are returned as JSON in the form
`{"error": "message"}`. A path that matches no route gets a plain-text
`404 page not found`. A known path requested with the wrong method gets an
empty 405 reply.

## Using it as a library

```python
from citatnik.config import Config, HTTPConfig
from citatnik.entity import Quote
from citatnik.httpserver import Server
from citatnik.repository import MemoryQuoteRepo
from citatnik.router import create_app
from citatnik.usecase import QuoteService

service = QuoteService(MemoryQuoteRepo())
stored = service.add(Quote(author="Seneca", text="While we wait for life, life passes."))
print(stored.id)  # "1"

app = create_app(service)  # a WSGI application

server = Server(Config(HTTPConfig(port="0")), app)  # port 0: any free port
server.start()
print(server.address)
server.shutdown()
```

Modules of interest:

- `citatnik.entity`: `Quote`, plus the errors `MissingQuotesError` and
  `QuoteNotFoundError`, both subclasses of `QuoteError`.
- `citatnik.repository`: the abstract `QuoteRepo` and the thread-safe
  `MemoryQuoteRepo`.
- `citatnik.usecase`: `QuoteService`, with the methods `add`, `get_all`,
  `get_by_author`, `get_random` and `delete_by_id`.
- `citatnik.config`: `load_config`, `load_dotenv`, `get_env`,
  `parse_duration` and `parse_int`. Errors are raised as `ConfigError`.
- `citatnik.router`: `create_app` and `QuoteApp`. Also `recovery`, a wrapper
  that turns an unhandled exception into a plain 500 response.
- `citatnik.httpserver`: `Server`. It runs a WSGI application on a
  background thread and has the methods `start`, `wait(timeout)` and
  `shutdown`. Keyword arguments override the configuration: `host`, `port`,
  `read_timeout`, `write_timeout`, `idle_timeout`, `max_header_bytes`,
  `shutdown_timeout` and `handler`.
- `citatnik.counter`: `increment`, which adds one to a decimal integer
  written as a string, at any size.

## Limitations

Quotes are kept only in memory. Nothing is written to disk, so every quote is
lost when the process stops. There is no authentication, and there is no way
to edit a quote once it has been added.