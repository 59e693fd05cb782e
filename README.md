# bucketlist

A small web application that keeps a holiday bucket list in a local SQLite
database. It shows every place on its own map, together with whether you have
already been there.

## Installing

```
pip install .
```

The package needs only the Python standard library.

## Running

```
bucketlist
```

This opens (or creates) `bucketlist.db` in the current directory. It creates
the `Buckets` table if the table is missing, adds two demo places (Kyoto and
Osaka train-station), and serves the list at <http://localhost:8080> with the
standard library's WSGI server. Stop it with Ctrl-C.

The demo places are inserted every time the server starts, so repeated runs
against the same database file add them again.

Options:

- `-d`: turn on debug log messages.
- `--db PATH`: use a different database file (default `./bucketlist.db`).
- `--port PORT`: listen on another port (default `8080`).

```
bucketlist -d --db trips.db --port 9000
```

Logs go to standard output as JSON lines, with the fields `time`, `level` and
`msg`.

You can also start the server with `python -m bucketlist.server`.

### Pages

- `/` shows a table with one row per place. Each row holds the name, a map
  with a marker, and a disabled checkbox that shows whether the place was
  visited. Below the table the page shows your IP address and User-Agent.
- `/admin` shows the same table with empty name and map cells and a
  "Click me!" button in each row.
- Any other path returns `400 Bad Request` with an empty body.

If the database cannot be read, `/` and `/admin` return an empty response and
the error is logged.

The maps are drawn in the browser with the Leaflet library and OpenStreetMap
tiles, which are loaded from the network.

## Using it as a library

`bucketlist.server.BucketApp` is a plain WSGI callable, so you can mount it in
any WSGI server:

```python
from bucketlist import database
from bucketlist.server import BucketApp

conn = database.open_database("bucketlist.db")
database.initialize(conn)
app = BucketApp(conn)
```

`BucketApp.handle(path, remote_ip, user_agent)` returns a `Response` that
holds `status`, `content_type` and `body`, without going through WSGI.
`BucketApp.get_locations()` returns the stored places.

The building blocks can also be used on their own:

- `bucketlist.database` has `open_database`, `close_database`, `initialize`,
  `get_locations` and `insert_demo_data`. `get_locations` returns frozen
  `Bucket` records with the fields `number`, `placename`, `latitude`,
  `longitude` and `visited`. `Bucket.to_dict()` gives the JSON keys `id`,
  `Placename`, `Lat`, `Long` and `Visited`.
- `bucketlist.basepage` has the abstract `Page`, the default `BasePage`,
  `page_template(page)`, which returns the full HTML document, and
  `write_page_template(stream, page)`, which writes it to a text stream.
- `bucketlist.mainpage` has `MainPage`, a dataclass with the fields `data`,
  `username`, `remote_ip` and `user_agent`, and the helpers `emit_rows`,
  `draw_map` and `draw_button`.

## What it does not do

There is no way to add, edit, delete or mark places as visited through the
web pages. The admin view's button has no action behind it, and `/admin` has
no login. To change the list, write to the `Buckets` table of the SQLite file
directly.

## Tests

```
pip install .[test]
pytest
```