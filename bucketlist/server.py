"""HTTP server that shows the bucket list."""

from __future__ import annotations

import argparse
import json
import logging
import sqlite3
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from http import HTTPStatus
from wsgiref.simple_server import make_server

from bucketlist import database
from bucketlist.basepage import page_template
from bucketlist.database import Bucket
from bucketlist.mainpage import MainPage

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

_log = logging.getLogger("bucketlist")


@dataclass(frozen=True)
class Response:
    """Status, content type and body of an answer."""

    status: int
    content_type: str
    body: str


class BucketApp:
    """WSGI application serving the main and admin pages."""

    def __init__(self, conn: sqlite3.Connection, logger: logging.Logger | None = None):
        self.conn = conn
        self.logger = logger or _log

    def get_locations(self) -> list[Bucket]:
        """Return the stored places."""
        self.logger.info("getting locations from database")
        locations = database.get_locations(self.conn)
        self.logger.debug("getLocations finished: %s", [b.to_dict() for b in locations])
        return locations

    def handle(self, path: str, remote_ip: str = "", user_agent: str = "") -> Response:
        """Answer a request for ``path``."""
        if path in ("/", "/admin"):
            try:
                locations = self.get_locations()
            except sqlite3.Error as exc:
                message = "cant get locations" if path == "/" else "cant get locations admin ctx"
                self.logger.error("%s: %s", message, exc)
                return Response(HTTPStatus.OK, TEXT_CONTENT_TYPE, "")
            username = ""
            if path == "/admin":
                username = "admin"
                self.logger.debug("admin page entered")
            page = MainPage(
                data=locations,
                username=username,
                remote_ip=remote_ip,
                user_agent=user_agent,
            )
            return Response(HTTPStatus.OK, HTML_CONTENT_TYPE, page_template(page))
        return Response(HTTPStatus.BAD_REQUEST, HTML_CONTENT_TYPE, "")

    def __call__(self, environ: dict, start_response: Callable) -> Iterable[bytes]:
        response = self.handle(
            environ.get("PATH_INFO", "/") or "/",
            environ.get("REMOTE_ADDR", ""),
            environ.get("HTTP_USER_AGENT", ""),
        )
        status = HTTPStatus(response.status)
        payload = response.body.encode("utf-8")
        start_response(
            f"{status.value} {status.phrase}",
            [
                ("Content-Type", response.content_type),
                ("Content-Length", str(len(payload))),
            ],
        )
        return [payload]


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _configure_logging(debug: bool) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_JsonFormatter())
    _log.handlers[:] = [handler]
    _log.setLevel(logging.DEBUG if debug else logging.INFO)
    _log.propagate = False


def main(argv: list[str] | None = None) -> int:
    """Open the database, add the sample places and serve the pages."""
    parser = argparse.ArgumentParser(description="Serve the holiday bucket list.")
    parser.add_argument("-d", action="store_true", help="enable debug log messages")
    parser.add_argument("--db", default=database.DEFAULT_PATH, help="database file")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    args = parser.parse_args(argv)

    _configure_logging(args.d)
    _log.debug("debug enabled")

    try:
        conn = database.open_database(args.db)
    except sqlite3.Error as exc:
        _log.error("unexpected error when opening the database: %s", exc)
        return 1
    try:
        try:
            database.initialize(conn)
        except sqlite3.Error as exc:
            _log.error("failed to initialize database: %s", exc)
        try:
            database.insert_demo_data(conn)
        except sqlite3.Error as exc:
            _log.error("failed to initialize temp data: %s", exc)

        app = BucketApp(conn, _log)
        _log.info("starting the server at http://localhost:%d ...", args.port)
        try:
            with make_server("", args.port, app) as server:
                server.serve_forever()
        except OSError as exc:
            _log.error("unexpected error in server: %s", exc)
            return 1
        except KeyboardInterrupt:
            pass
    finally:
        database.close_database(conn)
    return 0


if __name__ == "__main__":
    sys.exit(main())