"""Flask application factory for the store web UI.

The ``create_app`` function creates a shell around a store and
returns a Flask app with three endpoints:

- ``GET /`` — render a small HTML console page.
- ``POST /api/execute`` — execute a command and return JSON.
- ``GET /api/status`` — return size, capacity, and the rendered store.
"""

from __future__ import annotations

from dataclasses import dataclass

from flask import Flask, Response, jsonify, render_template_string, request

from py_kvstore.shell import Shell
from py_kvstore.store import KeyValueStore

_HTTP_BAD_REQUEST = 400
_DEV_PORT = 8080
_EXTENSION = "py_kvstore"
_CLOSED_MESSAGE = "Session closed."

_INDEX_TEMPLATE = """<!doctype html>
<html>
<head><title>py-kvstore</title></head>
<body>
<h1>py-kvstore</h1>
<pre id="output">{{ contents }}</pre>
<form id="console"><input id="command" autocomplete="off" autofocus></form>
<script>
document.getElementById("console").addEventListener("submit", async (event) => {
  event.preventDefault();
  const input = document.getElementById("command");
  const response = await fetch("/api/execute", {
    method: "POST",
    headers: {"Content-Type": "application/json"},
    body: JSON.stringify({command: input.value}),
  });
  const data = await response.json();
  document.getElementById("output").textContent += "\\n$ " + input.value + "\\n" + data.output;
  input.value = "";
});
</script>
</body>
</html>
"""


@dataclass
class _Session:
    """The shell a web app drives, and whether ``exit`` has closed it."""

    shell: Shell
    closed: bool = False

    def run(self, command: str) -> dict[str, object]:
        """Execute *command* and build the JSON reply body."""
        if not self.closed:
            output = self.shell.execute(command)
            if output != Shell.EXIT_SENTINEL:
                return {"output": output, "closed": False}
            self.closed = True
        return {"output": _CLOSED_MESSAGE, "closed": True}


def create_app(store: KeyValueStore[str, str] | None = None) -> Flask:
    """Create and configure the Flask application.

    The session lives in ``app.extensions["py_kvstore"]`` so each app
    serves exactly one store.

    Args:
        store: Store to serve.  A fresh store is created when omitted.

    Returns:
        A configured Flask application ready to serve.

    """
    app = Flask(__name__)
    app.extensions[_EXTENSION] = _Session(shell=Shell(store=store))

    def session() -> _Session:
        return app.extensions[_EXTENSION]

    @app.route("/")
    def index() -> str:  # pyright: ignore[reportUnusedFunction]
        """Render the console HTML page."""
        return render_template_string(_INDEX_TEMPLATE, contents=str(session().shell.store))

    @app.route("/api/execute", methods=["POST"])
    def execute() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Execute a shell command.

        Expects a JSON object body ``{"command": "..."}``; anything else
        (a non-object body, a missing or non-string command) is a 400.
        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Body must be a JSON object"}), _HTTP_BAD_REQUEST
        command = data.get("command")  # pyright: ignore[reportUnknownMemberType]
        if not isinstance(command, str):
            return jsonify({"error": "'command' must be a string"}), _HTTP_BAD_REQUEST
        return jsonify(session().run(command))

    @app.route("/api/status")
    def status() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return size, capacity, and the rendered store."""
        store = session().shell.store
        return jsonify({"size": store.size(), "capacity": store.capacity, "contents": str(store)})

    return app


def main() -> None:
    """Run the web UI development server.

    This is the ``kvstore-web`` console entry point.
    """
    create_app().run(debug=True, port=_DEV_PORT)
