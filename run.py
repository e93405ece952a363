#!/usr/bin/env python3
"""NAUTCHART - Mercator chart projection and bearing service.

Starts a Flask server and opens the browser to the chart API.
"""

import logging
import os
import threading
import webbrowser

from nautchart.server import app

PORT = int(os.environ.get("PORT", 5050))
HOST = os.environ.get("HOST", "127.0.0.1")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def open_browser():
    webbrowser.open(f"http://127.0.0.1:{PORT}/api/charts")


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # Only open browser in local development mode
    if HOST == "127.0.0.1" and os.environ.get("FLASK_ENV") != "production":
        threading.Timer(1.0, open_browser).start()
    logging.getLogger(__name__).info("Serving charts on http://%s:%d", HOST, PORT)
    app.run(host=HOST, port=PORT, debug=False)
