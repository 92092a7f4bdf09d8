"""Browser-based web UI for py-kvstore.

This package provides a Flask application that exposes the store shell
through a web browser.  It is an **optional** extra — install with::

    pip install py-kvstore[web]
"""
