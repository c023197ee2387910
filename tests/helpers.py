"""Test doubles shared by several test modules."""

import json

import requests


class DeferredLauncher:
    """Launcher that queues jobs so tests decide when, and in which order, they finish."""

    def __init__(self):
        self.pending = []

    def __call__(self, job, on_done, on_error):
        self.pending.append((job, on_done, on_error))

    def __len__(self):
        return len(self.pending)

    def run(self, index: int = 0):
        job, on_done, on_error = self.pending.pop(index)
        try:
            value = job()
        except Exception as e:
            on_error(e)
            return
        on_done(value)

    def run_all(self):
        while self.pending:
            self.run(0)


def make_response(status_code: int = 200, body=None, text: str = None) -> requests.Response:
    """Build a requests.Response carrying a JSON (or raw text) body."""
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(body) if body is not None else ""
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    return response
