"""Pytest configuration and shared fixtures."""

import json
import os
import threading

import pytest

from dictionary_lookup.config import DictionaryConfig
from dictionary_lookup.exceptions import TransportError

# Qt widgets need a platform plugin even when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def test_config():
    """Provide a test configuration with a dummy API key."""
    return DictionaryConfig(
        api_key="test-key",
        request_timeout=2.0,
        status_timeout_ms=100,
    )


@pytest.fixture
def make_sense_item():
    """Factory fixture for ["sense", {...}] pairs as found in an sseq."""

    def _make(text="a domestic carnivore", sn=None):
        payload = {"dt": [["text", text]]}
        if sn is not None:
            payload["sn"] = sn
        return ["sense", payload]

    return _make


@pytest.fixture
def make_body():
    """Factory fixture encoding a JSON document into a response body."""

    def _make(document):
        return json.dumps(document).encode("utf-8")

    return _make


@pytest.fixture
def cat_body():
    """Response body for "cat": one noun entry and one verb entry."""
    return json.dumps(
        [
            {
                "meta": {"id": "cat:1"},
                "def": [
                    {
                        "sseq": [
                            [
                                [
                                    "sense",
                                    {
                                        "sn": "1 a",
                                        "dt": [["text", "{bc}a carnivorous mammal"]],
                                    },
                                ]
                            ],
                            [["sense", {"sn": "2", "dt": [["text", "{bc}a malicious woman"]]}]],
                        ]
                    }
                ],
            },
            {
                "meta": {"id": "cat:2"},
                "def": [
                    {
                        "vd": "transitive verb",
                        "sseq": [[["sense", {"dt": [["text", "{bc}to hoist (an anchor)"]]}]]],
                    }
                ],
            },
        ]
    ).encode("utf-8")


class FakeTransport:
    """In-memory Transport returning canned bodies per word."""

    def __init__(self, bodies=None, errors=None):
        self.bodies = bodies or {}
        self.errors = errors or {}
        self.calls = []

    def fetch(self, word: str) -> bytes:
        self.calls.append(word)
        if word in self.errors:
            raise self.errors[word]
        if word not in self.bodies:
            raise TransportError("Dictionary API returned HTTP 404 (Not Found)", status_code=404)
        return self.bodies[word]


class GatedTransport(FakeTransport):
    """FakeTransport whose fetch blocks until the test releases that word."""

    def __init__(self, bodies=None, errors=None):
        super().__init__(bodies, errors)
        self.gates = {}
        self._opened = False
        self._lock = threading.Lock()

    def gate(self, word: str) -> threading.Event:
        with self._lock:
            if word not in self.gates:
                self.gates[word] = threading.Event()
                if self._opened:
                    self.gates[word].set()
            return self.gates[word]

    def release(self, word: str) -> None:
        self.gate(word).set()

    def release_all(self) -> None:
        """Unblock every pending and future fetch."""
        with self._lock:
            self._opened = True
            for event in self.gates.values():
                event.set()

    def fetch(self, word: str) -> bytes:
        if not self.gate(word).wait(timeout=5.0):
            raise TransportError(f"Test gate for {word} was never released")
        return super().fetch(word)


@pytest.fixture
def fake_transport():
    """Provide an in-memory transport."""
    return FakeTransport()


@pytest.fixture
def gated_transport():
    """Provide a transport that blocks each word until released."""
    return GatedTransport()


@pytest.fixture(scope="session")
def qapp():
    """Provide the single QApplication shared by all Qt tests.

    Skips the requesting test if PyQt6 is not importable.
    """
    qt_widgets = pytest.importorskip("PyQt6.QtWidgets")
    app = qt_widgets.QApplication.instance() or qt_widgets.QApplication([])
    return app


@pytest.fixture
def spin_until(qapp):
    """Run the Qt event loop until a predicate holds, failing after a timeout."""
    import time

    def _spin(predicate, timeout=5.0):
        deadline = time.monotonic() + timeout
        while not predicate():
            if time.monotonic() > deadline:
                raise AssertionError("Timed out waiting for the Qt event loop")
            qapp.processEvents()
            time.sleep(0.005)

    return _spin
