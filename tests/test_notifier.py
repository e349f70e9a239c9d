"""Tests for notification backends and console fallback"""

import io
from unittest.mock import MagicMock, patch

import pytest

from vocabpop.config.settings import RunConfig
from vocabpop.core.factory import create_notifier
from vocabpop.core.interfaces import NotificationBackendInterface
from vocabpop.core.notifier import ConsoleBackend, NativeBackend, Notifier
from vocabpop.exceptions import NotificationError
from vocabpop.models.entry import Entry


class FailingBackend(NotificationBackendInterface):
    """Native-path stub that always fails"""

    name = "failing"

    def __init__(self, error: Exception | None = None):
        self.error = error or NotificationError("failing")
        self.calls = 0

    def show(self, title: str, body: str) -> None:
        self.calls += 1
        raise self.error


class RecordingBackend(NotificationBackendInterface):
    """Native-path stub that records what it was asked to show"""

    name = "recording"

    def __init__(self):
        self.shown: list[tuple[str, str]] = []

    def show(self, title: str, body: str) -> None:
        self.shown.append((title, body))


class TestNotifierFallback:
    """Test exactly-one-effect semantics"""

    def test_native_success_writes_nothing_to_stdout(self, capsys):
        backend = RecordingBackend()
        notifier = Notifier(backend=backend)

        used = notifier.show(Entry("犬", "dog"))

        assert used == "recording"
        assert backend.shown == [("犬", "dog")]
        assert capsys.readouterr().out == ""

    def test_native_failure_falls_back_to_console(self, capsys):
        backend = FailingBackend()
        notifier = Notifier(backend=backend)

        used = notifier.show(Entry("犬", "dog"))

        assert used == "console"
        assert backend.calls == 1
        assert capsys.readouterr().out == "犬 — dog\n"

    @pytest.mark.parametrize(
        "error", [RuntimeError("no backend"), PermissionError("denied"), OSError()]
    )
    def test_any_native_error_is_recoverable(self, capsys, error):
        notifier = Notifier(backend=FailingBackend(error))

        notifier.show(Entry("猫", "cat"))
        notifier.show(Entry("鳥", "bird"))

        assert capsys.readouterr().out == "猫 — cat\n鳥 — bird\n"
        assert notifier.get_statistics() == {"shown": 2, "fallbacks": 2}

    def test_console_only_notifier(self, capsys):
        notifier = Notifier(backend=None)

        assert notifier.show(Entry("水", "water")) == "console"
        assert capsys.readouterr().out == "水 — water\n"

    def test_multi_column_body(self, capsys):
        notifier = Notifier(backend=FailingBackend())

        notifier.show(Entry("食べる", "たべる\tto eat\tN5"))

        assert capsys.readouterr().out == "食べる — たべる — to eat (N5)\n"


class TestBackends:
    """Test concrete backend behaviour"""

    def test_console_backend_custom_stream(self):
        stream = io.StringIO()
        ConsoleBackend(stream).show("term", "meaning")

        assert stream.getvalue() == "term — meaning\n"

    def test_console_backend_replaces_unencodable_characters(self):
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="cp1252", newline="\n")

        ConsoleBackend(stream).show("犬", "dog")

        assert raw.getvalue() == "? — dog\n".encode("cp1252")

    def test_console_backend_ascii_stream(self):
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="ascii", newline="\n")

        ConsoleBackend(stream).show("猫", "cat")

        assert raw.getvalue() == b"? ? cat\n"


class TestNonUtf8Console:
    """Test that the console fallback keeps the loop alive on narrow encodings"""

    def test_fallback_on_cp1252_stream_does_not_raise(self):
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="cp1252", newline="\n")
        notifier = Notifier(backend=FailingBackend(), fallback=ConsoleBackend(stream))

        assert notifier.show(Entry("犬", "dog")) == "console"
        assert notifier.show(Entry("猫", "cat")) == "console"

        assert raw.getvalue().decode("cp1252").splitlines() == ["? — dog", "? — cat"]
        assert notifier.get_statistics() == {"shown": 2, "fallbacks": 2}

    @patch("vocabpop.core.notifier.notification")
    def test_native_backend_calls_plyer(self, mock_notification):
        backend = NativeBackend(app_name="TestApp", timeout=5)

        backend.show("犬", "dog")

        mock_notification.notify.assert_called_once_with(
            title="犬", message="dog", app_name="TestApp", timeout=5
        )

    @patch("vocabpop.core.notifier.notification")
    def test_native_backend_wraps_errors(self, mock_notification):
        mock_notification.notify.side_effect = NotImplementedError("no platform")

        with pytest.raises(NotificationError) as exc_info:
            NativeBackend().show("犬", "dog")

        assert exc_info.value.backend == "native"
        assert isinstance(exc_info.value.original_error, NotImplementedError)

    @patch("vocabpop.core.notifier.notification")
    def test_plyer_failure_end_to_end(self, mock_notification, capsys):
        mock_notification.notify.side_effect = Exception("dbus unavailable")
        notifier = Notifier(backend=NativeBackend())

        notifier.show(Entry("犬", "dog"))

        assert capsys.readouterr().out == "犬 — dog\n"


class TestCreateNotifier:
    """Test notifier wiring from run configuration"""

    def test_default_uses_native_backend(self):
        notifier = create_notifier(RunConfig())

        assert isinstance(notifier.backend, NativeBackend)
        assert isinstance(notifier.fallback, ConsoleBackend)

    def test_console_only_skips_native(self):
        notifier = create_notifier(RunConfig(console_only=True))

        assert notifier.backend is None

    def test_explicit_backend(self):
        backend = MagicMock(spec=NotificationBackendInterface)
        notifier = create_notifier(RunConfig(), backend=backend)

        assert notifier.backend is backend
