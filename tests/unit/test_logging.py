"""Tests for the logging module."""


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_logger_instance(self) -> None:
        from termskin.logger import get_logger

        logger = get_logger("test_module")
        assert logger is not None

    def test_logger_has_bind_context(self) -> None:
        from termskin.logger import get_logger

        logger = get_logger("test_module")
        assert hasattr(logger, "info")
        assert hasattr(logger, "debug")
        assert hasattr(logger, "warning")
        assert hasattr(logger, "error")

    def test_log_dir_exists(self) -> None:
        from termskin.logger import LOG_DIR

        assert LOG_DIR.is_dir()


class TestAddTuiSink:
    """Tests for add_tui_sink function."""

    def test_returns_sink_id(self) -> None:
        from termskin.logger import add_tui_sink, remove_tui_sink

        # Use a real callable instead of MagicMock to avoid loguru
        # treating it as a file path (MagicMock has __fspath__ and write attrs)
        def sink_func(message: object) -> None:
            pass

        sink_id = add_tui_sink(sink_func)

        assert isinstance(sink_id, int)

        remove_tui_sink(sink_id)

    def test_receives_skin_warnings(self, tmp_path) -> None:
        from termskin.logger import add_tui_sink, remove_tui_sink
        from termskin.skin import load_skin

        messages_received: list[str] = []

        def test_sink(message: object) -> None:
            messages_received.append(str(message))

        skin_file = tmp_path / "broken.yml"
        skin_file.write_text("k9s:\n  body: [oops\n", encoding="utf-8")

        sink_id = add_tui_sink(test_sink, level="WARNING")
        try:
            load_skin(skin_file)
        finally:
            remove_tui_sink(sink_id)

        assert any("Ignoring skin file" in message for message in messages_received)

    def test_level_defaults_to_settings(self, tmp_path, monkeypatch) -> None:
        import json

        from loguru import logger

        from termskin.logger import add_tui_sink, remove_tui_sink
        from termskin.settings import get_settings_path

        monkeypatch.setenv("TERMSKIN_CONFIG_DIR", str(tmp_path))
        get_settings_path().write_text(json.dumps({"log_level": "ERROR"}))

        messages_received: list[str] = []

        def test_sink(message: object) -> None:
            messages_received.append(str(message))

        sink_id = add_tui_sink(test_sink)
        try:
            logger.warning("below the configured level")
            logger.error("at the configured level")
        finally:
            remove_tui_sink(sink_id)

        assert not any("below the configured level" in message for message in messages_received)
        assert any("at the configured level" in message for message in messages_received)


class TestRemoveTuiSink:
    """Tests for remove_tui_sink function."""

    def test_removes_sink_from_logger(self) -> None:
        from termskin.logger import add_tui_sink, remove_tui_sink

        messages_after_remove: list[str] = []

        def test_sink(message: object) -> None:
            messages_after_remove.append(str(message))

        sink_id = add_tui_sink(test_sink, level="DEBUG")
        remove_tui_sink(sink_id)

        from loguru import logger

        initial_count = len(messages_after_remove)
        logger.info("Message after sink removed")

        assert len(messages_after_remove) == initial_count
