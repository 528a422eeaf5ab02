import logging
from unittest.mock import MagicMock

import structlog

from dconfig.utils.structlog_configurator import (
    _add_static_context,
    _configure_handlers,
    _configure_processors,
    configure_structlog,
    get_logger,
)


class TestStaticContextProcessor:
    """Test static context processor."""

    def test_add_static_context_processor(self):
        """Should add extra fields to event dict."""
        processor = _add_static_context({"service": "test", "workspace": "notes"})

        result = processor(MagicMock(), "info", {"event": "test message"})

        assert result == {"event": "test message", "service": "test", "workspace": "notes"}


class TestProcessorConfiguration:
    """Test processor chain configuration."""

    def test_configure_processors_console(self):
        """Should end with the console renderer by default."""
        processors = _configure_processors(False, {})

        assert len(processors) == 5
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_processors_json_output(self):
        """Should end with the JSON renderer when requested."""
        processors = _configure_processors(True, {})

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_configure_processors_service_context(self):
        """Should tag every entry with the service name and extra fields."""
        processors = _configure_processors(False, {"workspace": "notes"})

        event_dict = processors[1](MagicMock(), "info", {"event": "x"})

        assert event_dict["service"] == "dconfig"
        assert event_dict["workspace"] == "notes"


class TestHandlerConfiguration:
    """Test logging handler configuration."""

    def test_configure_handlers_replaces_existing(self, mocker):
        """Should clear old handlers and add a single stderr handler."""
        mock_logger = mocker.patch("logging.getLogger")
        mock_root = MagicMock()
        mock_logger.return_value = mock_root
        old_handler = MagicMock()
        mock_root.handlers = [old_handler]

        _configure_handlers(logging.DEBUG)

        mock_root.removeHandler.assert_called_once_with(old_handler)
        mock_root.setLevel.assert_called_once_with(logging.DEBUG)
        mock_root.addHandler.assert_called_once()


class TestMainConfiguration:
    """Test main configuration function."""

    def test_configure_structlog(self, mocker):
        """Should configure structlog and the root handlers."""
        mocker.patch(
            "dconfig.utils.structlog_configurator._configure_processors", return_value=[]
        )
        mock_configure = mocker.patch("structlog.configure")
        mock_handlers = mocker.patch("dconfig.utils.structlog_configurator._configure_handlers")
        mock_get_logger = mocker.patch("structlog.get_logger")
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger

        configure_structlog("debug")

        mock_configure.assert_called_once()
        mock_handlers.assert_called_once_with(logging.DEBUG)
        mock_logger.debug.assert_called_once()

    def test_configure_structlog_unknown_level(self, mocker):
        """Should fall back to INFO for unknown level names."""
        mocker.patch("structlog.configure")
        mock_handlers = mocker.patch("dconfig.utils.structlog_configurator._configure_handlers")
        mocker.patch("structlog.get_logger")

        configure_structlog("chatty")

        mock_handlers.assert_called_once_with(logging.INFO)

    def test_get_logger(self, mocker):
        """Should return structlog logger instance."""
        mock_structlog = mocker.patch("structlog.get_logger")
        mock_logger = MagicMock()
        mock_structlog.return_value = mock_logger

        result = get_logger("test")

        mock_structlog.assert_called_once_with("test")
        assert result == mock_logger
