# test_interface.py

import io
import pytest
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from termstyle import Styler, Element, BufferedOutput, StreamOutput, Logger, StyleNotFound


class TestOutputs:
    """Test suite for the output sinks."""

    def test_stream_output_writes_line(self):
        stream = io.StringIO()
        StreamOutput(stream).write("<bg=default;options=>x</>")
        assert stream.getvalue() == "<bg=default;options=>x</>\n"

    def test_stream_output_ignores_broken_pipe(self):
        stream = Mock()
        stream.write.side_effect = BrokenPipeError()
        StreamOutput(stream).write("x")

    def test_buffered_output_fetch_clears(self):
        output = BufferedOutput()
        output.write("a")
        output.write("b")
        assert output.fetch() == "a\nb\n"
        assert output.lines == []
        assert output.fetch() == ""


class TestStyler:
    """Test suite for the Styler entry point."""

    def setup_method(self):
        self.output = BufferedOutput()
        self.styler = Styler(output=self.output)

    def test_element_is_bound_to_output(self):
        element = self.styler.element("hi", "font-bold")
        assert isinstance(element, Element)
        assert element.output is self.output

    def test_render(self):
        self.styler.render("hi", "text-green mb-1")
        assert self.output.lines == ["<fg=green;bg=default;options=>hi</>\n"]

    def test_style_alias(self):
        assert self.styler.style("hi").to_string() == self.styler.element("hi").to_string()

    def test_errors_are_logged_and_raised(self):
        self.styler.logger = Mock()
        with pytest.raises(StyleNotFound):
            self.styler.element("hi", "nope")
        self.styler.logger.error.assert_called_once()

    def test_default_output_is_stdout(self, capsys):
        Styler().render("hi")
        assert capsys.readouterr().out == "<bg=default;options=>hi</>\n"


class TestLogger:
    """Test suite for the logging wrapper."""

    def test_disabled_logger_exposes_levels(self):
        logger = Logger("termstyle.tests")
        assert logger.name == "termstyle.tests"
        for level in ("debug", "info", "warning", "error"):
            getattr(logger, level)("message")

    def test_enabled_logger_with_file(self, tmp_path):
        log_file = tmp_path / "styles.log"
        logger = Logger("termstyle.tests.file", logging_enabled=True, log_file=str(log_file))
        logger.debug("written")
