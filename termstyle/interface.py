# interface.py

from typing import Optional

from .logger import Logger
from .output import OutputSink
from .element import Element, DEFAULT_OUTPUT
from .dispatcher import StyleDispatcher

class Styler:
    """
    Main entry point that assembles the output sink, dispatcher and logger.
    """

    def __init__(self, output: Optional[OutputSink] = None,
                 logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        """
        Initialize components with an optional sink and logging.

        Args:
            output: Sink that receives rendered markup. Defaults to stdout.
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stderr.
        """
        self.logger = Logger(__name__, logging_enabled, log_file)
        self.output = output if output is not None else DEFAULT_OUTPUT
        self.dispatcher = StyleDispatcher(logger=self.logger)
        self.logger.debug(f"Initialized with output {type(self.output).__name__}")

    def element(self, content: str, styles: str = "") -> Element:
        """Create an element bound to this styler's output, with optional utility classes."""
        try:
            return self.dispatcher.apply(Element(content, output=self.output), styles)
        except Exception as e:
            self.logger.error(f"Style error for '{styles}': {e}")
            raise

    # Shorter name for call sites that read better as style("...", "...")
    style = element

    def render(self, content: str, styles: str = "") -> None:
        """Style content and write it to the output."""
        self.element(content, styles).render()
