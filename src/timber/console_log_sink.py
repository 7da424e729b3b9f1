import sys
from typing import Optional, TextIO

from src.timber.log_message import LogMessage
from src.timber.message_formatter import MessageFormatter, MessageFormatterType


class ConsoleLogSink:
    """
    Log sink that prints one formatted line per message.

    Filtering is done by the LogManager; every message given here is printed.
    """

    def __init__(self, formatter: Optional[MessageFormatterType] = None, stream: Optional[TextIO] = None):
        self.formatter = formatter or MessageFormatter()
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        try:
            print(self.formatter.format(message), file=self._stream or sys.stdout)
        except Exception:
            pass
