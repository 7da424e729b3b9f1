from datetime import datetime
from typing import Optional, Protocol

from src.timber.application import application_name
from src.timber.log_message import LogMessage


class MessageFormatterType(Protocol):
    """
    Renders a LogMessage as a single human-readable line.
    """

    def format(self, message: LogMessage) -> str:
        ...


class MessageFormatter:
    """
    Default line layout:

        LEVEL yyyy-MM-dd HH:mm:ss[.mmm] appName [file 'function'] text

    Timestamps are rendered in local time. Whether milliseconds are shown is
    fixed per formatter instance.
    """

    def __init__(self, app_name: Optional[str] = None, *, include_milliseconds: bool = False):
        self.app_name = app_name or application_name()
        self.include_milliseconds = include_milliseconds

    def format_timestamp(self, timestamp: float) -> str:
        moment = datetime.fromtimestamp(timestamp)
        text = moment.strftime("%Y-%m-%d %H:%M:%S")
        if self.include_milliseconds:
            text += f".{moment.microsecond // 1000:03d}"
        return text

    def format(self, message: LogMessage) -> str:
        return (
            f"{message.level.label} {self.format_timestamp(message.timestamp)} "
            f"{self.app_name} [{message.file} '{message.function}'] {message.message}"
        )
