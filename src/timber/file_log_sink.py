from typing import Optional

from src.timber.file_rotation import MAXIMUM_FILE_AGE_DAYS, MAXIMUM_FILE_COUNT, LogFileManager
from src.timber.log_message import LogMessage
from src.timber.message_formatter import MessageFormatter, MessageFormatterType


class FileLogSink:
    """
    Log sink that appends formatted lines to a rotating plain-text file.

    Retention runs once, when the sink is built: files older than
    max_age_days are deleted first, then everything beyond the newest
    max_file_count files.
    """

    def __init__(
        self,
        file_manager: LogFileManager,
        formatter: Optional[MessageFormatterType] = None,
        *,
        max_age_days: float = MAXIMUM_FILE_AGE_DAYS,
        max_file_count: int = MAXIMUM_FILE_COUNT,
    ):
        self.formatter = formatter or MessageFormatter()
        self._files = file_manager

        self._files.purge_old_files(max_age_days)
        self._files.purge_oldest_files(max_file_count)

    @property
    def file_manager(self) -> LogFileManager:
        return self._files

    def emit(self, message: LogMessage) -> None:
        """
        Persist a log message to disk.

        This method must not raise exceptions outward.
        """
        try:
            self._files.append_line(self.formatter.format(message))
        except Exception:
            # Never allow logging to break the host
            pass
