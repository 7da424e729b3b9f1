from typing import Optional

from src.timber.console_log_sink import ConsoleLogSink
from src.timber.device_log_sink import DeviceLogSink
from src.timber.file_log_sink import FileLogSink
from src.timber.file_rotation import LogFileManager
from src.timber.http_log_sink import HTTPLogSink
from src.timber.log_manager import LogManager
from src.timber.message_formatter import MessageFormatter
from src.timber.state_store import StateStore
from src.timber.timber_config import TimberConfig


def create_log_manager(config: Optional[TimberConfig] = None) -> LogManager:
    """
    Build a LogManager with the sinks the config enables.

    Sinks are registered in the order console, file, device, http.
    """
    config = config or TimberConfig()
    store = StateStore(config.state_path)
    formatter = MessageFormatter(config.app_name, include_milliseconds=config.include_milliseconds)

    manager = LogManager(level=config.level)

    if config.console_enabled:
        manager.add_sink(ConsoleLogSink(formatter))

    if config.file_enabled:
        files = LogFileManager(
            store,
            config.logs_dir,
            app_name=formatter.app_name,
            max_file_size=config.max_file_size,
            extension=config.log_file_extension,
        )
        manager.add_sink(
            FileLogSink(
                files,
                formatter,
                max_age_days=config.max_file_age_days,
                max_file_count=config.max_file_count,
            )
        )

    if config.device_enabled:
        manager.add_sink(DeviceLogSink(store, config.device_capacity, formatter))

    if config.http_url:
        manager.add_sink(HTTPLogSink(config.http_url, config.http_method, formatter))

    return manager
