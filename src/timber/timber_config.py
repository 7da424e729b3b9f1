from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from src.timber.device_log_sink import DEVICE_CAPACITY
from src.timber.file_rotation import MAXIMUM_FILE_AGE_DAYS, MAXIMUM_FILE_COUNT, MAXIMUM_LOG_FILE_SIZE
from src.timber.log_level import LogLevel


@dataclass(frozen=True)
class TimberConfig:
    """Startup configuration for a LogManager and its sinks."""

    level: LogLevel = LogLevel.VERBOSE
    app_name: Optional[str] = None            # None -> host process name

    # Storage locations (None -> platform cache / data dirs)
    logs_dir: Optional[Path] = None
    state_path: Optional[Path] = None

    # File rotation and retention
    max_file_size: int = MAXIMUM_LOG_FILE_SIZE
    max_file_age_days: float = MAXIMUM_FILE_AGE_DAYS
    max_file_count: int = MAXIMUM_FILE_COUNT
    log_file_extension: str = "log"

    include_milliseconds: bool = False

    # Sink selection
    console_enabled: bool = True
    file_enabled: bool = True
    device_enabled: bool = False
    device_capacity: int = DEVICE_CAPACITY
    http_url: Optional[str] = None            # None -> no HTTP sink
    http_method: str = "POST"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimberConfig":
        """
        Build a config from plain values (e.g. parsed JSON).

        `level` may be a string such as "debug"; unknown strings give NONE.
        Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}

        if "level" in values and not isinstance(values["level"], LogLevel):
            values["level"] = LogLevel.parse(values["level"])
        for key in ("logs_dir", "state_path"):
            if values.get(key) is not None:
                values[key] = Path(values[key])

        return cls(**values)
