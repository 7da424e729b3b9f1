import threading
from collections import deque
from typing import Deque, Optional

from src.timber.durable_log_message import decode_messages, encode_messages
from src.timber.log_message import LogMessage
from src.timber.message_formatter import MessageFormatter, MessageFormatterType
from src.timber.state_store import StateStore
from src.timber.timber_exceptions import SnapshotDecodeError

DEVICE_SNAPSHOT_KEY = "io.timber.device-logger.user-defaults-key"
DEVICE_CAPACITY = 200


class DeviceLogSink:
    """
    Log sink that keeps the most recent messages in memory for an
    on-device viewer.

    The buffer is restored from the last snapshot when the sink is built.
    Host code forwards two lifecycle signals:
      - on_memory_warning(): drop everything
      - on_enter_background(): snapshot the buffer on a background thread
    """

    def __init__(
        self,
        store: StateStore,
        capacity: int = DEVICE_CAPACITY,
        formatter: Optional[MessageFormatterType] = None,
    ):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.formatter = formatter or MessageFormatter()
        self._store = store
        self._lock = threading.RLock()
        self._messages: Deque[LogMessage] = deque(maxlen=capacity)
        self.restore()

    @property
    def capacity(self) -> int:
        return self._messages.maxlen

    @property
    def messages(self) -> tuple:
        """Oldest first."""
        with self._lock:
            return tuple(self._messages)

    def messages_newest_first(self) -> tuple:
        with self._lock:
            return tuple(reversed(self._messages))

    def emit(self, message: LogMessage) -> None:
        # deque(maxlen) evicts the oldest entry on overflow
        with self._lock:
            self._messages.append(message)

    def export_text(self, separator: str = "\n") -> str:
        """
        Formatted history, newest first, for sharing from a viewer.
        """
        return separator.join(self.formatter.format(m) for m in self.messages_newest_first())

    # -------------------------------------------------
    # Lifecycle signals
    # -------------------------------------------------
    def on_memory_warning(self) -> None:
        with self._lock:
            self._messages.clear()

    def on_enter_background(self) -> threading.Thread:
        thread = threading.Thread(target=self.persist, name="timber-device-snapshot", daemon=True)
        thread.start()
        return thread

    # -------------------------------------------------
    # Persistence
    # -------------------------------------------------
    def persist(self) -> None:
        """Overwrite the stored snapshot with the current buffer."""
        try:
            self._store.set(DEVICE_SNAPSHOT_KEY, encode_messages(self.messages))
        except Exception:
            pass

    def restore(self) -> None:
        """
        Replace the buffer with the stored snapshot.

        A missing or corrupt snapshot leaves the buffer empty.
        """
        records = self._store.get(DEVICE_SNAPSHOT_KEY)
        if records is None:
            return
        try:
            restored = decode_messages(records)
        except SnapshotDecodeError:
            return
        with self._lock:
            self._messages.clear()
            self._messages.extend(restored)
