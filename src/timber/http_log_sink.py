from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

import requests

from src.timber.log_message import LogMessage
from src.timber.message_formatter import MessageFormatter, MessageFormatterType

HTTP_WORKERS = 4


class HTTPLogSink:
    """
    Log sink that sends each message's raw text to a remote endpoint.

    Body is {"message": text} as JSON. Requests run on a small worker pool
    owned by the sink; their outcome is never reported and they are never
    retried.
    """

    def __init__(
        self,
        url: str,
        method: str = "POST",
        formatter: Optional[MessageFormatterType] = None,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        max_workers: int = HTTP_WORKERS,
    ):
        self.url = url
        self.method = method.upper()
        self.formatter = formatter or MessageFormatter()
        self._session = session or requests.Session()
        self._timeout = timeout
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="timber-http-sink")

    def emit(self, message: LogMessage) -> Optional[Future]:
        try:
            payload = {"message": message.message}
            return self._executor.submit(self._send, payload)
        except Exception:
            return None

    def close(self) -> None:
        """Stop accepting messages; requests already queued still run."""
        self._executor.shutdown(wait=False)

    def _send(self, payload: dict) -> None:
        try:
            self._session.request(self.method, self.url, json=payload, timeout=self._timeout)
        except Exception:
            pass
