"""HTTP record-store analytics engine.

Each event is saved as one record:

    POST {base_url}/records
    {"record_type": "AnalyticsEvent.<name>", "fields": {<metadata>}}

The request runs on a small thread pool. ``send`` only submits it; the
outcome is observed by a completion callback that logs failures. At most
``max_pending`` saves are queued or running at once; events beyond that are
dropped and logged.
"""

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from functools import partial
from typing import Any, Dict, Mapping, Optional

import httpx

logger = logging.getLogger(__name__)

RECORDS_PATH = "/records"
RECORD_TYPE_PREFIX = "AnalyticsEvent."


def build_record(name: str, metadata: Mapping[str, str]) -> Dict[str, Any]:
    """Build the JSON body for one analytics record."""
    return {
        "record_type": f"{RECORD_TYPE_PREFIX}{name}",
        "fields": {key: str(value) for key, value in metadata.items()},
    }


class HttpRecordAnalyticsEngine:
    """Saves analytics events to an HTTP record store without waiting."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 5.0,
        max_workers: int = 2,
        max_pending: int = 1000,
        client: Optional[httpx.Client] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        """Create the engine.

        Args:
            base_url: Root URL of the record store.
            api_key: Optional bearer token sent with every request.
            timeout: Per-request timeout in seconds.
            max_workers: Size of the background thread pool.
            max_pending: Saves allowed in flight; further events are dropped.
            client: Pre-built client (tests use one with a mock transport).
            executor: Pre-built executor replacing the default thread pool.
        """
        headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout, headers=headers)
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="beacon-analytics"
        )
        self._pending = threading.BoundedSemaphore(max_pending)

    def send(self, name: str, metadata: Mapping[str, str]) -> None:
        """Submit the record save and return immediately."""
        if not self._pending.acquire(blocking=False):
            logger.error("Dropped analytics event '%s': too many pending saves", name)
            return

        record = build_record(name, metadata)
        try:
            future = self._executor.submit(self._save, record)
        except RuntimeError as e:
            # Executor already shut down.
            self._pending.release()
            logger.error("Dropped analytics event '%s': %s", name, e)
            return
        future.add_done_callback(partial(self._on_saved, name))

    def _save(self, record: Dict[str, Any]) -> int:
        response = self._client.post(RECORDS_PATH, json=record)
        response.raise_for_status()
        return response.status_code

    def _on_saved(self, name: str, future: "Future[int]") -> None:
        self._pending.release()
        error = future.exception()
        if error is not None:
            logger.error("Failed to save analytics record '%s': %s", name, error)
        else:
            logger.debug("Saved analytics record '%s'", name)

    def close(self) -> None:
        """Wait for in-flight saves, then release the pool and the client."""
        self._executor.shutdown(wait=True)
        self._client.close()
