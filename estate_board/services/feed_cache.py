"""
Кеш ответа внешнего вебхука.

Одна ячейка с временем жизни. Пока один запрос ходит за свежими данными,
остальные ждут его на блокировке и получают тот же результат, поэтому при
промахе кеша наверх уходит ровно один запрос.
"""
import time
import logging
import threading
from typing import Any, Callable, Optional

import httpx

from estate_board.errors import UpstreamError

logger = logging.getLogger(__name__)


class TTLCache:
    """Однослотовый кеш с TTL и защитой от одновременных промахов"""

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._value: Any = None
        self._expires_at: Optional[float] = None

    def _is_fresh(self) -> bool:
        return self._expires_at is not None and self._clock() < self._expires_at

    def get_or_load(self, loader: Callable[[], Any]) -> Any:
        # Ошибка загрузчика пробрасывается и не кешируется
        with self._lock:
            if self._is_fresh():
                return self._value
            value = loader()
            self._value = value
            self._expires_at = self._clock() + self.ttl
            return value


def fetch_feed(url: str, timeout: float) -> Any:
    """Забирает JSON с вебхука"""
    logger.info(f"Fetching feed: {url}")
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPError as e:
        logger.error(f"Feed request failed: {e}")
        raise UpstreamError()
    except ValueError as e:
        logger.error(f"Feed returned invalid JSON: {e}")
        raise UpstreamError("Upstream returned invalid JSON")
