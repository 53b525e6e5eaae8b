# -*- coding: utf-8 -*-
"""
Клиент для получения GeoJSON у внешних картографических сервисов.

Каждая попытка запроса предваряется фиксированной паузой (вежливость к
источнику), неуспешные попытки повторяются с линейно растущей задержкой.
Наружу :meth:`FetchClient.fetch_geojson` отдаёт либо документ, либо None;
исключения дальше клиента не уходят.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import requests
import urllib3
from urllib3.exceptions import HTTPError as Urllib3HTTPError, ReadTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_DELAY_BETWEEN_REQUESTS_MS = 1000
DEFAULT_MAX_RETRIES = 3
# Шаг линейного backoff: 1000 мс после 1-й неудачи, 2000 мс после 2-й, ...
BACKOFF_STEP_MS = 1000
# Лимит на всю попытку: соединение, заголовки и тело вместе
REQUEST_TIMEOUT_SEC = 5.0
BODY_CHUNK_SIZE = 64 * 1024


class UpstreamError(Exception):
    """Внешний сервис ответил статусом вне диапазона 2xx."""

    def __init__(self, status: int):
        super().__init__(f"HTTP error! status: {status}")
        self.status = status


@dataclass(frozen=True)
class FetchOptions:
    """Настройки клиента. Задаются один раз при создании."""

    delay_between_requests: int = DEFAULT_DELAY_BETWEEN_REQUESTS_MS
    max_retries: int = DEFAULT_MAX_RETRIES
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


def is_valid_geojson(data: Any) -> bool:
    """Проверить, что значение похоже на GeoJSON FeatureCollection.

    Смотрим только на ``type`` и на то, что ``features`` является списком.
    Сами объекты (геометрия, свойства) не проверяются.
    """
    return (
        isinstance(data, dict)
        and data.get("type") == "FeatureCollection"
        and isinstance(data.get("features"), list)
    )


def _sleep_ms(ms: int) -> None:
    time.sleep(ms / 1000.0)


def _limit_socket_wait(raw: Any, seconds: float) -> None:
    # Одно ожидание recv не должно выйти за остаток лимита попытки
    sock = getattr(getattr(raw, "connection", None), "sock", None)
    if sock is not None:
        sock.settimeout(seconds)


def _read_body(response: requests.Response, deadline: float) -> bytes:
    """Дочитать тело ответа до ``deadline`` (по time.monotonic).

    ``read1`` возвращает то, что уже пришло, после одного чтения из сокета,
    поэтому медленно отдаваемое тело обрывается по сроку, а не висит
    до конца передачи.
    """
    raw = response.raw
    body = bytearray()
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise requests.Timeout(f"Response body not received within {REQUEST_TIMEOUT_SEC:g}s")
        _limit_socket_wait(raw, remaining)
        try:
            chunk = raw.read1(BODY_CHUNK_SIZE, decode_content=True)
        except ReadTimeoutError as exc:
            raise requests.Timeout(str(exc)) from exc
        except Urllib3HTTPError as exc:
            raise requests.ConnectionError(str(exc)) from exc
        if not chunk:
            return bytes(body)
        body += chunk


class FetchClient:
    """Клиент с паузой перед каждым запросом и повторами при сбоях."""

    def __init__(
        self,
        delay_between_requests: Optional[int] = None,
        max_retries: Optional[int] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        # Пустые/нулевые значения заменяются значениями по умолчанию
        self.options = FetchOptions(
            delay_between_requests=delay_between_requests or DEFAULT_DELAY_BETWEEN_REQUESTS_MS,
            max_retries=max_retries or DEFAULT_MAX_RETRIES,
            headers=MappingProxyType(dict(headers or {})),
        )

    is_valid_geojson = staticmethod(is_valid_geojson)

    def rate_limited_fetch(
        self,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        **overrides: Any,
    ) -> Any:
        """Выполнить GET с паузой и повторами, вернуть декодированный JSON.

        Пауза ``delay_between_requests`` выдерживается перед КАЖДОЙ попыткой,
        в том числе перед первой. Сама попытка (соединение, заголовки, тело)
        ограничена ``REQUEST_TIMEOUT_SEC``. Сетевые ошибки, таймаут, статус
        не 2xx и битый JSON считаются повторяемыми. После последней
        разрешённой попытки исключение пробрасывается вызывающему.
        """
        merged: Dict[str, str] = dict(self.options.headers)
        if headers:
            merged.update(headers)
        overrides.pop("timeout", None)
        overrides.pop("stream", None)

        attempt = 0
        while attempt < self.options.max_retries:
            try:
                _sleep_ms(self.options.delay_between_requests)
                deadline = time.monotonic() + REQUEST_TIMEOUT_SEC
                # total: соединение и ожидание заголовков делят один лимит
                timeout = urllib3.Timeout(total=REQUEST_TIMEOUT_SEC)
                with requests.get(url, headers=merged, timeout=timeout, stream=True, **overrides) as response:
                    if not response.ok:
                        raise UpstreamError(response.status_code)
                    body = _read_body(response, deadline)
                return json.loads(body)
            except (requests.RequestException, UpstreamError, ValueError) as exc:
                attempt += 1
                if attempt >= self.options.max_retries:
                    raise
                logger.warning(
                    "Attempt %s/%s for %s failed: %s",
                    attempt, self.options.max_retries, url, exc,
                )
                _sleep_ms(BACKOFF_STEP_MS * attempt)
        return None  # pragma: no cover - цикл всегда либо вернёт, либо бросит

    def fetch_geojson(self, url: str) -> Optional[Dict[str, Any]]:
        """Получить FeatureCollection по ``url`` или None при любой ошибке."""
        try:
            data = self.rate_limited_fetch(url)
            if not self.is_valid_geojson(data):
                raise ValueError("Invalid GeoJSON response")
        except Exception as exc:
            logger.error("Endpoint %s failed: %s", url, exc)
            return None
        logger.info("Working endpoint found: %s", url)
        return data
