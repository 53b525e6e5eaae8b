"""Конфигурация gunicorn для marine map relay.

Запуск:
    gunicorn -c deploy/gunicorn.conf.py wsgi:app

Переменные окружения: PORT, WEB_CONCURRENCY (число процессов),
GUNICORN_THREADS (потоков на процесс).
"""

import multiprocessing
import os

from marine_relay.config import Config
from marine_relay.services.fetch_client import (
    BACKOFF_STEP_MS,
    DEFAULT_MAX_RETRIES,
    REQUEST_TIMEOUT_SEC,
)

bind = f"0.0.0.0:{os.environ.get('PORT', '3000')}"

# Воркеры почти всё время ждут SLIP, а не считают: хватает процесса
# на ядро, остальное добирают потоки
workers = int(os.environ.get("WEB_CONCURRENCY", multiprocessing.cpu_count() + 1))
worker_class = "gthread"
threads = int(os.environ.get("GUNICORN_THREADS", "8"))

# Худший случай одного слоя: каждая попытка = пауза + не более
# REQUEST_TIMEOUT_SEC (соединение, заголовки и тело вместе), между
# попытками backoff 1 с, 2 с. При настройках по умолчанию
# 3 * (0.5 + 5) + (1 + 2) = 19.5 с.
_slowest_layer_sec = (
    DEFAULT_MAX_RETRIES * (Config.LAYER_REQUEST_DELAY_MS / 1000.0 + REQUEST_TIMEOUT_SEC)
    + sum(BACKOFF_STEP_MS * n for n in range(1, DEFAULT_MAX_RETRIES)) / 1000.0
)
timeout = int(_slowest_layer_sec) + 10
graceful_timeout = timeout

# Логи gunicorn в stdout/stderr (подходит для docker/journalctl)
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()
