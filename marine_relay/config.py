"""
Модуль конфигурации приложения.

Классы конфигурации Flask для разработки, тестов и продакшена.
Внешне настраивается немногое: порт, уровень логирования и путь к
вендорным пакетам фронтенда. Таблица слоёв, число повторов и паузы
зашиты в код (см. :mod:`marine_relay.endpoints` и
:mod:`marine_relay.services.fetch_client`).
"""

import os
from datetime import timedelta


def _int_env(name: str, default: int) -> int:
    raw = (os.environ.get(name, "") or "").strip()
    if not raw.isdigit():
        return default
    return int(raw)


class Config:
    """Базовый класс конфигурации."""

    # Корень проекта (каталог, где лежат static/ и node_modules/)
    BASE_DIR = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))

    # Порт HTTP-сервера. Используется run.py, wsgi.py и deploy/gunicorn.conf.py.
    PORT = _int_env("PORT", 3000)

    # Настройки логирования. По умолчанию уровень INFO и вывод только в консоль.
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE")  # если не задан, лог пишется только в stdout

    # Статика фронтенда и вендорные пакеты (аналог /node_modules в npm-сборке)
    STATIC_DIR = os.path.join(BASE_DIR, "static")
    NODE_MODULES_DIR = os.environ.get("NODE_MODULES_DIR") or os.path.join(BASE_DIR, "node_modules")

    # Пауза перед каждым запросом к слою SLIP, мс. Не из env.
    LAYER_REQUEST_DELAY_MS = 500


class DevelopmentConfig(Config):
    """Настройки для режима разработки."""

    DEBUG = True
    # В разработке не кэшируем статику, чтобы правки были видны сразу
    SEND_FILE_MAX_AGE_DEFAULT = 0


class TestingConfig(Config):
    """Настройки для тестов."""

    TESTING = True
    DEBUG = True
    SEND_FILE_MAX_AGE_DEFAULT = 0


class ProductionConfig(Config):
    """Настройки для режима продакшена."""

    DEBUG = False
    # В продакшене можно кэшировать статику длительно (30 дней)
    SEND_FILE_MAX_AGE_DEFAULT = timedelta(days=30)
