"""
Инициализация расширений Flask.

Объекты расширений создаются здесь без привязки к приложению и
подключаются в create_app() (см. marine_relay/__init__.py).
"""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

# Фронтенд может открываться с другого origin (например, dev-сервер карты).
# send_wildcard: отвечаем "*", а не эхом Origin запроса
cors = CORS(send_wildcard=True)


def init_extensions(app: Flask) -> None:
    """Init all Flask extensions in one place."""
    cors.init_app(app)
