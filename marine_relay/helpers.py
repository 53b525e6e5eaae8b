"""
Вспомогательные функции для маршрутов.

Здесь лежит декоратор ``json_error_boundary``: он оборачивает view-функцию
и превращает любое вылетевшее исключение в ответ 500 с JSON-телом
``{"error": "<сообщение>"}``. Клиент не видит трейсбэков, а в лог
ошибка попадает целиком.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from flask import jsonify

logger = logging.getLogger(__name__)


def json_error_boundary(view: Callable[..., Any]) -> Callable[..., Any]:
    """Перехватить исключение внутри view и отдать 500 в JSON."""

    @functools.wraps(view)
    def wrapper(*args: Any, **kwargs: Any):
        try:
            return view(*args, **kwargs)
        except Exception as e:
            logger.exception("Unhandled error in %s", view.__name__)
            return jsonify({"error": str(e)}), 500

    return wrapper
