"""Маршруты слоёв.

Для каждой пары (имя, URL) из таблицы ENDPOINTS регистрируется
``GET /api/<имя>``. Вся работа с внешним сервисом идёт в
:mod:`marine_relay.services.fetch_client`; здесь только перевод
результата в HTTP-ответ.
"""

from __future__ import annotations

from typing import Callable

from flask import Response, current_app, jsonify

from . import bp
from ..endpoints import ENDPOINTS
from ..helpers import json_error_boundary
from ..services.fetch_client import FetchClient


def _make_layer_view(name: str, url: str) -> Callable[[], Response]:
    @json_error_boundary
    def view():
        client = FetchClient(delay_between_requests=current_app.config["LAYER_REQUEST_DELAY_MS"])
        data = client.fetch_geojson(url)
        if data is None:
            return jsonify({'error': 'No valid data found'}), 404
        return jsonify(data)

    view.__name__ = f"layer_{name}"
    view.__doc__ = f"Отдать слой {name} в формате GeoJSON."
    return view


for _name, _url in ENDPOINTS.items():
    bp.add_url_rule(f"/{_name}", endpoint=_name, view_func=_make_layer_view(_name, _url), methods=["GET"])
