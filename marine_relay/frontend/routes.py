"""Маршруты фронтенда.

Сама статика (js/css/картинки) раздаётся штатным static-маршрутом Flask
из каталога ``static/`` в корне сайта. Здесь главная страница и
раздача вендорных пакетов из ``node_modules`` (Leaflet и т.п.).
"""

from __future__ import annotations

import os

from flask import Response, abort, current_app, send_from_directory

from . import bp


@bp.get('/')
def index() -> Response:
    """Главная страница с картой."""
    return send_from_directory(current_app.config['STATIC_DIR'], 'index.html')


@bp.get('/node_modules/<path:filename>')
def node_modules(filename: str) -> Response:
    """Отдать файл из каталога вендорных пакетов фронтенда."""
    root = current_app.config.get('NODE_MODULES_DIR')
    if not root or not os.path.isdir(root):
        abort(404)
    return send_from_directory(root, filename)
