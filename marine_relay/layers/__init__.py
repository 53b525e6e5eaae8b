"""Blueprint for marine layers API.

Пакет публикует слои SLIP (порты, морские парки, зоны рыболовства и т.д.)
под путями ``/api/<name>``. Список слоёв берётся из
:data:`marine_relay.endpoints.ENDPOINTS`.
"""

from flask import Blueprint

bp = Blueprint('layers', __name__)

from . import routes  # noqa: F401  # import routes to register endpoints
