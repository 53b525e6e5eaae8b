"""Blueprint for the static map front end (landing page + vendored packages)."""

from flask import Blueprint

bp = Blueprint('frontend', __name__)

from . import routes  # noqa: F401  # import routes to register endpoints
