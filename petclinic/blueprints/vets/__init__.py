"""Vets blueprint: paginated veterinarian list and its JSON rendition."""

from flask import Blueprint

vets_bp = Blueprint('vets', __name__)

from . import routes  # noqa: E402,F401
