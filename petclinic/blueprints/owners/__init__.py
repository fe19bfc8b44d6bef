"""Owners blueprint: owner search and details, pet and visit forms."""

from flask import Blueprint

owners_bp = Blueprint('owners', __name__)

from . import routes, pets  # noqa: E402,F401
