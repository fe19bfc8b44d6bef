"""
Main Blueprint - Public Routes

This blueprint handles the welcome page and the deliberate failure page
used to check the error handling.
"""

from flask import Blueprint, render_template

# Create Blueprint
main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Welcome page"""
    return render_template('welcome.html')


@main_bp.route('/oups')
def trigger_exception():
    """Raise on purpose so the 500 page can be seen and tested."""
    raise RuntimeError(
        'Expected: route used to showcase what happens when an exception is raised'
    )
