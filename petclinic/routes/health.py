"""
Health check endpoints for monitoring the application and its database.
"""

from datetime import datetime, timezone
import os

from flask import Blueprint, jsonify, current_app
from sqlalchemy import inspect, text

from petclinic.extensions import db


health_bp = Blueprint('health', __name__)

REQUIRED_TABLES = {'owners', 'pets', 'types', 'visits', 'vets', 'specialties'}


def _now():
    return datetime.now(timezone.utc).isoformat()


@health_bp.route('/health')
def health_check():
    """
    Lightweight health check for load balancer probes.

    Does NOT check database connectivity to keep response time low.
    """
    return jsonify({
        'status': 'healthy',
        'timestamp': _now(),
        'service': 'petclinic',
        'pid': os.getpid(),
    }), 200


@health_bp.route('/health/ready')
def readiness_check():
    """
    Readiness check including database connectivity and schema presence.

    Returns 200 only when the database answers and every table exists.
    """
    checks = {
        'application': 'healthy',
        'database': 'unknown',
        'timestamp': _now(),
    }
    status_code = 200

    try:
        db.session.execute(text('SELECT 1'))
        db.session.commit()
        checks['database'] = 'healthy'
    except Exception as exc:
        checks['database'] = 'unhealthy'
        checks['database_error'] = str(exc)
        status_code = 503
        current_app.logger.error('Database health check failed: %s', exc, exc_info=True)
        db.session.rollback()

    if checks['database'] == 'healthy':
        tables = set(inspect(db.engine).get_table_names())
        missing = REQUIRED_TABLES - tables
        if missing:
            checks['schema'] = 'incomplete'
            checks['missing_tables'] = sorted(missing)
            status_code = 503
        else:
            checks['schema'] = 'complete'

    checks['overall'] = 'healthy' if status_code == 200 else 'unhealthy'
    return jsonify(checks), status_code
