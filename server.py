#!/usr/bin/env python3
"""
ReconHub - Recon Lookup Dashboard
Backend server for the synthetic query dataset, its stats, and the API status board.
"""

import logging
import random
import time

from flask import Flask, g, jsonify, render_template, request
from flask_cors import CORS
from flask_socketio import SocketIO
from werkzeug.exceptions import HTTPException

from models import ValidationError
from services.api_status_service import simulate_api_status
from services.ingest_service import QueryIngest
from services.seed_service import seed_store
from services.stats_service import compute_stats
from services.table_view import DatabaseView

logger = logging.getLogger("reconhub.server")

app = Flask(__name__)
CORS(app)
socketio = SocketIO(app, cors_allowed_origins="*", async_mode='threading')

# Defaults so the module is usable on its own; app.py replaces these with
# configured instances before serving.
datastore = seed_store()
query_ingest = QueryIngest(datastore)
database_view = DatabaseView(datastore)
status_rng = random.Random()


@app.before_request
def start_request_timer():
    g.request_started = time.perf_counter()


@app.after_request
def log_request(response):
    started = getattr(g, 'request_started', None)
    duration_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
    logger.info("%s %s %s %.1f ms", request.method, request.path, response.status_code, duration_ms)
    return response


@app.errorhandler(Exception)
def handle_unexpected_error(exc):
    if isinstance(exc, HTTPException):
        if request.path.startswith('/api/'):
            return jsonify({'ok': False, 'error': exc.description}), exc.code
        return exc
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    return jsonify({'ok': False, 'error': 'Internal server error'}), 500


@app.route('/api/status', methods=['GET'])
def get_status():
    """Simulated health of the external lookup providers."""
    return jsonify({'ok': True, 'apis': simulate_api_status(status_rng)})


@app.route('/api/queries', methods=['GET'])
def list_queries():
    """Full dataset, newest first."""
    return jsonify({'ok': True, 'queries': datastore.to_dicts()})


@app.route('/api/query', methods=['POST'])
def run_query():
    """Run a (simulated) lookup and record it."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    try:
        record = query_ingest.ingest(data.get('type'), data.get('q'))
    except ValidationError as exc:
        return jsonify({'ok': False, 'error': str(exc)}), 400
    socketio.emit('query_added', record.to_dict())
    return jsonify({'ok': True, 'result': record.to_dict()})


@app.route('/api/stats', methods=['GET'])
def get_stats():
    """Aggregate counts over the full dataset."""
    return jsonify({'ok': True, 'stats': compute_stats(datastore.all())})


@app.route('/database', methods=['GET'])
def database_page():
    term = request.args.get('q') or ''
    view = database_view.snapshot(term)
    return render_template('database.html', **view)


@app.route('/', defaults={'path': ''}, methods=['GET'])
@app.route('/<path:path>', methods=['GET'])
def dashboard_page(path):
    if path.startswith('api/'):
        return jsonify({'ok': False, 'error': 'Not found'}), 404
    return render_template('index.html')
