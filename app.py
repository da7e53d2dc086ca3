#!/usr/bin/env python3
"""
ReconHub - Recon Lookup Dashboard
Entry point: seeds the dataset, wires it into the server, and runs the Flask app.
"""

import logging
import random

import config
from services.ingest_service import QueryIngest
from services.seed_service import seed_store
from services.table_view import DatabaseView

import server

logger = logging.getLogger("reconhub")


def configure_logging(level: str) -> None:
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))


def wire(seed=None):
    """Seed a fresh store and install it (plus its single writer) on the server module."""
    rng = random.Random(seed)
    datastore = seed_store(rng)
    server.datastore = datastore
    server.query_ingest = QueryIngest(datastore, rng=rng)
    server.database_view = DatabaseView(datastore)
    server.status_rng = rng
    return datastore


def serve(host: str, port: int, seed=None) -> None:
    datastore = wire(seed)
    logger.info("Seeded %d records (next id #%04d)", len(datastore), datastore.next_id)
    logger.info("ReconHub backend running on http://%s:%d", host, port)
    server.socketio.run(
        server.app,
        host=host,
        port=port,
        debug=config.DEBUG,
        allow_unsafe_werkzeug=config.DEBUG,
    )


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="ReconHub - Recon Lookup Dashboard")
    parser.add_argument("--host", default=config.HOST, help="Host to bind to")
    parser.add_argument("--port", type=int, default=config.PORT, help="Port to bind to")
    parser.add_argument("--seed", type=int, default=config.SEED, help="Seed for reproducible demo data")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level")
    args = parser.parse_args()
    configure_logging(args.log_level)
    serve(args.host, args.port, args.seed)
