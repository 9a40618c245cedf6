#!/usr/bin/env python3
"""
Main entry point for the shortlinks service.

Concurrency: requests are served with async I/O in one process (FastAPI +
asyncpg pool + redis.asyncio).

Usage:
    python app.py

Environment variables:
    DATABASE_URL - PostgreSQL connection URL (unset: in-memory store)
    CREATE_TABLES - Set to 'true' to create the short_links table on startup
    REDIS_URL - Redis connection URL (optional)
    BASE_URL - Origin for short links when a request has no Host header
    PORT - Port to listen on
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from shortlinks.database.base import ShortLinkDBBase
from shortlinks.database.memory import InMemoryShortLinkDB
from shortlinks.database.postgres import ShortLinkPostgresDB
from shortlinks.database.cache import RedisCache
from shortlinks.service import ShortLinkService
from shortlinks.shortcode import ShortCodeGenerator
from shortlinks.common.logging_config import setup_logging
from web_app import create_app


def build_store(config: Config, logger) -> ShortLinkDBBase:
    """Pick the store for the configured database URL."""
    if not config.database_url:
        logger.warning("DATABASE_URL not set - using in-memory store, links are lost on restart")
        return InMemoryShortLinkDB(logger=logger)

    logger.info("Using PostgreSQL store")
    return ShortLinkPostgresDB(
        db_config=config.database_url,
        pool_max_size=config.db_pool_max_size,
        create_tables=config.create_tables,
        logger=logger,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting shortlinks service...")

    db = build_store(config, logger)
    if isinstance(db, ShortLinkPostgresDB) and config.create_tables:
        await db.ensure_tables()

    # Initialize cache (optional)
    if config.redis_url:
        logger.info("Connecting to Redis")
        cache = RedisCache(
            redis_url=config.redis_url,
            ttl_seconds=config.cache_ttl_seconds,
            logger=logger,
        )
        await cache.connect()
    else:
        logger.info("Redis caching disabled")
        cache = None

    service = ShortLinkService(
        db=db,
        cache=cache,
        short_code_generator=ShortCodeGenerator(default_length=config.short_code_length),
        logger=logger,
        max_collision_retries=config.max_collision_retries,
    )

    app.state.db = db
    app.state.cache = cache
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down shortlinks service...")
    await service.close()
    logger.info("Service stopped")


def build_server(app: FastAPI, config: Config) -> uvicorn.Server:
    """Single-process uvicorn server for an app object."""
    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )
    return uvicorn.Server(uvicorn_config)


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Shortlinks Service")
    # Connection URLs may carry passwords
    logger.info(f"Configuration: {config.model_dump(exclude={'database_url', 'redis_url'})}")

    # Store, cache and service are created in the lifespan
    app = create_app(
        db_instance=None,
        cache_instance=None,
        service_instance=None,
        config=config,
    )

    app.state.config = config
    app.state.logger = logger

    app.router.lifespan_context = lifespan

    server = build_server(app, config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
