"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config
from core.health import HealthChecker, create_clock_check, create_registry_check
from idgen import IDGenerator, SeedRegistry
from internal.logging import get_logger, LogLevel, StructuredLogger
from service.routes import api, health, ids


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    logger_instance = get_logger()

    # One registry per app; every configured namespace gets its counter up front
    registry = SeedRegistry()
    generator = IDGenerator(registry)
    for namespace in config.generator.namespaces:
        generator.init(namespace)

    health_checker = HealthChecker()
    health_checker.register("registry", create_registry_check(registry), critical=True)
    health_checker.register("clock", create_clock_check(), critical=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version="1.0.0",
                             namespaces=config.generator.namespaces)
        yield
        logger_instance.info("Application shutdown complete")

    app = FastAPI(
        title="GLID Generator",
        version="1.0.0",
        description="time-ordered numeric id generator",
        lifespan=lifespan,
    )
    app.state.generator = generator

    ids.init(generator, config.generator.default_block_id)
    api.init(registry)
    health.init(registry, health_checker)

    app.include_router(ids.router)
    app.include_router(api.router)
    app.include_router(health.router)

    return app
