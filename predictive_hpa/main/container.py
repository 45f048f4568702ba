"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from predictive_hpa.application.use_cases.predictive_scaling_use_case import (
    ListModelsUseCase,
    PredictiveScalingUseCase,
)
from predictive_hpa.domain.services.predictors import (
    HoltWintersPredictor,
    LinearPredictor,
    PredictorRegistry,
)
from predictive_hpa.infrastructure.database import MongoDatabase
from predictive_hpa.infrastructure.gateways.http_tuning_fetcher import (
    HTTPTuningFetcher,
)
from predictive_hpa.infrastructure.repositories import (
    InMemoryEvaluationRepository,
    MongoEvaluationRepository,
)
from predictive_hpa.infrastructure.services import (
    PassthroughEvaluator,
    SubprocessAlgorithmRunner,
    load_predictive_config,
)
from predictive_hpa.shared import EnumStoreBackend, get_logger

from .config import AppSettings

logger = get_logger(__name__)


def _enum_value(value):
    return value.value if hasattr(value, "value") else str(value)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    store_backend = providers.Callable(_enum_value, config.database.store_backend)

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    evaluation_repository = providers.Selector(
        store_backend,
        memory=providers.Singleton(InMemoryEvaluationRepository),
        mongo=providers.Singleton(
            MongoEvaluationRepository,
            mongo_database=mongo_database,
        ),
    )

    algorithm_runner = providers.Singleton(
        SubprocessAlgorithmRunner,
        python_executable=config.predictive.python_executable,
    )

    evaluator = providers.Singleton(PassthroughEvaluator)

    predictive_config = providers.Singleton(
        load_predictive_config,
        path=config.predictive.config_path,
        raw=config.predictive.config,
    )

    # Gateways
    tuning_fetcher = providers.Singleton(HTTPTuningFetcher)

    # Domain services
    linear_predictor = providers.Singleton(
        LinearPredictor,
        runner=algorithm_runner,
        algorithm_path=config.predictive.linear_algorithm_path,
        timeout=config.predictive.algorithm_timeout,
    )

    holt_winters_predictor = providers.Singleton(
        HoltWintersPredictor,
        fetcher=tuning_fetcher,
    )

    predictor_registry = providers.Singleton(
        PredictorRegistry,
        predictors=providers.List(linear_predictor, holt_winters_predictor),
    )

    # Application (use cases)
    predictive_scaling_use_case = providers.Factory(
        PredictiveScalingUseCase,
        evaluation_repository=evaluation_repository,
        predictor_registry=predictor_registry,
        evaluator=evaluator,
        predictive_config=predictive_config,
        max_concurrency=config.predictive.max_concurrency,
    )

    list_models_use_case = providers.Factory(
        ListModelsUseCase,
        evaluation_repository=evaluation_repository,
        predictive_config=predictive_config,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    The predictive configuration is loaded eagerly so a broken document
    fails the startup. MongoDB is only touched when it backs the store.
    """
    container = get_container()

    predictive_config = container.predictive_config()
    logger.info(
        "container.predictive_config.loaded",
        models=[model.name for model in predictive_config.models],
    )

    mongo_database = None
    if container.store_backend() == EnumStoreBackend.MONGO.value:
        mongo_database = container.mongo_database()

    try:
        if mongo_database is not None:
            logger.info("container.mongo.ensure_connection")
            await mongo_database.create_indexes()

        logger.info("container.resources.initialized")
        yield container

    finally:
        if mongo_database is not None:
            logger.info("container.mongo.close")
            mongo_database.close()

        logger.info("container.resources.shutdown")
