"""Loads the predictive configuration document from YAML."""

from pathlib import Path
from typing import Optional

import yaml

from predictive_hpa.application.dtos.config_dto import parse_predictive_config
from predictive_hpa.domain.entities.errors import ConfigurationError
from predictive_hpa.domain.entities.model import PredictiveConfig
from predictive_hpa.shared.logging import get_logger

logger = get_logger(__name__)


def load_predictive_config(
    path: Optional[str] = None, raw: Optional[str] = None
) -> PredictiveConfig:
    """
    Parse the predictive configuration from ``raw`` YAML or from ``path``.

    ``raw`` wins when both are given. Without either an empty configuration
    (no models, ``maximum`` decision) is returned.

    Raises:
        ConfigurationError: Unreadable file, invalid YAML or invalid content.
    """
    if raw is None and path:
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(
                f"Unable to read predictive configuration: {exc}",
                details={"path": path},
            ) from exc

    if raw is None:
        logger.warning("config.predictive.empty")
        return parse_predictive_config({})

    try:
        document = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Predictive configuration is not valid YAML: {exc}",
            details={"path": path},
        ) from exc

    config = parse_predictive_config(document)
    logger.info(
        "config.predictive.loaded",
        models=[model.name for model in config.models],
        decision_type=config.decision_type.value,
    )
    return config
