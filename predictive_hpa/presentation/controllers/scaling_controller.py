"""Endpoints running predictive scaling cycles."""

from typing import Any, Dict, List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Body, Depends, HTTPException, status

from predictive_hpa.application.dtos.decision_dto import (
    ModelSummaryDTO,
    ScalingDecisionDTO,
)
from predictive_hpa.application.use_cases.predictive_scaling_use_case import (
    ListModelsUseCase,
    PredictiveScalingUseCase,
)
from predictive_hpa.domain.entities.errors import (
    ConfigurationError,
    EvaluationError,
    PredictionError,
)
from predictive_hpa.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Scaling"])


@router.post("/evaluate", response_model=ScalingDecisionDTO)
@inject
async def evaluate(
    gathered_metrics: Dict[str, Any] = Body(...),
    predictive_scaling_use_case: PredictiveScalingUseCase = Depends(
        Provide["predictive_scaling_use_case"]
    ),
) -> ScalingDecisionDTO:
    """Run one predictive scaling cycle and return the decided replica count."""
    try:
        return await predictive_scaling_use_case.execute(gathered_metrics)
    except (EvaluationError, ConfigurationError) as exc:
        logger.warning("evaluate.rejected", error=exc.message, details=exc.details)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": exc.message, "details": exc.details},
        ) from exc
    except PredictionError as exc:
        logger.error("evaluate.prediction_failed", error=exc.message)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"message": exc.message, "details": exc.details},
        ) from exc


@router.get("/models", response_model=List[ModelSummaryDTO])
@inject
async def list_models(
    list_models_use_case: ListModelsUseCase = Depends(Provide["list_models_use_case"]),
) -> List[ModelSummaryDTO]:
    """List configured models with the size of their stored history."""
    return await list_models_use_case.execute()
