"""
API endpoints for the late delivery penalty evaluator.

Provides a REST interface for evaluating the clause and browsing the
available data files.
"""

from typing import Any, Dict, List, Optional
import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from config import Config
from models.clause import ClauseParameters, EvaluationRequest, ValidationError
from services.data_files import DataFileError, list_data_files
from services.penalty import evaluate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/penalty", tags=["Late Delivery Penalty"])


# Request/Response Models

class EvaluatePenaltyRequest(BaseModel):
    """Request body for POST /api/penalty/evaluate"""
    template: Dict[str, Any] = Field(..., description="Template data (clause parameters)")
    request: Dict[str, Any] = Field(..., description="Request data (goods value and delay)")


class DataFileResponse(BaseModel):
    """A data file and its raw content"""
    name: str
    content: Optional[Any] = None
    error: Optional[str] = None


class DataFilesResponse(BaseModel):
    """Response model for GET /api/penalty/data-files"""
    templates: List[DataFileResponse]
    requests: List[DataFileResponse]


# Endpoints

@router.post("/evaluate")
async def evaluate_penalty(body: EvaluatePenaltyRequest) -> Dict[str, Any]:
    """
    Evaluate the late delivery and penalty clause.

    **Example Request:**
    ```json
    {
      "template": {
        "forceMajeure": false,
        "penaltyDuration": {"amount": 2, "unit": "days"},
        "penaltyPercentage": 10.5,
        "capPercentage": 55,
        "termination": {"amount": 15, "unit": "days"},
        "fractionalPart": "days"
      },
      "request": {"goodsValue": 100, "delay": {"amount": 4, "unit": "days"}}
    }
    ```

    **Example Response:**
    ```json
    {
      "penaltyAmount": "21.0",
      "buyerMayTerminate": false,
      "appliedPercent": "21.0",
      "periods": 2,
      ...
    }
    ```
    """
    try:
        params = ClauseParameters.from_payload(body.template, source="template")
        request = EvaluationRequest.from_payload(body.request, source="request")
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "errors": e.errors, "source": e.source},
        )

    try:
        decision = evaluate(params, request)
        return decision.to_response()
    except Exception as e:
        logger.error(f"Penalty evaluation failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Penalty evaluation failed: {str(e)}"
        )


@router.get("/data-files", response_model=DataFilesResponse)
async def get_data_files():
    """
    List template and request data files from the configured data directory.

    Files that cannot be parsed are listed with an error instead of content.
    """
    config = Config.from_env()
    try:
        listing = list_data_files(config.data_dir)
    except DataFileError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return DataFilesResponse(
        templates=[
            DataFileResponse(name=e.name, content=e.content, error=e.error)
            for e in listing.templates
        ],
        requests=[
            DataFileResponse(name=e.name, content=e.content, error=e.error)
            for e in listing.requests
        ],
    )
