import logging

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.analysis import AnalyzeRequest, AnalyzeResponse
from scoring.weights import Duration, RiskTolerance
from services.analysis_service import NoCountriesResolvedError, run_analysis

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analyze"])

limiter = Limiter(key_func=get_remote_address)

_RISK_LEVELS = [r.value for r in RiskTolerance]
_DURATIONS = [d.value for d in Duration]


def validate_request(req: AnalyzeRequest) -> list[str]:
    """Boundary checks. The scoring engine itself tolerates unknown values."""
    errors = []
    if not req.countries:
        errors.append("At least 1 country is required")
    elif any(not c.strip() for c in req.countries):
        errors.append("All country entries must be non-empty strings")

    if req.risk_tolerance.strip().lower() not in _RISK_LEVELS:
        errors.append(f"risk_tolerance must be one of: {', '.join(_RISK_LEVELS)}")
    if req.duration.strip().lower() not in _DURATIONS:
        errors.append(f"duration must be one of: {', '.join(_DURATIONS)}")
    return errors


@router.post("/analyze", response_model=AnalyzeResponse)
@limiter.limit(settings.analyze_rate_limit)
async def analyze(request: Request, req: AnalyzeRequest):
    errors = validate_request(req)
    if errors:
        raise HTTPException(status_code=400, detail={"success": False, "errors": errors})

    try:
        return await run_analysis(req.countries, req.risk_tolerance, req.duration)
    except NoCountriesResolvedError as e:
        raise HTTPException(
            status_code=404,
            detail={
                "success": False,
                "error": str(e),
                "failed_countries": [f.model_dump() for f in e.failed],
            },
        )
    except Exception as e:
        logger.exception("Analysis failed")
        raise HTTPException(status_code=500, detail=str(e))
