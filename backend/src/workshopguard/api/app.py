"""FastAPI application exposing the workshop guards."""

import logging
from contextlib import asynccontextmanager
from typing import Any, Literal

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from workshopguard.api.responses import create_error_response, create_result_response
from workshopguard.capacity import (
    CapacityLevel,
    check_capacity,
    check_technician_capacity,
    utilization,
)
from workshopguard.config import WorkshopConfig
from workshopguard.validation import (
    FORM_VALIDATORS,
    Severity,
    ValidationError,
    ValidationResult,
    validate_form,
)
from workshopguard.workflow import (
    INITIAL_STATUS,
    TRANSITION_TABLE,
    check_transition,
    is_terminal,
    job_status_for,
)

logger = logging.getLogger(__name__)

config: WorkshopConfig | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load configuration on startup."""
    global config

    config = WorkshopConfig.from_env()
    logger.info(
        "Workshop defaults: %d concurrent jobs, %d jobs per technician",
        config.max_concurrent_jobs,
        config.max_jobs_per_technician,
    )

    yield


app = FastAPI(title="Workshop Guard API", lifespan=lifespan)

# CORS for the admin frontend dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_config() -> WorkshopConfig:
    return config or WorkshopConfig()


@app.get("/api/health")
async def health() -> dict[str, Any]:
    return {"status": "ok"}


# --- Form Endpoints ---


class FormRequest(BaseModel):
    """Request body for form validation."""
    data: dict[str, Any]


@app.get("/api/forms")
async def list_forms() -> dict[str, Any]:
    """List the forms that can be validated."""
    return {"forms": sorted(FORM_VALIDATORS)}


@app.post("/api/forms/{form}/validate")
async def validate_form_endpoint(form: str, request: FormRequest):
    """Validate a form record, collecting every violation."""
    if form not in FORM_VALIDATORS:
        raise HTTPException(404, f"Form '{form}' not found")

    errors = validate_form(form, request.data)
    if errors:
        logger.debug("Form '%s' rejected with %d violation(s)", form, len(errors))

    response = create_error_response(errors)
    return JSONResponse(status_code=response.status_code, content=response.to_dict())


# --- Transition Endpoints ---


class TransitionRequest(BaseModel):
    """Request body for a proposed status change."""
    current: str
    proposed: str


@app.get("/api/transitions")
async def list_transitions() -> dict[str, Any]:
    """Return the full transition table."""
    return {
        "initial": INITIAL_STATUS.value,
        "terminal": [s.value for s in TRANSITION_TABLE if is_terminal(s)],
        "transitions": {
            status.value: [s.value for s in allowed]
            for status, allowed in TRANSITION_TABLE.items()
        },
    }


@app.post("/api/transitions/check")
async def check_transition_endpoint(request: TransitionRequest):
    """Check a proposed status change before it is written."""
    violation = check_transition(request.current, request.proposed)
    if violation:
        logger.info(
            "Rejected transition %s -> %s", request.current, request.proposed
        )
        response = create_error_response([violation], status_code=409)
    else:
        job_status = job_status_for(request.proposed)
        response = create_result_response(
            ValidationResult(valid=True),
            data={
                "current": request.current,
                "proposed": request.proposed,
                "job_status": job_status.value if job_status else None,
            },
        )

    return JSONResponse(status_code=response.status_code, content=response.to_dict())


# --- Capacity Endpoints ---


class CapacityRequest(BaseModel):
    """Request body for a capacity reading.

    `scope` selects the workshop-wide limit or a single technician's. `max`
    falls back to the configured limit for that scope when omitted.
    """
    current: int = Field(ge=0)
    max: int | None = Field(default=None, gt=0)
    scope: Literal["workshop", "technician"] = "workshop"


@app.post("/api/capacity")
async def capacity_endpoint(request: CapacityRequest) -> dict[str, Any]:
    """Classify a capacity reading.

    Always 200: an exceeded reading is reported under `errors`, an
    approaching one under `warnings`.
    """
    settings = _get_config()
    if request.scope == "technician":
        reading = settings.technician_reading(request.current, request.max)
        violation = check_technician_capacity(reading)
    else:
        reading = settings.workshop_reading(request.current, request.max)
        violation = check_capacity(reading)

    result = ValidationResult(valid=True)
    if violation:
        error = ValidationError(field="capacity", message=violation.message)
        if violation.severity == Severity.ERROR:
            logger.warning(
                "%s at capacity (%d/%d)",
                request.scope.capitalize(),
                reading.current,
                reading.max,
            )
            result = ValidationResult(valid=False, errors=[error])
        else:
            result = ValidationResult(valid=True, warnings=[error])

    response = create_result_response(
        result,
        data={
            "scope": request.scope,
            "level": violation.level.value if violation else CapacityLevel.NORMAL.value,
            "violation": violation.to_dict() if violation else None,
            "utilization": utilization(reading).to_dict(),
        },
    )
    return response.to_dict()
