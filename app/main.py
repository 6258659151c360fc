from typing import Optional, List
from fastapi import FastAPI, Depends, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager
from app.config import Settings, get_settings
from app.exceptions import ApiException, InvalidParameter, MissingParameter
from app.logging_config import setup_logging, get_logger
from app.models import MedicationRead, PatientRead
from app.store import Store, get_store

settings = get_settings()
setup_logging(settings.log_level, settings.log_dir)
logger = get_logger(__name__)

# Names that once stood in for a missing parameter
MEDICATION_NAME_SENTINEL = "EMPTYNAME"
PATIENT_NAME_SENTINEL = "empty"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
    get_store().reset()
    logger.info(f"Store ready, entity URIs under {settings.base_url}")
    yield
    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)


@app.exception_handler(ApiException)
async def api_exception_handler(request: Request, exc: ApiException):
    """
    Answer with the exception's status code and no body.
    """
    logger.warning(f"{request.method} {request.url.path} rejected ({exc.error_code}): {exc.message}")
    return Response(status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """
    Unparseable parameters are bad requests like any other.
    """
    logger.warning(f"{request.method} {request.url.path} rejected (invalid_request): {exc.errors()}")
    return Response(status_code=400)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
    return Response(status_code=500)


def require_name(value: Optional[str], field: str, sentinel: str, settings: Settings) -> str:
    # a blank value counts as absent
    if value is None or value == "":
        raise MissingParameter(field)
    if settings.reject_sentinel_values and value == sentinel:
        raise InvalidParameter(field, f"Reserved value for {field}: {value!r}")
    return value


def require_int(value: Optional[int], field: str) -> int:
    if value is None:
        raise MissingParameter(field)
    return value


# Medications
@app.get("/api/v1/medications", response_model=MedicationRead)
async def get_medication(
    medication_id: Optional[int] = Query(default=None, alias="id"),
    store: Store = Depends(get_store),
):
    """
    Look up a medication by id.
    """
    medication_id = require_int(medication_id, "id")
    with store.lock:
        return store.get_medication(medication_id).to_json()


@app.post("/api/v1/medications", response_model=MedicationRead)
async def create_medication(
    name: Optional[str] = None,
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    Add a medication under the next medication id.
    """
    name = require_name(name, "name", MEDICATION_NAME_SENTINEL, settings)
    with store.lock:
        return store.create_medication(name).to_json()


@app.delete("/api/v1/medications")
async def delete_medication(
    medication_id: Optional[int] = Query(default=None, alias="id"),
    store: Store = Depends(get_store),
):
    """
    Remove a medication from the store. Patients that take it keep it on
    their lists.
    """
    medication_id = require_int(medication_id, "id")
    store.delete_medication(medication_id)
    return Response(status_code=200)


# Patients
@app.post("/api/v1/patients", response_model=PatientRead)
async def create_patient(
    first_name: Optional[str] = Query(default=None, alias="firstname"),
    last_name: Optional[str] = Query(default=None, alias="lastname"),
    age: Optional[int] = None,
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    Add a patient with no medications under the next patient id.
    """
    first_name = require_name(first_name, "firstname", PATIENT_NAME_SENTINEL, settings)
    last_name = require_name(last_name, "lastname", PATIENT_NAME_SENTINEL, settings)
    age = require_int(age, "age")
    with store.lock:
        return store.create_patient(first_name, last_name, age).to_json()


@app.get("/api/v1/patients", response_model=PatientRead)
async def get_patient(
    patient_id: Optional[int] = Query(default=None, alias="id"),
    store: Store = Depends(get_store),
):
    patient_id = require_int(patient_id, "id")
    with store.lock:
        return store.get_patient(patient_id).to_json()


@app.post("/api/v1/patients/{patient_id}/medications", response_model=List[MedicationRead])
async def add_patient_medication(
    patient_id: int,
    medication_id: Optional[int] = Query(default=None, alias="id"),
    store: Store = Depends(get_store),
):
    """
    Put a medication on a patient's list and return the whole list.
    """
    medication_id = require_int(medication_id, "id")
    with store.lock:
        medications = store.add_patient_medication(patient_id, medication_id)
        return [medication.to_json() for medication in medications]


@app.delete("/api/v1/patients/{patient_id}/medications/{medication_id}")
async def remove_patient_medication(
    patient_id: int,
    medication_id: int,
    store: Store = Depends(get_store),
):
    store.remove_patient_medication(patient_id, medication_id)
    return Response(status_code=200)
