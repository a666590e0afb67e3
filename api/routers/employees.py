"""Employee CRUD endpoints."""
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status
from fastapi.responses import JSONResponse

from api.database import EmployeeStore, get_store
from api.models import Employee
from api.validation import ErrorKind, merge_partial, validate_employee
from logger_config import setup_logger

router = APIRouter()
logger = setup_logger(__name__)


def _not_found(employee_id: int) -> Response:
    logger.info("%s: employee %d", ErrorKind.NOT_FOUND.value, employee_id)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def _bad_request(errors: dict[str, str]) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


@router.get("", response_model=list[Employee])
def list_employees(store: EmployeeStore = Depends(get_store)):
    return store.find_all()


@router.get("/{employee_id}", response_model=Employee)
def get_employee(employee_id: int, store: EmployeeStore = Depends(get_store)):
    employee = store.find_by_id(employee_id)
    if employee is None:
        return _not_found(employee_id)
    return employee


@router.post("", response_model=Employee)
def create_employee(body: Employee, store: EmployeeStore = Depends(get_store)):
    outcome = validate_employee(body)
    if not outcome.ok:
        logger.info("Validation error in POST: %s", outcome.error_map())
        return _bad_request(outcome.error_map())

    saved = store.save(body.model_copy(update={"id": None}))
    logger.info("Created employee %d", saved.id)
    return saved


@router.put("/{employee_id}", response_model=Employee)
def replace_employee(employee_id: int, body: Employee, store: EmployeeStore = Depends(get_store)):
    if store.find_by_id(employee_id) is None:
        return _not_found(employee_id)

    outcome = validate_employee(body)
    if not outcome.ok:
        logger.info("Validation error in PUT %d: %s", employee_id, outcome.error_map())
        return _bad_request(outcome.error_map())

    # The id in the URL wins over any id in the body
    saved = store.save(body.model_copy(update={"id": employee_id}))
    logger.info("Replaced employee %d", employee_id)
    return saved


@router.patch("/{employee_id}", response_model=Employee)
def patch_employee(
    employee_id: int,
    updates: dict[str, Any] = Body(...),
    store: EmployeeStore = Depends(get_store),
):
    existing = store.find_by_id(employee_id)
    if existing is None:
        return _not_found(employee_id)

    result = merge_partial(existing, updates)
    if not result.ok:
        logger.info("Validation error in PATCH %d: %s", employee_id, result.error_map())
        return _bad_request(result.error_map())

    saved = store.save(result.employee)
    logger.info("Patched employee %d (%s)", employee_id, ", ".join(sorted(updates)) or "no fields")
    return saved


@router.delete("/{employee_id}")
def delete_employee(employee_id: int, store: EmployeeStore = Depends(get_store)):
    if store.find_by_id(employee_id) is None:
        return _not_found(employee_id)

    store.delete_by_id(employee_id)
    logger.info("Deleted employee %d", employee_id)
    return Response(status_code=status.HTTP_200_OK)
