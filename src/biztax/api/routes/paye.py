"""PAYE calculator and payroll worksheet endpoints."""

from fastapi import APIRouter, HTTPException, Response, status

from biztax.api.dependencies import State
from biztax.api.schemas import ErrorResponse, PayeRequest, PayeResponse, PayrollResponse, money
from biztax.calculators.paye import compute_paye
from biztax.calculators.types import Employee
from biztax.services.payroll_sheet import PayrollSheet

router = APIRouter(tags=["paye"])


def _payroll_response(sheet: PayrollSheet) -> PayrollResponse:
    entries = sheet.entries()
    return PayrollResponse(
        items=[PayeResponse.from_result(result, employee.name) for employee, result in entries],
        total=len(entries),
        total_monthly_remittance=money(sheet.total_monthly_remittance),
        total_annual_tax=money(sheet.total_annual_tax),
    )


@router.post(
    "/paye",
    response_model=PayeResponse,
    responses={422: {"model": ErrorResponse}},
)
async def calculate_paye(payload: PayeRequest) -> PayeResponse:
    """One-off PAYE computation; nothing is stored."""
    kwargs = {"id": payload.employee_id} if payload.employee_id else {}
    employee = Employee(name=payload.name or "", annual_gross_salary=payload.annual_gross_salary, **kwargs)
    return PayeResponse.from_result(compute_paye(employee), payload.name)


@router.get("/payroll", response_model=PayrollResponse)
async def get_payroll(state: State) -> PayrollResponse:
    return _payroll_response(state.payroll)


@router.post(
    "/payroll",
    response_model=PayrollResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
async def add_payroll_employee(state: State, payload: PayeRequest) -> PayrollResponse:
    state.payroll.add(payload.annual_gross_salary, payload.name)
    return _payroll_response(state.payroll)


@router.delete(
    "/payroll/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def remove_payroll_employee(state: State, employee_id: str) -> Response:
    if not state.payroll.remove(employee_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee {employee_id} not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
