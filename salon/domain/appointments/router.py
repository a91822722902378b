"""Appointment router - FastAPI endpoints for booking and availability"""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from ...auth import (
    AuthContext,
    get_current_identity,
    get_optional_identity,
    require_admin,
    require_stylist_or_admin,
)
from ...database import get_db
from ...shared.validators import parse_iso_date
from .schemas import (
    AppointmentCreate,
    AppointmentResponse,
    AppointmentUpdate,
    AvailabilityResponse,
)
from .service import AppointmentService

router = APIRouter(prefix="/api", tags=["Appointments"])


def get_appointment_service(db: Session = Depends(get_db)) -> AppointmentService:
    """Dependency injection for AppointmentService"""
    return AppointmentService(db)


@router.get("/availability/{stylist_id}/{day}", response_model=AvailabilityResponse)
async def get_availability(
    stylist_id: str,
    day: str,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Free and booked time slots for a stylist on a YYYY-MM-DD date"""
    try:
        parsed = parse_iso_date(day)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return service.get_availability(stylist_id, parsed)


@router.get("/appointments", response_model=list[AppointmentResponse])
async def get_appointments(
    _: AuthContext = Depends(require_admin),
    service: AppointmentService = Depends(get_appointment_service),
):
    return service.get_appointments()


@router.get("/appointments/my", response_model=list[AppointmentResponse])
async def get_my_appointments(
    ctx: AuthContext = Depends(get_current_identity),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Appointments booked by the current user"""
    return service.get_client_appointments(ctx)


@router.get("/appointments/stylist", response_model=list[AppointmentResponse])
async def get_stylist_appointments(
    ctx: AuthContext = Depends(require_stylist_or_admin),
    service: AppointmentService = Depends(get_appointment_service),
):
    """Appointments of the team member linked to the current user"""
    return service.get_stylist_appointments(ctx)


@router.post("/appointments", response_model=AppointmentResponse, status_code=201)
async def create_appointment(
    data: AppointmentCreate,
    ctx: AuthContext = Depends(get_optional_identity),
    service: AppointmentService = Depends(get_appointment_service),
):
    return service.create_appointment(data, ctx)


@router.patch("/appointments/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: str,
    data: AppointmentUpdate,
    ctx: AuthContext = Depends(require_stylist_or_admin),
    service: AppointmentService = Depends(get_appointment_service),
):
    return service.update_appointment(appointment_id, data, ctx)


@router.delete("/appointments/{appointment_id}", status_code=204)
async def delete_appointment(
    appointment_id: str,
    ctx: AuthContext = Depends(require_stylist_or_admin),
    service: AppointmentService = Depends(get_appointment_service),
):
    service.delete_appointment(appointment_id, ctx)
    return Response(status_code=204)
