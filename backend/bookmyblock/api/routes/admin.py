"""
Admin endpoints: theater application review, owner theater lookup and
seat layout storage.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from bookmyblock.api.deps import get_seat_layout_service, get_theater_store
from bookmyblock.models.theater import ApplicationStatus
from bookmyblock.schemas.common import ApiResponse
from bookmyblock.schemas.seat_layout import SeatLayoutSaved, TheaterSeatLayout
from bookmyblock.schemas.theater import (
    ApplicationApprove, ApplicationReject, ApplicationStats, OwnerTheaterSummary,
    TheaterApplicationCreate, TheaterApplicationResponse,
)
from bookmyblock.services.seat_layout_service import SeatLayoutService
from bookmyblock.services.theater_application_service import (
    approve_application, get_application, get_dashboard_stats, get_owner_theaters,
    list_applications, reject_application, submit_application,
)
from bookmyblock.stores.theater_store import TheaterApplicationStore

router = APIRouter(prefix="/admin", tags=["Admin"])


def _applications(applications) -> list[TheaterApplicationResponse]:
    return [TheaterApplicationResponse.model_validate(a) for a in applications]


@router.get("/theater-requests", response_model=ApiResponse[list[TheaterApplicationResponse]])
async def list_theater_requests_endpoint(
    status_filter: Optional[ApplicationStatus] = Query(None, alias="status"),
    store: TheaterApplicationStore = Depends(get_theater_store),
):
    """Applications awaiting review; pass ?status= to list approved or rejected ones."""
    applications = _applications(list_applications(store, status_filter))
    return ApiResponse(data=applications, total=len(applications))


@router.post(
    "/theater-requests",
    response_model=ApiResponse[TheaterApplicationResponse],
    status_code=status.HTTP_201_CREATED,
)
async def submit_theater_request_endpoint(
    application_data: TheaterApplicationCreate,
    store: TheaterApplicationStore = Depends(get_theater_store),
):
    application = submit_application(store, application_data)
    return ApiResponse(
        message="Theater application submitted successfully",
        data=TheaterApplicationResponse.model_validate(application),
    )


@router.get("/theater-requests/{application_id}", response_model=ApiResponse[TheaterApplicationResponse])
async def get_theater_request_endpoint(
    application_id: str,
    store: TheaterApplicationStore = Depends(get_theater_store),
):
    return ApiResponse(data=TheaterApplicationResponse.model_validate(get_application(store, application_id)))


@router.post("/theater-requests/{application_id}/accept", response_model=ApiResponse[TheaterApplicationResponse])
async def accept_theater_request_endpoint(
    application_id: str,
    decision: Optional[ApplicationApprove] = None,
    store: TheaterApplicationStore = Depends(get_theater_store),
):
    application = approve_application(store, application_id, decision.admin_notes if decision else None)
    return ApiResponse(
        message="Theater application approved successfully",
        data=TheaterApplicationResponse.model_validate(application),
    )


@router.post("/theater-requests/{application_id}/reject", response_model=ApiResponse[TheaterApplicationResponse])
async def reject_theater_request_endpoint(
    application_id: str,
    decision: ApplicationReject,
    store: TheaterApplicationStore = Depends(get_theater_store),
):
    application = reject_application(store, application_id, decision.rejection_reason, decision.admin_notes)
    return ApiResponse(
        message="Theater application rejected successfully",
        data=TheaterApplicationResponse.model_validate(application),
    )


@router.get("/approved-theaters", response_model=ApiResponse[list[TheaterApplicationResponse]])
async def approved_theaters_endpoint(store: TheaterApplicationStore = Depends(get_theater_store)):
    applications = _applications(list_applications(store, ApplicationStatus.APPROVED))
    return ApiResponse(data=applications, total=len(applications))


@router.get("/dashboard/stats", response_model=ApiResponse[ApplicationStats])
async def dashboard_stats_endpoint(store: TheaterApplicationStore = Depends(get_theater_store)):
    return ApiResponse(data=get_dashboard_stats(store))


@router.get("/theaters/owner/{owner_email}", response_model=ApiResponse[list[OwnerTheaterSummary]])
async def owner_theaters_endpoint(
    owner_email: str,
    store: TheaterApplicationStore = Depends(get_theater_store),
):
    theaters = get_owner_theaters(store, owner_email)
    return ApiResponse(data=theaters, total=len(theaters))


@router.post("/seat-layouts", response_model=ApiResponse[SeatLayoutSaved])
async def save_seat_layout_endpoint(
    layout: TheaterSeatLayout,
    service: SeatLayoutService = Depends(get_seat_layout_service),
):
    saved = await service.save_seat_layout(layout)
    return ApiResponse(
        message="Seat layout saved successfully",
        data=SeatLayoutSaved(
            theater_id=saved.theater_id,
            ipfs_hash=saved.ipfs_hash,
            last_updated=saved.last_updated,
        ),
    )


@router.get("/seat-layouts/{theater_id}", response_model=ApiResponse[TheaterSeatLayout])
async def get_seat_layout_endpoint(
    theater_id: str,
    service: SeatLayoutService = Depends(get_seat_layout_service),
):
    layout = await service.get_seat_layout(theater_id)
    if layout is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Seat layout not found",
        )
    return ApiResponse(data=layout)
