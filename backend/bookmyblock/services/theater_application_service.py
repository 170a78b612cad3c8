"""
Theater application workflow: owners submit, admins approve or reject.
Approved applications feed the user theater catalogue.
"""

from typing import Optional

from fastapi import HTTPException, status

from bookmyblock.models.event import utcnow
from bookmyblock.models.theater import AdminAction, ApplicationStatus, TheaterApplication
from bookmyblock.schemas.theater import (
    ApplicationStats, OwnerTheaterSummary, TheaterApplicationCreate, TheaterApplicationResponse,
)
from bookmyblock.stores.theater_store import TheaterApplicationStore
from bookmyblock.utils.phone import format_for_submission, get_validation_error
from bookmyblock.core.metrics import record_application_decision
from bookmyblock.core.logging import get_logger

logger = get_logger(__name__)

RECENT_APPLICATIONS_LIMIT = 5


def submit_application(store: TheaterApplicationStore, data: TheaterApplicationCreate) -> TheaterApplication:
    phone_error = get_validation_error(data.owner_phone)
    if phone_error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=phone_error)

    application = TheaterApplication(
        id=store.next_id(),
        theater_name=data.theater_name,
        owner_name=data.owner_name,
        owner_email=str(data.owner_email),
        owner_phone=format_for_submission(data.owner_phone),
        address=data.address,
        city=data.city,
        state=data.state,
        pincode=data.pincode,
        number_of_screens=data.number_of_screens,
        total_seats=data.total_seats,
        pdf_hash=data.pdf_hash,
        ipfs_urls=dict(data.ipfs_urls),
    )
    store.add(application)
    record_application_decision("submitted")

    logger.info("theater_application_submitted", application_id=application.id, theater=application.theater_name)
    return application


def list_applications(
    store: TheaterApplicationStore, status_filter: Optional[ApplicationStatus] = None
) -> list[TheaterApplication]:
    """Applications with the given status; pending when no status is given."""
    return store.with_status(status_filter or ApplicationStatus.PENDING)


def get_application(store: TheaterApplicationStore, application_id: str) -> TheaterApplication:
    application = store.get(application_id)
    if not application:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Theater application not found",
        )
    return application


def _decide(application: TheaterApplication, action: AdminAction) -> TheaterApplication:
    application.status = action.action
    application.admin_action = action
    application.updated_at = utcnow()
    return application


def approve_application(
    store: TheaterApplicationStore, application_id: str, admin_notes: Optional[str] = None
) -> TheaterApplication:
    application = get_application(store, application_id)
    _decide(application, AdminAction(
        action=ApplicationStatus.APPROVED,
        admin_notes=admin_notes or "Application approved",
    ))
    record_application_decision("approved")

    logger.info("theater_application_approved", application_id=application_id)
    return application


def reject_application(
    store: TheaterApplicationStore,
    application_id: str,
    rejection_reason: Optional[str],
    admin_notes: Optional[str] = None,
) -> TheaterApplication:
    if not rejection_reason:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Rejection reason is required",
        )

    application = get_application(store, application_id)
    _decide(application, AdminAction(
        action=ApplicationStatus.REJECTED,
        rejection_reason=rejection_reason,
        admin_notes=admin_notes or "",
    ))
    record_application_decision("rejected")

    logger.info("theater_application_rejected", application_id=application_id, reason=rejection_reason)
    return application


def get_owner_theaters(store: TheaterApplicationStore, owner_email: str) -> list[OwnerTheaterSummary]:
    """Approved theaters of one owner, as listed in the seat layout editor."""
    return [
        OwnerTheaterSummary(
            id=app.id,
            name=app.theater_name,
            screens=app.number_of_screens or 1,
            total_seats=app.total_seats or 100,
            location=f"{app.city}, {app.state}",
            owner_email=app.owner_email,
        )
        for app in store.with_status(ApplicationStatus.APPROVED)
        if app.owner_email == owner_email
    ]


def get_dashboard_stats(store: TheaterApplicationStore) -> ApplicationStats:
    applications = store.all()
    recent = sorted(applications, key=lambda a: a.submitted_at, reverse=True)[:RECENT_APPLICATIONS_LIMIT]

    return ApplicationStats(
        total_applications=len(applications),
        pending_applications=len(store.with_status(ApplicationStatus.PENDING)),
        approved_applications=len(store.with_status(ApplicationStatus.APPROVED)),
        rejected_applications=len(store.with_status(ApplicationStatus.REJECTED)),
        recent_applications=[TheaterApplicationResponse.model_validate(a) for a in recent],
    )
