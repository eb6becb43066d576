from datetime import date
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Query, Request, Response, status
from fastapi.responses import JSONResponse
from auth import verify_token
from dependencies import get_archive_store, get_booking_store, get_contractor_store
from errors import (
    ArchiveNotFoundError,
    BookingNotFoundError,
    ContractorNotFoundError,
    InvalidRequestError,
    PersistenceError,
)
from models.booking.availability_payload import AvailabilityPayload
from models.booking.batch_reservation_payload import BatchReservationPayload
from models.booking.booking_update_payload import BookingUpdatePayload
from models.booking.export_payload import ExportPayload
from models.contractor.contractor_payload import ContractorColorPayload, ContractorPayload
from models.facility.facility_profiles import FACILITY_PROFILES
from services.archive_service import ArchiveService
from services.booking_service import BookingService
from services.contractor_service import ContractorService
from services.reorganization_service import ReorganizationService
from services.schedule_service import ScheduleService
from stores.booking_store import ArchiveStore, BookingStore, ContractorStore

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


# Load environment variables
load_dotenv()

# Initialize FastAPI app
app = FastAPI()


@app.exception_handler(InvalidRequestError)
async def invalid_request_handler(request: Request, exc: InvalidRequestError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc)}
    )


@app.exception_handler(BookingNotFoundError)
@app.exception_handler(ArchiveNotFoundError)
@app.exception_handler(ContractorNotFoundError)
async def not_found_handler(request: Request, exc: LookupError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)}
    )


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)}
    )


def _xlsx_response(file_name: str, content: bytes) -> Response:
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{file_name}"'}
    )


@app.get("/")
async def root():
    return {
        "message": (
            "Welcome to the facility booking API! "
            "Swagger UI documentation is available at /docs"
        )
    }


@app.get("/facilities")
def list_facilities(_: str = Depends(verify_token)):
    return list(FACILITY_PROFILES.values())


@app.get("/facilities/{facility_type}/bookings")
def list_bookings(
    facility_type: str,
    booking_date: date | None = Query(None, alias="date"),
    booking_store: BookingStore = Depends(get_booking_store),
    _: str = Depends(verify_token)
):
    return BookingService.list_bookings(facility_type, booking_store, booking_date)


@app.post("/facilities/{facility_type}/bookings/batch")
def submit_batch(
    facility_type: str,
    payload: BatchReservationPayload,
    booking_store: BookingStore = Depends(get_booking_store),
    _: str = Depends(verify_token)
):
    result = BookingService.submit_batch(facility_type, payload, booking_store)
    return result


@app.post("/facilities/{facility_type}/availability")
def check_availability(
    facility_type: str,
    payload: AvailabilityPayload,
    booking_store: BookingStore = Depends(get_booking_store),
    _: str = Depends(verify_token)
):
    result = BookingService.check_availability(facility_type, payload, booking_store)
    return result


@app.patch("/bookings/{booking_id}")
def update_booking(
    booking_id: str,
    payload: BookingUpdatePayload,
    booking_store: BookingStore = Depends(get_booking_store),
    _: str = Depends(verify_token)
):
    return BookingService.update_booking(booking_id, payload, booking_store)


@app.delete("/bookings/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_booking(
    booking_id: str,
    booking_store: BookingStore = Depends(get_booking_store),
    _: str = Depends(verify_token)
):
    BookingService.delete_booking(booking_id, booking_store)


@app.delete("/facilities/{facility_type}/bookings")
def delete_all_bookings(
    facility_type: str,
    booking_store: BookingStore = Depends(get_booking_store),
    _: str = Depends(verify_token)
):
    deleted_count = BookingService.delete_all_bookings(facility_type, booking_store)
    return {"deleted_count": deleted_count}


@app.post("/facilities/{facility_type}/reorganize")
def reorganize(
    facility_type: str,
    booking_store: BookingStore = Depends(get_booking_store),
    _: str = Depends(verify_token)
):
    result = ReorganizationService.reorganize(facility_type, booking_store)
    return result


@app.get("/facilities/{facility_type}/week")
def render_week(
    facility_type: str,
    week_start: date,
    booking_store: BookingStore = Depends(get_booking_store),
    _: str = Depends(verify_token)
):
    return ScheduleService.render_week(facility_type, week_start, booking_store)


@app.post("/facilities/{facility_type}/week/export")
def export_week(
    facility_type: str,
    payload: ExportPayload,
    booking_store: BookingStore = Depends(get_booking_store),
    contractor_store: ContractorStore = Depends(get_contractor_store),
    _: str = Depends(verify_token)
):
    file_name, content = ScheduleService.export_week(
        facility_type,
        payload.week_start,
        booking_store,
        contractor_store,
        color_map=payload.color_map,
        anonymized=payload.anonymized
    )
    return _xlsx_response(file_name, content)


@app.get("/archives")
def list_archives(
    facility_type: str | None = None,
    archive_store: ArchiveStore = Depends(get_archive_store),
    _: str = Depends(verify_token)
):
    return ArchiveService.list_archives(archive_store, facility_type)


@app.post("/facilities/{facility_type}/archives")
def save_archive(
    facility_type: str,
    week_start: date,
    booking_store: BookingStore = Depends(get_booking_store),
    archive_store: ArchiveStore = Depends(get_archive_store),
    _: str = Depends(verify_token)
):
    return ArchiveService.save_week(facility_type, week_start, booking_store, archive_store)


@app.delete("/archives/{archive_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_archive(
    archive_id: str,
    archive_store: ArchiveStore = Depends(get_archive_store),
    _: str = Depends(verify_token)
):
    ArchiveService.delete_archive(archive_id, archive_store)


@app.get("/archives/export")
def export_archives(
    archive_store: ArchiveStore = Depends(get_archive_store),
    _: str = Depends(verify_token)
):
    content = ArchiveService.export_archives(archive_store)
    return _xlsx_response(f"Archive_{date.today().isoformat()}.xlsx", content)


@app.get("/archives/{archive_id}/export")
def export_archived_week(
    archive_id: str,
    anonymized: bool = False,
    archive_store: ArchiveStore = Depends(get_archive_store),
    contractor_store: ContractorStore = Depends(get_contractor_store),
    _: str = Depends(verify_token)
):
    file_name, content = ArchiveService.export_archived_week(
        archive_id, archive_store, contractor_store, anonymized=anonymized)
    return _xlsx_response(file_name, content)


@app.get("/contractors")
def list_contractors(
    contractor_store: ContractorStore = Depends(get_contractor_store),
    _: str = Depends(verify_token)
):
    return ContractorService.list_contractors(contractor_store)


@app.post("/contractors", status_code=status.HTTP_201_CREATED)
def create_contractor(
    payload: ContractorPayload,
    contractor_store: ContractorStore = Depends(get_contractor_store),
    _: str = Depends(verify_token)
):
    return ContractorService.create_contractor(payload, contractor_store)


@app.patch("/contractors/{contractor_id}")
def update_contractor_color(
    contractor_id: str,
    payload: ContractorColorPayload,
    contractor_store: ContractorStore = Depends(get_contractor_store),
    _: str = Depends(verify_token)
):
    return ContractorService.update_color(contractor_id, payload.color, contractor_store)


@app.delete("/contractors/{contractor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contractor(
    contractor_id: str,
    contractor_store: ContractorStore = Depends(get_contractor_store),
    _: str = Depends(verify_token)
):
    ContractorService.delete_contractor(contractor_id, contractor_store)
