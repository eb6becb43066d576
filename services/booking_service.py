from datetime import date, datetime
from pydantic import ValidationError
from config import get_settings
from errors import InvalidRequestError
from models.booking.availability_payload import AvailabilityPayload, AvailabilityResult
from models.booking.batch_reservation_payload import BatchReservationPayload
from models.booking.batch_reservation_result import BatchReservationResult
from models.booking.booking import Booking
from models.booking.booking_update_payload import BookingUpdatePayload
from models.facility.facility_profiles import get_facility_profile
from stores.booking_store import BookingStore
from utils.availability import get_free_sections, resolve_sections
from utils.batch import build_batch, expand_weekday_patterns


class BookingService:

    @staticmethod
    def submit_batch(
        facility_type: str,
        payload: BatchReservationPayload,
        booking_store: BookingStore
    ) -> BatchReservationResult:
        start_time = datetime.now()
        settings = get_settings()
        profile = get_facility_profile(facility_type)

        requests = expand_weekday_patterns(
            date_from=payload.date_from,
            date_to=payload.date_to,
            weekday_patterns=payload.weekday_patterns,
            facility_type=profile.id,
            occupant_label=payload.occupant_label,
            category=payload.category,
            is_closed=payload.is_closed,
            closed_reason=payload.closed_reason
        )

        # Only the requested dates matter for allocation
        requested_dates = {request.date for request in requests}
        existing_bookings = [
            booking for booking in booking_store.list(profile.id)
            if booking.date in requested_dates
        ]

        outcome = build_batch(
            requests=requests,
            existing_bookings=existing_bookings,
            profile=profile,
            incremental=settings.batch_allocation_mode == "incremental"
        )

        # 1. Any failing request rejects the whole batch
        if outcome.conflicts:
            end_time = datetime.now()
            duration_ms = round(
                (end_time - start_time).total_seconds() * 1000, 2)
            return BatchReservationResult(
                result="rejected",
                duration_ms=duration_ms,
                bookings=[],
                conflicts=outcome.conflicts[:settings.max_conflict_messages],
                conflict_count=len(outcome.conflicts)
            )

        # 2. Else -> commit every booking in one transaction
        created = booking_store.create_many(outcome.bookings)

        end_time = datetime.now()
        duration_ms = round(
            (end_time - start_time).total_seconds() * 1000, 2)

        print(f"Created {len(created)} bookings for {profile.id}")

        return BatchReservationResult(
            result="accepted",
            duration_ms=duration_ms,
            bookings=created,
            conflicts=[],
            conflict_count=0
        )

    @staticmethod
    def check_availability(
        facility_type: str,
        payload: AvailabilityPayload,
        booking_store: BookingStore
    ) -> AvailabilityResult:
        profile = get_facility_profile(facility_type)
        existing_bookings = booking_store.list(profile.id, payload.date)

        sections = resolve_sections(
            existing_bookings=existing_bookings,
            booking_date=payload.date,
            start_time=payload.start_time,
            end_time=payload.end_time,
            requested_count=payload.requested_count,
            consecutive=payload.consecutive,
            sections=profile.sections
        )
        free_sections = get_free_sections(
            existing_bookings,
            payload.date,
            payload.start_time,
            payload.end_time,
            profile.sections
        )

        return AvailabilityResult(sections=sections, free_sections=free_sections)

    @staticmethod
    def list_bookings(
        facility_type: str,
        booking_store: BookingStore,
        booking_date: date | None = None
    ) -> list[Booking]:
        profile = get_facility_profile(facility_type)
        return booking_store.list(profile.id, booking_date)

    @staticmethod
    def update_booking(
        booking_id: str,
        payload: BookingUpdatePayload,
        booking_store: BookingStore
    ) -> Booking:
        fields = payload.model_dump(exclude_unset=True)
        try:
            return booking_store.update(booking_id, **fields)
        except ValidationError as e:
            raise InvalidRequestError(f"Invalid booking update: {e}") from e

    @staticmethod
    def delete_booking(booking_id: str, booking_store: BookingStore) -> None:
        booking_store.delete(booking_id)

    @staticmethod
    def delete_all_bookings(facility_type: str, booking_store: BookingStore) -> int:
        profile = get_facility_profile(facility_type)
        deleted_count = booking_store.delete_all(profile.id)
        print(f"Deleted {deleted_count} bookings for {profile.id}")
        return deleted_count
