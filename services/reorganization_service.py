from datetime import datetime
from models.facility.facility_profiles import get_facility_profile
from models.reorganization.reorganization_plan import ReorganizationResult
from stores.booking_store import BookingStore
from utils.reorganization import plan_reorganization


class ReorganizationService:

    @staticmethod
    def reorganize(facility_type: str, booking_store: BookingStore) -> ReorganizationResult:
        start_time = datetime.now()
        profile = get_facility_profile(facility_type)

        print(f"Starting section reorganization for {profile.id}...")
        bookings = booking_store.list(profile.id)

        plan = plan_reorganization(bookings, profile)
        for warning in plan.warnings:
            print(f"WARNING: {warning} - skipping booking")

        # All reassigned sections are written together or not at all
        if plan.changes:
            booking_store.update_sections(plan.changes)

        end_time = datetime.now()
        duration_ms = round(
            (end_time - start_time).total_seconds() * 1000, 2)

        print(f"Reorganization complete: {len(plan.changes)} bookings updated")

        return ReorganizationResult(
            updated_count=len(plan.changes),
            duration_ms=duration_ms,
            warnings=plan.warnings
        )
