from errors import InvalidRequestError
from models.facility.facility_profile import FacilityProfile


FACILITY_PROFILES: dict[str, FacilityProfile] = {
    "track-6": FacilityProfile(
        id="track-6",
        name="6-lane running track",
        sections=(1, 2, 3, 4, 5, 6),
        section_label="Track",
        section_label_plural="tracks"
    ),
    "track-8": FacilityProfile(
        id="track-8",
        name="8-lane running track",
        sections=(1, 2, 3, 4, 5, 6, 7, 8),
        section_label="Track",
        section_label_plural="tracks"
    ),
    "rugby": FacilityProfile(
        id="rugby",
        name="Rugby pitch",
        sections=(1, 2),
        section_label="Half",
        section_label_plural="halves"
    ),
}


def get_facility_profile(facility_type: str) -> FacilityProfile:
    profile = FACILITY_PROFILES.get(facility_type)
    if profile is None:
        raise InvalidRequestError(f"Unknown facility type '{facility_type}'")
    return profile
