from services.reorganization_service import ReorganizationService
from stores import InMemoryBookingStore


def test_reorganize_updates_store(make_booking):
    # Arrange
    store = InMemoryBookingStore([
        make_booking(sections=[4, 6], booking_id="a", occupant_label="AZS"),
        make_booking(sections=[2], booking_id="b", occupant_label="MKS"),
        make_booking(sections=[1], booking_id="c", occupant_label="OKS", facility_type="rugby"),
    ])

    # Act
    result = ReorganizationService.reorganize("track-6", store)

    # Assert
    assert result.updated_count == 2
    assert result.warnings == []
    assert store.get("a").sections == [1, 2]
    assert store.get("b").sections == [3]
    assert store.get("c").sections == [1]


def test_reorganize_twice_is_a_no_op(make_booking):
    # Arrange
    store = InMemoryBookingStore([
        make_booking(sections=[5], booking_id="a", occupant_label="AZS"),
        make_booking(sections=[3], booking_id="b", occupant_label="AZS"),
    ])
    ReorganizationService.reorganize("track-6", store)
    first_layout = {booking.id: booking.sections for booking in store.list()}

    # Act
    result = ReorganizationService.reorganize("track-6", store)

    # Assert
    assert result.updated_count == 0
    assert {booking.id: booking.sections for booking in store.list()} == first_layout


def test_reorganize_reports_overflow(make_booking, capsys):
    # Arrange
    store = InMemoryBookingStore([
        make_booking(sections=[1, 2], booking_id="a", occupant_label="AZS", facility_type="rugby"),
        make_booking(sections=[2], booking_id="b", occupant_label="MKS", facility_type="rugby"),
    ])

    # Act
    result = ReorganizationService.reorganize("rugby", store)

    # Assert
    assert result.updated_count == 0
    assert len(result.warnings) == 1
    assert "WARNING: Cannot fit booking b" in capsys.readouterr().out
    assert store.get("b").sections == [2]
