from datetime import datetime

from front_desk.application.services import BookingOrchestrator, HotelStatusService
from front_desk.shared_kernel import PaymentMethod, RoomType


def test_initial_status(status_service: HotelStatusService):
    status = status_service.get_status()

    assert status.day.isoformat() == "2026-10-19"
    assert status.total_rooms == 20
    assert status.available_rooms == 20
    assert status.booked_rooms == 0
    assert (status.check_ins_today, status.check_outs_today) == (0, 0)
    assert status_service.booked_rooms() == []


def test_status_after_bookings_and_checkout(
    status_service: HotelStatusService,
    orchestrator: BookingOrchestrator,
    booking_request,
):
    for name in ("Анна", "Борис", "Вера"):
        request = booking_request.model_copy(update={"guest_name": name})
        orchestrator.calculate_price(request)
        orchestrator.confirm_booking(request)
    orchestrator.checkout_room(102)

    status = status_service.get_status()
    booked = status_service.booked_rooms()

    assert status.available_rooms == 18
    assert status.booked_rooms == 2
    assert status.check_ins_today == 3
    assert status.check_outs_today == 1
    assert [room.label for room in booked] == ["Номер 101 - Анна", "Номер 103 - Вера"]


def test_status_on_a_new_day(status_service: HotelStatusService, counters, clock):
    counters.increment_check_ins()
    clock.advance()

    status = status_service.get_status()

    assert status.day.isoformat() == "2026-10-20"
    assert status.check_ins_today == 0
    assert "2026-10-20" in counters.history()


def test_status_matches_inventory_counts(status_service: HotelStatusService, inventory):
    inventory.assign(
        room_number=115,
        guest_name="Олег",
        checkin=datetime(2026, 10, 19, 14, 0),
        checkout=datetime(2026, 10, 20, 12, 0),
        room_type=RoomType.AC,
        guests=1,
        beds=0,
        pillows=0,
        payment=PaymentMethod.ONLINE,
    )

    status = status_service.get_status()

    assert status.total_rooms == inventory.count_total() == 20
    assert status.available_rooms == inventory.count_available() == 19
    assert status.booked_rooms == inventory.count_booked() == 1
