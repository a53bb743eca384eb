"""
Tests para la detección de solapamientos de reservas en una cancha
"""
from decimal import Decimal

from tennisclub.models.court import Court
from tennisclub.models.reservation import Reservation
from tennisclub.models.user import User
from tennisclub.utils.reservation_overlap import has_conflict, overlaps_any, windows_overlap


def _reservation(db, court, start, end, deleted=False):
    user = db.query(User).filter(User.phone_number == "555").first()
    if user is None:
        user = User(name="Owner", phone_number="555")
    reservation = Reservation(
        court=court,
        user=user,
        start_time=start,
        end_time=end,
        is_doubles=False,
        total_price=Decimal("0"),
        deleted=deleted,
    )
    db.add(reservation)
    db.commit()
    db.refresh(reservation)
    return reservation


def test_windows_overlap_half_open(at):
    assert windows_overlap(at(10), at(11), at(10, 30), at(11, 30))
    assert windows_overlap(at(10), at(12), at(10, 30), at(11))
    assert windows_overlap(at(10, 30), at(11), at(10), at(12))
    # Ventanas que se tocan no se solapan
    assert not windows_overlap(at(11), at(12), at(10), at(11))
    assert not windows_overlap(at(9), at(10), at(10), at(11))


def test_overlaps_any_ignores_order_and_excluded_id(at):
    first = Reservation(id=1, start_time=at(8), end_time=at(9))
    second = Reservation(id=2, start_time=at(10), end_time=at(11))

    assert overlaps_any(at(10, 30), at(10, 45), [first, second])
    assert overlaps_any(at(10, 30), at(10, 45), [second, first])
    assert not overlaps_any(at(10, 30), at(10, 45), [first, second], exclude_reservation_id=2)
    assert not overlaps_any(at(9), at(10), [first, second])


def test_has_conflict_against_court_reservations(db, sample_court, at):
    _reservation(db, sample_court, at(10), at(11))

    assert has_conflict(db, sample_court.id, at(10, 30), at(11, 30))
    assert not has_conflict(db, sample_court.id, at(11), at(12))


def test_has_conflict_is_per_court(db, sample_court, sample_surface, at):
    other_court = Court(name="Court 2", surface=sample_surface)
    db.add(other_court)
    db.commit()
    _reservation(db, other_court, at(10), at(11))

    assert not has_conflict(db, sample_court.id, at(10), at(11))


def test_deleted_reservations_do_not_conflict(db, sample_court, at):
    _reservation(db, sample_court, at(10), at(11), deleted=True)

    assert not has_conflict(db, sample_court.id, at(10), at(11))


def test_past_reservations_still_count(db, sample_court):
    from datetime import datetime

    _reservation(db, sample_court, datetime(2001, 1, 1, 10), datetime(2001, 1, 1, 11))

    assert has_conflict(db, sample_court.id, datetime(2001, 1, 1, 10, 59), datetime(2001, 1, 1, 12))
