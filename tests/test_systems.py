import pytest

from dailypuzzles.systems import (
    MAX_HASH_KEY,
    HashSet,
    ParkingSystem,
    SnapshotArray,
    UndergroundSystem,
)


def test_snapshot_array_starts_at_zero():
    array = SnapshotArray(3)
    snap = array.snap()
    assert [array.get(i, snap) for i in range(3)] == [0, 0, 0]


def test_snapshot_ids_are_consecutive():
    array = SnapshotArray(1)
    first = array.snap()
    second = array.snap()
    assert second == first + 1


def test_snapshot_keeps_old_values():
    array = SnapshotArray(2)
    old_value, new_value = 5, 9
    array.set(0, old_value)
    first = array.snap()
    array.set(0, new_value)
    second = array.snap()
    assert array.get(0, first) == old_value
    assert array.get(0, second) == new_value


def test_snapshot_overwrite_within_same_snap():
    array = SnapshotArray(1)
    array.set(0, 3)
    array.set(0, 4)
    snap = array.snap()
    assert array.get(0, snap) == 4


def test_snapshot_later_id_sees_latest_value():
    array = SnapshotArray(1)
    value = 11
    array.set(0, value)
    snap = array.snap()
    assert array.get(0, snap + 3) == value


def test_snapshot_errors():
    array = SnapshotArray(2)
    with pytest.raises(IndexError):
        array.set(2, 1)
    with pytest.raises(IndexError):
        array.get(-1, 0)
    with pytest.raises(ValueError):
        array.get(0, -1)


def test_parking_fills_up():
    parking = ParkingSystem(1, 1, 0)
    assert parking.add_car(1)
    assert not parking.add_car(1)
    assert parking.add_car(2)
    assert not parking.add_car(3)


def test_parking_unknown_type():
    parking = ParkingSystem(1, 1, 1)
    with pytest.raises(ValueError):
        parking.add_car(4)


def test_hash_set_add_remove():
    keys = HashSet()
    keys.add(1)
    keys.add(MAX_HASH_KEY)
    assert keys.contains(1)
    assert MAX_HASH_KEY in keys
    keys.remove(1)
    assert not keys.contains(1)
    keys.remove(2)
    assert 2 not in keys


def test_hash_set_rejects_out_of_range():
    keys = HashSet()
    with pytest.raises(ValueError):
        keys.add(MAX_HASH_KEY + 1)
    with pytest.raises(ValueError):
        keys.contains(-1)


def test_underground_average():
    system = UndergroundSystem()
    system.check_in(45, "Leyton", 3)
    system.check_out(45, "Waterloo", 15)
    system.check_in(27, "Leyton", 10)
    system.check_out(27, "Waterloo", 20)
    first, second = 15 - 3, 20 - 10
    assert system.get_average_time("Leyton", "Waterloo") == pytest.approx(
        (first + second) / 2
    )


def test_underground_direction_matters():
    system = UndergroundSystem()
    system.check_in(1, "A", 0)
    system.check_out(1, "B", 4)
    with pytest.raises(KeyError):
        system.get_average_time("B", "A")


def test_underground_checkout_without_checkin():
    system = UndergroundSystem()
    with pytest.raises(KeyError):
        system.check_out(1, "A", 5)


def test_underground_card_can_travel_again():
    system = UndergroundSystem()
    system.check_in(7, "A", 0)
    system.check_out(7, "B", 6)
    system.check_in(7, "A", 10)
    system.check_out(7, "B", 12)
    assert system.get_average_time("A", "B") == pytest.approx((6 + 2) / 2)