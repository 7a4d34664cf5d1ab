"""Small stateful systems: snapshots, parking, a hash set and travel times."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field

MAX_HASH_KEY = 1_000_000


@dataclass
class _History:
    snaps: list[int] = field(default_factory=lambda: [0])
    values: list[int] = field(default_factory=lambda: [0])


class SnapshotArray:
    """An array of integers whose past states can be read back by snapshot id."""

    def __init__(self, length: int) -> None:
        self._histories = [_History() for _ in range(length)]
        self._snap_id = 0

    def _history(self, index: int) -> _History:
        if not 0 <= index < len(self._histories):
            raise IndexError(f"index {index} is outside the array")
        return self._histories[index]

    def set(self, index: int, val: int) -> None:
        """Set the value at index in the current snapshot."""
        history = self._history(index)
        if history.snaps[-1] == self._snap_id:
            history.values[-1] = val
        else:
            history.snaps.append(self._snap_id)
            history.values.append(val)

    def snap(self) -> int:
        """Take a snapshot and return its id."""
        self._snap_id += 1
        return self._snap_id - 1

    def get(self, index: int, snap_id: int) -> int:
        """Return the value at index as it was in snapshot snap_id."""
        if snap_id < 0:
            raise ValueError("snapshot id must be non-negative")
        history = self._history(index)
        return history.values[bisect_right(history.snaps, snap_id) - 1]


class ParkingSystem:
    """A car park with big, medium and small spaces."""

    def __init__(self, big: int, medium: int, small: int) -> None:
        self._free = {1: big, 2: medium, 3: small}

    def add_car(self, car_type: int) -> bool:
        """Park a car of type 1 (big), 2 (medium) or 3 (small) if a space is free."""
        if car_type not in self._free:
            raise ValueError(f"unknown car type {car_type}")
        if self._free[car_type] > 0:
            self._free[car_type] -= 1
            return True
        return False


class HashSet:
    """A set of integer keys from 0 to MAX_HASH_KEY."""

    def __init__(self) -> None:
        self._keys: set[int] = set()

    @staticmethod
    def _check(key: int) -> None:
        if not 0 <= key <= MAX_HASH_KEY:
            raise ValueError(f"key {key} is outside 0..{MAX_HASH_KEY}")

    def add(self, key: int) -> None:
        """Insert key."""
        self._check(key)
        self._keys.add(key)

    def remove(self, key: int) -> None:
        """Remove key if present."""
        self._check(key)
        self._keys.discard(key)

    def contains(self, key: int) -> bool:
        """Return True if key is in the set."""
        self._check(key)
        return key in self._keys

    def __contains__(self, key: int) -> bool:
        return self.contains(key)


class UndergroundSystem:
    """Record journeys and report average travel times between stations."""

    def __init__(self) -> None:
        self._check_ins: dict[int, tuple[str, int]] = {}
        self._totals: dict[tuple[str, str], list[int]] = {}

    def check_in(self, card_id: int, station_name: str, t: int) -> None:
        """Record that card_id entered station_name at time t."""
        self._check_ins[card_id] = (station_name, t)

    def check_out(self, card_id: int, station_name: str, t: int) -> None:
        """Record that card_id left at station_name at time t."""
        try:
            start, started = self._check_ins.pop(card_id)
        except KeyError:
            raise KeyError(f"card {card_id} is not checked in") from None
        totals = self._totals.setdefault((start, station_name), [0, 0])
        totals[0] += t - started
        totals[1] += 1

    def get_average_time(self, start_station: str, end_station: str) -> float:
        """Return the mean travel time of finished journeys between two stations."""
        try:
            total, trips = self._totals[(start_station, end_station)]
        except KeyError:
            raise KeyError(
                f"no journeys from {start_station} to {end_station}"
            ) from None
        return total / trips