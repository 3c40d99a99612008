"""Minimum/maximum reduction over temperature readings."""

from __future__ import annotations

from typing import Iterable, Optional

from ...errors import EmptyInput
from ..models import MinMax, TempReading


def reduce_minmax(readings: Iterable[TempReading]) -> MinMax:
    """Return the coldest and warmest readings in one left-to-right pass.

    On ties the first reading encountered is kept.

    Raises:
        EmptyInput: ``readings`` is empty
    """
    lowest: Optional[TempReading] = None
    highest: Optional[TempReading] = None
    for reading in readings:
        if lowest is None or reading.temperature < lowest.temperature:
            lowest = reading
        if highest is None or reading.temperature > highest.temperature:
            highest = reading

    if lowest is None or highest is None:
        raise EmptyInput()
    return MinMax(min=lowest, max=highest)
