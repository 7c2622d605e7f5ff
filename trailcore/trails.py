#!/usr/bin/env python3
"""
Fixed-length position history for fading body trails.

Every body owns one TrailBuffer of the same length. All buffers are written at a
single write index shared by the whole simulation, which advances once per frame,
so the buffer itself never tracks where "now" is; callers pass the index in.

Reading back
Rendering draws length - 1 segments, newest first. Segment i joins the sample at
slot a (newer) with the one at slot b (one frame older):

    a = start - i           if start >= i else  length - i + start
    b = a - 1               if a > 0      else  length - 1

Segment 0 joins the two most recent samples, segment length - 2 the two oldest.
Its brightness falls linearly from 1 at i = 0 towards 0 as i grows.
"""
import math
from typing import Iterator, List, Tuple

from .vector_utils import Vec2

MIN_TRAIL_LENGTH = 2


def validate_trail_length(length: int) -> int:
    """Return length as an int, raising ValueError if it cannot hold a single segment."""
    if isinstance(length, float) and not (math.isfinite(length) and length.is_integer()):
        raise ValueError(f"trail length must be a whole number, got {length}")
    length = int(length)
    if length < MIN_TRAIL_LENGTH:
        raise ValueError(f"trail length must be at least {MIN_TRAIL_LENGTH}, got {length}")
    return length


def index_pair(start: int, i: int, length: int) -> Tuple[int, int]:
    """Slots (newer, older) of segment i when the latest sample sits at start."""
    if start >= i:
        a = start - i
    else:
        a = length - i + start
    if a > 0:
        b = a - 1
    else:
        b = length - 1
    return a, b


def segment_brightness(i: int, length: int) -> float:
    return 1.0 - i / length


class TrailBuffer:
    """
    Circular history of one body's positions.

    All slots start out at the body's initial position, so a fresh trail renders
    as a single point until the body moves.
    """

    def __init__(self, initial_position: Vec2, length: int):
        self.length = validate_trail_length(length)
        self.positions: List[Vec2] = [tuple(initial_position)] * self.length

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int) -> Vec2:
        return self.positions[index]

    def write(self, start: int, position: Vec2) -> None:
        self.positions[start] = tuple(position)

    def segment_slots(self, start: int) -> Iterator[Tuple[int, int, float]]:
        """Yield (newer slot, older slot, brightness) for every segment, newest first."""
        length = self.length
        for i in range(length - 1):
            a, b = index_pair(start, i, length)
            yield a, b, segment_brightness(i, length)

    def segments(self, start: int) -> Iterator[Tuple[Vec2, Vec2, float]]:
        """Yield (newer, older, brightness) for every segment, newest first."""
        for a, b, brightness in self.segment_slots(start):
            yield self.positions[a], self.positions[b], brightness
