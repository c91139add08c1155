from __future__ import annotations

import enum

import pytest

from boundedset.ordinals import subrange


class Color(enum.Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    CRIMSON = "red"


class Suit(enum.IntEnum):
    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3
    SPADES = 4


Octet = subrange(0, 7, name="Octet")
Hex = subrange(0, 15, name="Hex")
Offset = subrange(-5, 4, name="Offset")
Wide = subrange(0, 99, name="Wide")
Lower = subrange("a", "z", name="Lower")


@pytest.fixture(scope="session")  # type: ignore[misc]
def octet() -> type:
    return Octet


@pytest.fixture(scope="session")  # type: ignore[misc]
def hexadecimal() -> type:
    return Hex


@pytest.fixture(scope="session")  # type: ignore[misc]
def offset() -> type:
    return Offset


@pytest.fixture(scope="session")  # type: ignore[misc]
def wide() -> type:
    return Wide


@pytest.fixture(scope="session")  # type: ignore[misc]
def lower() -> type:
    return Lower


@pytest.fixture(  # type: ignore[misc]
    scope="session", params=[Octet, Hex, Offset, Wide, Lower, Color, Suit, bool]
)
def element_type(request: pytest.FixtureRequest) -> type:
    return request.param
