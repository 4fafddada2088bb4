"""Layout policy for one pass.

``LayoutOptions`` is the flat bag a caller builds from pile settings and the
current viewport. Resolvers never read it directly: ``as_flow()`` narrows it
to the variant for its flow, so each resolver only sees the fields that apply.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from app.flakepile.layout.geometry import FLAKE_UNIT


class Flow(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    COMPACT = "compact"


def _check_units(tile_width_units: float, enable_max_height: bool, max_height_units: float) -> None:
    if tile_width_units <= 0:
        raise ValueError("tile_width_units must be > 0")
    if enable_max_height and max_height_units <= 0:
        raise ValueError("max_height_units must be > 0 when max height is enabled")


@dataclass(frozen=True)
class VerticalFlow:
    container_width: float
    tile_width_units: float = 1
    elastic_width: bool = False
    enable_max_height: bool = False
    max_height_units: float = 1

    def __post_init__(self) -> None:
        _check_units(self.tile_width_units, self.enable_max_height, self.max_height_units)

    @property
    def nominal_width(self) -> float:
        return FLAKE_UNIT * self.tile_width_units

    @property
    def max_height(self) -> float | None:
        return FLAKE_UNIT * self.max_height_units if self.enable_max_height else None


@dataclass(frozen=True)
class HorizontalFlow:
    container_height: float
    tile_width_units: float = 1
    enable_max_height: bool = False
    max_height_units: float = 1
    elastic_height: bool = False

    def __post_init__(self) -> None:
        _check_units(self.tile_width_units, self.enable_max_height, self.max_height_units)

    @property
    def nominal_width(self) -> float:
        return FLAKE_UNIT * self.tile_width_units

    @property
    def max_height(self) -> float | None:
        return FLAKE_UNIT * self.max_height_units if self.enable_max_height else None


@dataclass(frozen=True)
class CompactFlow:
    # No width units or height cap: compact flow always shows tiles at full
    # natural height.
    container_width: float


FlowOptions = Union[VerticalFlow, HorizontalFlow, CompactFlow]


@dataclass(frozen=True)
class LayoutOptions:
    flow: Flow = Flow.VERTICAL
    tile_width_units: float = 1
    elastic_width: bool = False
    enable_max_height: bool = False
    max_height_units: float = 1
    elastic_height: bool = False
    container_width: float = 0
    container_height: float = 0

    def __post_init__(self) -> None:
        # Accept plain strings ("vertical") from settings; unknown names raise ValueError.
        object.__setattr__(self, "flow", Flow(self.flow))
        _check_units(self.tile_width_units, self.enable_max_height, self.max_height_units)

    def as_flow(self) -> FlowOptions:
        if self.flow is Flow.VERTICAL:
            return VerticalFlow(
                container_width=self.container_width,
                tile_width_units=self.tile_width_units,
                elastic_width=self.elastic_width,
                enable_max_height=self.enable_max_height,
                max_height_units=self.max_height_units,
            )
        if self.flow is Flow.HORIZONTAL:
            return HorizontalFlow(
                container_height=self.container_height,
                tile_width_units=self.tile_width_units,
                enable_max_height=self.enable_max_height,
                max_height_units=self.max_height_units,
                elastic_height=self.elastic_height,
            )
        return CompactFlow(container_width=self.container_width)
