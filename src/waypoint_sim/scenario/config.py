"""Scenario configuration and validation.

Reads defaults from ``WAYPOINT_SIM_*`` environment variables when built via
:meth:`ScenarioConfig.from_env`.  Entry points call ``load_dotenv()`` first so
a project-local ``.env`` file is honoured.
"""

from __future__ import annotations

import dataclasses
import logging
import math
import os
from dataclasses import dataclass

_logger = logging.getLogger(__name__)

GRAVITY = 9.8
"""Gravitational acceleration (m/s²) used for the friction normal force."""

DEFAULT_ENGINE_GAIN = 50.0
"""Proportional engine gain K (N per m/s of speed error)."""

# Bounds offered by interactive clients.  Not enforced by validate().
SLIDER_RANGES: dict[str, tuple[float, float, float]] = {
    "grid_scale_m_per_unit": (10.0, 50.0, 5.0),
    "friction_coefficient": (0.0, 5.0, 0.1),
    "air_resistance_force": (0.0, 50.0, 1.0),
    "target_speed": (10.0, 120.0, 5.0),
    "mass": (10.0, 100.0, 5.0),
}


class InvalidConfiguration(ValueError):
    """Raised when a scenario or route violates a configuration invariant."""


@dataclass(frozen=True)
class FrictionZone:
    """Closed-open leg-index interval ``[start_index, end_index)``."""

    start_index: int
    end_index: int

    def contains(self, leg_index: int) -> bool:
        return self.start_index <= leg_index < self.end_index


@dataclass(frozen=True)
class ScenarioConfig:
    """Physical parameters for one run.

    Friction indices refer to positions in the full waypoint sequence.  If
    the destination truncates the route before ``friction_range_end_index``
    the remainder of the zone is simply never entered.
    """

    target_speed: float = 30.0
    """Cruise speed the engine controller aims for (m/s)."""

    mass: float = 20.0
    """Vehicle mass (kg)."""

    friction_coefficient: float = 0.0
    """Kinetic friction coefficient µ applied inside the friction zone."""

    friction_active: bool = True
    """Master switch for the friction zone."""

    friction_range_start_index: int = 1
    friction_range_end_index: int = 3

    air_resistance_force: float = 0.0
    """Constant drag force (N), applied everywhere."""

    grid_scale_m_per_unit: float = 10.0
    """Metres per grid unit."""

    engine_gain: float = DEFAULT_ENGINE_GAIN

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> ScenarioConfig:
        """Return ``self`` if all invariants hold.

        Raises:
            InvalidConfiguration: Describing the first violated invariant.
        """
        floats = {
            "target_speed": self.target_speed,
            "mass": self.mass,
            "friction_coefficient": self.friction_coefficient,
            "air_resistance_force": self.air_resistance_force,
            "grid_scale_m_per_unit": self.grid_scale_m_per_unit,
            "engine_gain": self.engine_gain,
        }
        for name, value in floats.items():
            if not math.isfinite(value):
                self._reject(f"{name} must be finite, got {value!r}")

        if self.mass <= 0:
            self._reject(f"mass must be > 0, got {self.mass}")
        if self.grid_scale_m_per_unit <= 0:
            self._reject(f"grid scale must be > 0, got {self.grid_scale_m_per_unit}")
        if self.target_speed < 0:
            self._reject(f"target speed must be >= 0, got {self.target_speed}")
        if self.friction_coefficient < 0:
            self._reject(f"friction coefficient must be >= 0, got {self.friction_coefficient}")
        if self.air_resistance_force < 0:
            self._reject(f"air resistance must be >= 0, got {self.air_resistance_force}")
        if self.engine_gain <= 0:
            self._reject(f"engine gain must be > 0, got {self.engine_gain}")

        if self.friction_active:
            if self.friction_range_start_index < 0:
                self._reject(
                    f"friction start index must be >= 0, got {self.friction_range_start_index}"
                )
            if self.friction_range_end_index <= self.friction_range_start_index:
                self._reject(
                    "friction end index must be greater than start index "
                    f"({self.friction_range_end_index} <= {self.friction_range_start_index})"
                )
        return self

    @staticmethod
    def _reject(message: str) -> None:
        _logger.warning("Rejected scenario configuration: %s", message)
        raise InvalidConfiguration(message)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def friction_zone(self) -> FrictionZone:
        return FrictionZone(self.friction_range_start_index, self.friction_range_end_index)

    def with_friction_zone(self, zone: FrictionZone) -> ScenarioConfig:
        """Return a copy using *zone* (e.g. from :meth:`WaypointGraph.friction_zone`)."""
        return dataclasses.replace(
            self,
            friction_range_start_index=zone.start_index,
            friction_range_end_index=zone.end_index,
        )

    def friction_coefficient_at(self, leg_index: int) -> float:
        """Active friction coefficient while travelling leg *leg_index*."""
        if self.friction_active and self.friction_zone.contains(leg_index):
            return self.friction_coefficient
        return 0.0

    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, prefix: str = "WAYPOINT_SIM_", **overrides) -> ScenarioConfig:
        """Build a config from environment variables, then apply *overrides*.

        Recognised variables (all optional): ``TARGET_SPEED``, ``MASS``,
        ``FRICTION``, ``FRICTION_ACTIVE``, ``FRICTION_START``,
        ``FRICTION_END``, ``AIR_RESISTANCE``, ``GRID_SCALE``, ``ENGINE_GAIN``.

        The result is not validated; call :meth:`validate`.
        """
        env = os.environ
        defaults = cls()

        def _float(key: str, default: float) -> float:
            raw = env.get(prefix + key)
            if raw is None or raw == "":
                return default
            try:
                return float(raw)
            except ValueError:
                raise InvalidConfiguration(f"{prefix}{key}={raw!r} is not a number") from None

        def _int(key: str, default: int) -> int:
            raw = env.get(prefix + key)
            if raw is None or raw == "":
                return default
            try:
                return int(raw)
            except ValueError:
                raise InvalidConfiguration(f"{prefix}{key}={raw!r} is not an integer") from None

        raw_active = env.get(prefix + "FRICTION_ACTIVE", "")
        friction_active = (
            defaults.friction_active
            if raw_active == ""
            else raw_active.strip().lower() in {"1", "true", "yes", "on"}
        )

        values = dict(
            target_speed=_float("TARGET_SPEED", defaults.target_speed),
            mass=_float("MASS", defaults.mass),
            friction_coefficient=_float("FRICTION", defaults.friction_coefficient),
            friction_active=friction_active,
            friction_range_start_index=_int("FRICTION_START", defaults.friction_range_start_index),
            friction_range_end_index=_int("FRICTION_END", defaults.friction_range_end_index),
            air_resistance_force=_float("AIR_RESISTANCE", defaults.air_resistance_force),
            grid_scale_m_per_unit=_float("GRID_SCALE", defaults.grid_scale_m_per_unit),
            engine_gain=_float("ENGINE_GAIN", defaults.engine_gain),
        )
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
