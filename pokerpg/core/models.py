"""Core data models: HexCoord, HexTile, BaseStats, PokemonTemplate, Combatant."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from pokerpg.core.enums import PokemonType

if TYPE_CHECKING:
    from pokerpg.core.gauge import GaugeTuning


@dataclass(frozen=True, slots=True)
class HexCoord:
    """Immutable axial hex coordinate; the cube ``s`` is derived."""

    q: int = 0
    r: int = 0

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other: HexCoord) -> HexCoord:
        return HexCoord(self.q + other.q, self.r + other.r)

    def __sub__(self, other: HexCoord) -> HexCoord:
        return HexCoord(self.q - other.q, self.r - other.r)

    def distance(self, other: HexCoord) -> int:
        dq = self.q - other.q
        dr = self.r - other.r
        return max(abs(dq), abs(dr), abs(dq + dr))

    def neighbors(self) -> Iterator[HexCoord]:
        for d in AXIAL_DIRECTIONS:
            yield HexCoord(self.q + d.q, self.r + d.r)

    @property
    def local_id(self) -> str:
        return f"q{self.q}-r{self.r}"

    def to_dict(self) -> dict[str, int]:
        return {"q": self.q, "r": self.r}

    def __repr__(self) -> str:
        return f"({self.q}, {self.r})"


# Fixed neighbour order; generation depends on it
AXIAL_DIRECTIONS: tuple[HexCoord, ...] = (
    HexCoord(1, 0),
    HexCoord(1, -1),
    HexCoord(0, -1),
    HexCoord(-1, 0),
    HexCoord(-1, 1),
    HexCoord(0, 1),
)

ORIGIN = HexCoord(0, 0)


def coords_in_radius(radius: int) -> list[HexCoord]:
    """Every coordinate within *radius* of the origin, q-major then r."""
    n = max(0, int(radius))
    out: list[HexCoord] = []
    for q in range(-n, n + 1):
        r_min = max(-n, -q - n)
        r_max = min(n, -q + n)
        for r in range(r_min, r_max + 1):
            out.append(HexCoord(q, r))
    return out


def tiles_for_radius(radius: int) -> int:
    """Tile count of a full hexagon: 1 + 3·R·(R+1)."""
    n = max(0, int(radius))
    return 1 + 3 * n * (n + 1)


@dataclass(slots=True)
class HexTile:
    """A generated world tile. Only the two flags ever change."""

    id: str
    coord: HexCoord
    biome: str
    explored: bool = False
    cleared: bool = False


@dataclass(frozen=True, slots=True)
class BaseStats:
    hp: int
    atk: int
    def_: int
    sp_atk: int = 1
    sp_def: int = 1
    spd: int = 1


@dataclass(frozen=True, slots=True)
class PokemonTemplate:
    """Immutable Pokémon template shared by every combatant built from it.

    Holds identity, types, level and base stats; no combat state.
    """

    id: str
    name: str
    types: tuple[PokemonType, PokemonType | None]
    base_stats: BaseStats
    level: int = 1


@dataclass(slots=True)
class Combatant:
    """Per-fight mutable state wrapped around a template."""

    template: PokemonTemplate
    gauge_max: float
    gauge_gain_per_tick: float
    current_hp: int = 0
    gauge: float = 0.0
    _hp_max: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        self._hp_max = self.template.base_stats.hp
        if self.current_hp <= 0:
            self.current_hp = self._hp_max

    @classmethod
    def from_template(cls, template: PokemonTemplate, tuning: GaugeTuning) -> Combatant:
        spd = template.base_stats.spd
        return cls(
            template=template,
            gauge_max=tuning.gauge_max(spd),
            gauge_gain_per_tick=tuning.gain_per_tick(spd),
        )

    @property
    def name(self) -> str:
        return self.template.name

    @property
    def hp_max(self) -> int:
        return self._hp_max

    @property
    def alive(self) -> bool:
        return self.current_hp > 0

    @property
    def ready(self) -> bool:
        return self.gauge >= self.gauge_max

    def charge(self) -> None:
        if self.alive:
            self.gauge += self.gauge_gain_per_tick

    def consume_gauge(self) -> None:
        """Spend one action's worth of gauge, keeping any overflow."""
        self.gauge = max(0.0, self.gauge - self.gauge_max)

    def receive_damage(self, damage: int) -> int:
        """Apply damage, clamping HP at zero. Returns HP after the hit."""
        dmg = max(0, int(damage))
        self.current_hp = max(0, self.current_hp - dmg)
        return self.current_hp
