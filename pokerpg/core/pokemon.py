"""Pokémon template registry — static reference data consumed by the engine.

Stats are prototype-scale (not the canonical base stats) so that a level-1
starter can chain a handful of fights.
"""

from __future__ import annotations

from pokerpg.core.enums import PokemonType
from pokerpg.core.models import BaseStats, PokemonTemplate

POKEMON_REGISTRY: dict[str, PokemonTemplate] = {}


def _mon(
    pokemon_id: str,
    name: str,
    types: tuple[str, str | None],
    hp: int,
    atk: int,
    def_: int,
    spd: int = 1,
    level: int = 1,
    sp_atk: int = 1,
    sp_def: int = 1,
) -> PokemonTemplate:
    primary, secondary = types
    t = PokemonTemplate(
        id=pokemon_id,
        name=name,
        types=(PokemonType(primary), PokemonType(secondary) if secondary else None),
        base_stats=BaseStats(hp=hp, atk=atk, def_=def_, sp_atk=sp_atk, sp_def=sp_def, spd=spd),
        level=level,
    )
    POKEMON_REGISTRY[t.id] = t
    return t


# ---------------------------------------------------------------------------
# Starter + generic opponents
# ---------------------------------------------------------------------------

DEFAULT_PLAYER_POKEMON = _mon("player-001", "Sprout", ("grass", None), hp=25, atk=8, def_=6, spd=45)

DEFAULT_ENEMY_POKEMON_POOL: tuple[PokemonTemplate, ...] = (
    _mon("enemy-001", "Emberling", ("fire", None), hp=18, atk=9, def_=4),
    _mon("enemy-002", "Ripple", ("water", None), hp=22, atk=7, def_=6),
    _mon("enemy-003", "Pebble", ("rock", None), hp=28, atk=6, def_=8),
)

# ---------------------------------------------------------------------------
# Verdant Forest
# ---------------------------------------------------------------------------

_mon("tissemboule", "Tissemboule", ("bug", "grass"), hp=16, atk=5, def_=5, spd=42, level=4)
_mon("hoothoot", "Hoothoot", ("normal", "flying"), hp=20, atk=5, def_=4, spd=50, level=4)
_mon("lepidonille", "Lépidonille", ("bug", None), hp=14, atk=4, def_=4, spd=35, level=4)
_mon("paras", "Paras", ("bug", "grass"), hp=15, atk=7, def_=5, spd=25, level=5)
_mon("grainipiot", "Grainipiot", ("grass", None), hp=18, atk=6, def_=6, spd=30, level=6)
_mon("croquine", "Croquine", ("grass", None), hp=17, atk=5, def_=5, spd=32, level=6)
_mon("scarhino", "Scarhino", ("bug", "fighting"), hp=30, atk=12, def_=8, spd=85, level=8)

# ---------------------------------------------------------------------------
# Windswept Plains
# ---------------------------------------------------------------------------

_mon("zigzaton", "Zigzaton", ("normal", None), hp=16, atk=5, def_=4, spd=60, level=2)
_mon("doduo", "Doduo", ("normal", "flying"), hp=15, atk=8, def_=4, spd=75, level=3)
_mon("gourmelet", "Gourmelet", ("normal", None), hp=22, atk=6, def_=4, spd=45, level=3)
_mon("moumouton", "Moumouton", ("normal", None), hp=20, atk=5, def_=6, spd=40, level=3)
_mon("voltoutou", "Voltoutou", ("electric", None), hp=17, atk=7, def_=5, spd=60, level=4)
_mon("crikzik", "Crikzik", ("bug", None), hp=16, atk=6, def_=5, spd=55, level=4)
_mon("tauros", "Tauros", ("normal", None), hp=30, atk=11, def_=9, spd=110, level=6)

# ---------------------------------------------------------------------------
# Canaro Mountains
# ---------------------------------------------------------------------------

_mon("machoc", "Machoc", ("fighting", None), hp=24, atk=9, def_=6, spd=35, level=6)
_mon("selutin", "Selutin", ("rock", None), hp=20, atk=7, def_=9, spd=25, level=6)
_mon("furaiglon", "Furaiglon", ("normal", "flying"), hp=20, atk=8, def_=5, spd=60, level=7)
_mon("khelocrok", "Khélocrok", ("water", None), hp=22, atk=8, def_=7, spd=44, level=7)
_mon("cabriolaine", "Cabriolaine", ("grass", None), hp=26, atk=8, def_=7, spd=52, level=8)
_mon("nodulithe", "Nodulithe", ("rock", None), hp=22, atk=8, def_=10, spd=15, level=8)
_mon("airmure", "Airmure", ("steel", "flying"), hp=32, atk=10, def_=14, spd=70, level=11)

# ---------------------------------------------------------------------------
# Misty Swamp
# ---------------------------------------------------------------------------

_mon("wooper", "Wooper", ("water", "ground"), hp=22, atk=6, def_=6, spd=15, level=5)
_mon("stunky", "Stunky", ("poison", "dark"), hp=20, atk=7, def_=5, spd=74, level=5)
_mon("croagunk", "Croagunk", ("poison", "fighting"), hp=19, atk=8, def_=5, spd=50, level=6)
_mon("gulpin", "Gulpin", ("poison", None), hp=23, atk=5, def_=7, spd=40, level=6)
_mon("quagsire", "Quagsire", ("water", "ground"), hp=32, atk=9, def_=9, spd=35, level=8)
_mon("toxicroak", "Toxicroak", ("poison", "fighting"), hp=28, atk=11, def_=7, spd=85, level=8)
_mon("drapion", "Drapion", ("poison", "dark"), hp=34, atk=12, def_=12, spd=95, level=10)

# ---------------------------------------------------------------------------
# Scorched Desert
# ---------------------------------------------------------------------------

_mon("sandshrew", "Sandshrew", ("ground", None), hp=22, atk=8, def_=9, spd=40, level=8)
_mon("trapinch", "Trapinch", ("ground", None), hp=20, atk=10, def_=5, spd=10, level=8)
_mon("cacnea", "Cacnea", ("grass", None), hp=21, atk=9, def_=5, spd=35, level=9)
_mon("hippopotas", "Hippopotas", ("ground", None), hp=28, atk=7, def_=8, spd=32, level=9)
_mon("sandslash", "Sandslash", ("ground", None), hp=30, atk=11, def_=12, spd=65, level=11)
_mon("maractus", "Maractus", ("grass", None), hp=29, atk=10, def_=8, spd=60, level=11)
_mon("garchomp", "Garchomp", ("dragon", "ground"), hp=40, atk=14, def_=11, spd=102, level=14)

# ---------------------------------------------------------------------------
# Volcanic Crater
# ---------------------------------------------------------------------------

_mon("slugma", "Slugma", ("fire", None), hp=20, atk=7, def_=6, spd=20, level=10)
_mon("numel", "Numel", ("fire", "ground"), hp=24, atk=8, def_=6, spd=35, level=10)
_mon("torkoal", "Torkoal", ("fire", None), hp=28, atk=9, def_=13, spd=20, level=11)
_mon("heatmor", "Heatmor", ("fire", None), hp=28, atk=11, def_=7, spd=65, level=11)
_mon("magcargo", "Magcargo", ("fire", "rock"), hp=30, atk=9, def_=12, spd=30, level=13)
_mon("camerupt", "Camerupt", ("fire", "ground"), hp=34, atk=12, def_=9, spd=40, level=13)
_mon("magmortar", "Magmortar", ("fire", None), hp=38, atk=13, def_=10, spd=83, level=15)


def get_pokemon(pokemon_id: str) -> PokemonTemplate | None:
    return POKEMON_REGISTRY.get(pokemon_id)
