"""Engine systems: seeded RNG, world generation, enemy selection."""

from pokerpg.systems.rng import DeterministicRNG
from pokerpg.systems.seed import Rng, chunk_seed, create_rng, noise2d_signed, seed_to_uint32
from pokerpg.systems.generator import GenerationResult, generate_world

__all__ = [
    "DeterministicRNG",
    "GenerationResult",
    "Rng",
    "chunk_seed",
    "create_rng",
    "generate_world",
    "noise2d_signed",
    "seed_to_uint32",
]
