"""World package: re-export the simulation-side symbols for simpler imports.

Callers can import the game model directly, e.g.:

    from gridsnake.world import GridSimulation, Heading, SimulationConfig

Rendering modules (`cell_sprites`, `snake_hud`, `snakescene`) need an OpenGL
context and are imported from their own modules.
"""

from .settings import SimulationConfig
from .simulation import GameStatus, GridSimulation, Heading, Snapshot
from .food import PLACEMENT_STRATEGIES, place_by_rejection, place_from_free_cells
from .tick_clock import TickClock
from .controls import Controls

__all__ = [
    "SimulationConfig",
    "GameStatus",
    "GridSimulation",
    "Heading",
    "Snapshot",
    "PLACEMENT_STRATEGIES",
    "place_by_rejection",
    "place_from_free_cells",
    "TickClock",
    "Controls",
]
