"""Launch the game: open the engine window on a fresh snake scene."""

from gridsnake.core.engine import Engine
from gridsnake.world.snakescene import SnakeScene


def main() -> None:
    Engine(scene_factory=SnakeScene).run()


if __name__ == "__main__":
    main()
