"""Highway Dash: a three-lane endless driving game."""
from .collision import Box, box_at, bounding_box, intersects
from .config import GameConfig
from .entities import Obstacle, Vehicle
from .loop import FrameDriver
from .obstacles import ObstacleRegistry, SceneEvent, SceneEventKind, SpawnPolicy
from .session import GameSession, GameState, InputEvent, Snapshot

__version__ = "0.1.0"
