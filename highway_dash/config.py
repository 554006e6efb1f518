# config.py
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------- GAMEPLAY ----------
LANE_WIDTH = 4.0
LANES = 3
MAX_SPEED = 100.0
ACCELERATION = 0.5
DECELERATION = 0.2
TURNING_SPEED = 0.05

# obstacles move speed * SPEED_FACTOR per tick (no delta-time, as in the browser version)
SPEED_FACTOR = 0.1
SPAWN_DEPTH = -500.0
PASSED_THRESHOLD = 20.0
SPAWN_PROBABILITY = 0.02

# ---------- ENTITY SIZES (x, y, z) ----------
GROUND_Y = 0.5
VEHICLE_BODY = (2.0, 1.0, 4.0)
WHEEL_RADIUS = 0.4
WHEEL_WIDTH = 0.4
# wheel hubs sit on the body's side faces
WHEEL_OFFSETS = ((-1.0, 0.0, 1.5), (1.0, 0.0, 1.5), (-1.0, 0.0, -1.5), (1.0, 0.0, -1.5))
OBSTACLE_SIZE = (2.0, 1.0, 2.0)

# ---------- CAMERA ----------
CAMERA_HEIGHT = 5.0
CAMERA_DISTANCE = 10.0
CAMERA_FOV = 75.0  # degrees, vertical
CAMERA_NEAR = 0.1
CAMERA_FAR = 1000.0

# ---------- WINDOW ----------
WIDTH, HEIGHT = 960, 640
FPS = 60
ROAD_LENGTH = 1000.0
MARKINGS = 20
MARKING_SPACING = 20.0
MARKING_START = -200.0
MARKING_SIZE = (0.2, 3.0)

SKY_COLOR = (0x87, 0xCE, 0xEB)
ROAD_COLOR = (0x40, 0x40, 0x40)
MARKING_COLOR = (255, 255, 255)
VEHICLE_COLOR = (0xFF, 0x00, 0x00)
WHEEL_COLOR = (0x20, 0x20, 0x20)
OBSTACLE_COLOR = (0x00, 0xFF, 0x00)
TEXT_COLOR = (255, 255, 255)


class GameConfig(BaseSettings):
    """Gameplay settings, overridable from HIGHWAY_DASH_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HIGHWAY_DASH_",
        extra="ignore",
        frozen=True,
    )

    lane_width: float = Field(default=LANE_WIDTH, gt=0)
    max_speed: float = Field(default=MAX_SPEED, gt=0)
    acceleration: float = Field(default=ACCELERATION, ge=0)
    deceleration: float = Field(default=DECELERATION, ge=0)
    turning_speed: float = Field(default=TURNING_SPEED, ge=0)
    speed_factor: float = Field(default=SPEED_FACTOR, ge=0)
    spawn_depth: float = SPAWN_DEPTH
    passed_threshold: float = PASSED_THRESHOLD
    spawn_probability: float = Field(default=SPAWN_PROBABILITY, ge=0.0, le=1.0)

    fps: int = Field(default=FPS, gt=0)
    debug: bool = False

    @model_validator(mode="after")
    def _spawn_before_threshold(self):
        if self.spawn_depth >= self.passed_threshold:
            raise ValueError("spawn_depth must lie before passed_threshold")
        return self

    @property
    def lane_slots(self):
        """Lane-centre x positions, left to right."""
        return (-self.lane_width, 0.0, self.lane_width)
