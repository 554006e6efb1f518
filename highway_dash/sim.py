# sim.py
import logging

import pygame

from .camera import Camera
from .collision import box_at
from .config import (GameConfig, WIDTH, HEIGHT, LANE_WIDTH, LANES, GROUND_Y, OBSTACLE_SIZE, ROAD_LENGTH,
                     MARKINGS, MARKING_SPACING, MARKING_START, MARKING_SIZE, CAMERA_FAR, CAMERA_DISTANCE,
                     WHEEL_OFFSETS, WHEEL_RADIUS, WHEEL_WIDTH, VEHICLE_BODY,
                     SKY_COLOR, ROAD_COLOR, MARKING_COLOR, VEHICLE_COLOR, WHEEL_COLOR, OBSTACLE_COLOR,
                     TEXT_COLOR)
from .loop import FrameDriver
from .session import GameSession, InputEvent, SceneEventKind

logger = logging.getLogger(__name__)

# road is cut short of the far plane so its far edge still projects
ROAD_END = -min(ROAD_LENGTH, CAMERA_FAR - CAMERA_DISTANCE - 1)

KEY_DOWN_INPUTS = {
    pygame.K_UP: InputEvent.ACCELERATE_PRESSED,
    pygame.K_LEFT: InputEvent.STEER_LEFT,
    pygame.K_RIGHT: InputEvent.STEER_RIGHT,
}
KEY_UP_INPUTS = {
    pygame.K_UP: InputEvent.ACCELERATE_RELEASED,
}


# ---------- GEOMETRY ----------
def shade(color, factor):
    return tuple(min(255, int(ch * factor)) for ch in color)


def box_faces(box, camera_x):
    """Faces of a box that can face the camera (top, front, one side) with shading factors."""
    (x0, y0, z0), (x1, y1, z1) = box.min, box.max
    faces = [
        ([(x0, y1, z0), (x1, y1, z0), (x1, y1, z1), (x0, y1, z1)], 1.0),
        ([(x0, y0, z1), (x1, y0, z1), (x1, y1, z1), (x0, y1, z1)], 0.75),
    ]
    side_x = x0 if camera_x < x0 else x1 if camera_x > x1 else None
    if side_x is not None:
        faces.append(([(side_x, y0, z0), (side_x, y0, z1), (side_x, y1, z1), (side_x, y1, z0)], 0.55))
    return faces


def vehicle_boxes(lane_position):
    body = box_at((lane_position, GROUND_Y, 0.0), VEHICLE_BODY)
    wheels = [box_at((lane_position + ox, GROUND_Y + oy, oz), (WHEEL_WIDTH, 2 * WHEEL_RADIUS, 2 * WHEEL_RADIUS))
              for ox, oy, oz in WHEEL_OFFSETS]
    return [(w, WHEEL_COLOR) for w in wheels] + [(body, VEHICLE_COLOR)]


# ---------- DRAW ----------
def draw_box(screen, camera, box, color):
    for corners, factor in box_faces(box, camera.position[0]):
        poly = camera.project_polygon(corners)
        if poly:
            pygame.draw.polygon(screen, shade(color, factor), poly)


def draw_road(screen, camera):
    half = LANE_WIDTH * LANES / 2
    poly = camera.project_polygon([(-half, 0, 0), (half, 0, 0), (half, 0, ROAD_END), (-half, 0, ROAD_END)])
    if poly:
        pygame.draw.polygon(screen, ROAD_COLOR, poly)
    mw, ml = MARKING_SIZE
    for i in range(MARKINGS):
        z = i * MARKING_SPACING + MARKING_START
        poly = camera.project_polygon([(-mw / 2, 0, z - ml / 2), (mw / 2, 0, z - ml / 2),
                                       (mw / 2, 0, z + ml / 2), (-mw / 2, 0, z + ml / 2)])
        if poly:
            pygame.draw.polygon(screen, MARKING_COLOR, poly)


def draw_scene(screen, camera, snap, visuals):
    screen.fill(SKY_COLOR)
    draw_road(screen, camera)

    # painter's order: far (most negative z) first
    drawables = [(0.0, vehicle_boxes(snap.vehicle_lane))]
    for oid, lane, depth in snap.obstacles:
        if oid in visuals:
            drawables.append((depth, [(box_at((lane, GROUND_Y, depth), OBSTACLE_SIZE), visuals[oid])]))
    drawables.sort(key=lambda d: d[0])
    for _, boxes in drawables:
        for box, color in boxes:
            draw_box(screen, camera, box, color)


def draw_hud(screen, font, snap):
    screen.blit(font.render(f"Score: {snap.score}", True, TEXT_COLOR), (10, 10))
    screen.blit(font.render(f"Speed: {snap.speed}", True, TEXT_COLOR), (10, 32))


def draw_game_over(screen, big_font, font, snap):
    """Overlay with the final score; returns the restart button rect."""
    w, h = screen.get_size()
    shadow = pygame.Surface((w, h), pygame.SRCALPHA)
    shadow.fill((0, 0, 0, 150))
    screen.blit(shadow, (0, 0))
    title = big_font.render("GAME OVER", True, TEXT_COLOR)
    screen.blit(title, title.get_rect(center=(w // 2, h // 2 - 60)))
    final = font.render(f"Final score: {snap.score}", True, TEXT_COLOR)
    screen.blit(final, final.get_rect(center=(w // 2, h // 2)))
    button = pygame.Rect(0, 0, 140, 40)
    button.center = (w // 2, h // 2 + 60)
    pygame.draw.rect(screen, (200, 40, 40), button, border_radius=6)
    label = font.render("Restart", True, TEXT_COLOR)
    screen.blit(label, label.get_rect(center=button.center))
    return button


def apply_scene_events(visuals, events):
    for ev in events:
        if ev.kind is SceneEventKind.SPAWNED:
            visuals[ev.obstacle_id] = OBSTACLE_COLOR
        else:
            visuals.pop(ev.obstacle_id, None)


# ---------- MAIN LOOP ----------
def run(config=None, seed=None):
    config = config or GameConfig()
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Highway Dash")
        pygame.key.set_repeat(200, 16)
        clock = pygame.time.Clock()
        font = pygame.font.SysFont("Arial", 18)
        big_font = pygame.font.SysFont("Arial", 48, bold=True)
        camera = Camera(*screen.get_size())

        session = GameSession(config, seed=seed)
        driver = FrameDriver(session)
        visuals = {}
        restart_button = None
        driver.start()
        logger.info("game started (fps=%d)", config.fps)

        running = True
        while running:
            clock.tick(config.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                    camera.resize(event.w, event.h)
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif session.is_over and event.key in (pygame.K_r, pygame.K_RETURN):
                        driver.restart()
                    elif event.key in KEY_DOWN_INPUTS:
                        session.handle(KEY_DOWN_INPUTS[event.key])
                elif event.type == pygame.KEYUP and event.key in KEY_UP_INPUTS:
                    session.handle(KEY_UP_INPUTS[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN and restart_button is not None:
                    if restart_button.collidepoint(event.pos):
                        driver.restart()

            driver.step()
            apply_scene_events(visuals, session.drain_events())

            snap = session.snapshot()
            draw_scene(screen, camera, snap, visuals)
            draw_hud(screen, font, snap)
            restart_button = draw_game_over(screen, big_font, font, snap) if snap.is_over else None
            pygame.display.flip()
    finally:
        pygame.quit()
    logger.info("game stopped")
