"""
tick-glide Gallery
One lane per easing, plus a spinner using rotation and a pulsing orb using reflect.

Controls:
  Space   Pause / resume all tweens
  R       Restart the lanes
  Click   Move the spinner's target angle toward the cursor
  Esc     Quit
"""

import math
import sys
from dataclasses import dataclass

import pygame

from tick_glide import Tweener

# --- Configuration ---
WIDTH, HEIGHT = 960, 640
FPS = 60
TITLE = "tick-glide Gallery"
LANE_EASINGS = ["linear", "quad_in_out", "cubic_out", "back_out", "elastic_out", "bounce_out"]
LANE_LEFT, LANE_RIGHT = 180, WIDTH - 260
LANE_TOP, LANE_GAP = 60, 80
DURATION = 2.0

BG_COLOR = (26, 26, 46)
HUD_COLOR = (200, 200, 220)
TRACK_COLOR = (60, 60, 90)
ORB_COLOR = (0, 255, 255)
PULSE_COLOR = (255, 0, 200)
SPINNER_COLOR = (255, 215, 0)


@dataclass
class Orb:
    x: float
    y: float
    radius: float = 12.0


@dataclass
class Spinner:
    angle: float = 0.0


def launch_lanes(tweener: Tweener, orbs: list[Orb]) -> None:
    tweener.target_cancel(*orbs)
    for orb, easing in zip(orbs, LANE_EASINGS):
        orb.x = LANE_LEFT
        tweener.tween(orb, {"x": LANE_RIGHT}, DURATION, delay=0.25).ease(easing)


def main():
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    tweener = Tweener()
    orbs = [Orb(LANE_LEFT, LANE_TOP + i * LANE_GAP) for i in range(len(LANE_EASINGS))]
    launch_lanes(tweener, orbs)

    pulse = Orb(WIDTH - 120, 160, radius=20.0)
    tweener.tween(pulse, {"radius": 40.0}, 0.8).ease("sine_in_out").repeat().reflect()

    spinner = Spinner()
    spinner_center = (WIDTH - 120, HEIGHT - 180)
    paused = False

    running = True
    while running:
        dt = pg_clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    tweener.pause_toggle()
                    paused = not paused
                elif event.key == pygame.K_r:
                    launch_lanes(tweener, orbs)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                mx, my = event.pos
                target = math.degrees(math.atan2(my - spinner_center[1], mx - spinner_center[0]))
                tweener.target_cancel(spinner)
                tweener.tween(spinner, {"angle": target}, 0.6).ease("cubic_out").rotation()

        tweener.update(dt)

        screen.fill(BG_COLOR)
        for orb, easing in zip(orbs, LANE_EASINGS):
            y = int(orb.y)
            pygame.draw.line(screen, TRACK_COLOR, (LANE_LEFT, y), (LANE_RIGHT, y), 2)
            screen.blit(font.render(easing, True, HUD_COLOR), (10, y - 8))
            pygame.draw.circle(screen, ORB_COLOR, (int(orb.x), y), int(orb.radius))

        pygame.draw.circle(screen, PULSE_COLOR, (int(pulse.x), int(pulse.y)), int(pulse.radius))

        rad = math.radians(spinner.angle)
        tip = (
            spinner_center[0] + math.cos(rad) * 60,
            spinner_center[1] + math.sin(rad) * 60,
        )
        pygame.draw.circle(screen, TRACK_COLOR, spinner_center, 64, 2)
        pygame.draw.line(screen, SPINNER_COLOR, spinner_center, tip, 4)

        pause_str = "  [PAUSED]" if paused else ""
        hud_lines = [
            f"Tweens: {len(tweener)}   FPS: {pg_clock.get_fps():.0f}{pause_str}",
            "Space=Pause  R=Restart  Click=Aim spinner  Esc=Quit",
        ]
        for i, line in enumerate(hud_lines):
            surf = font.render(line, True, HUD_COLOR)
            screen.blit(surf, (10, HEIGHT - 48 + i * 20))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
