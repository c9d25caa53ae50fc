# examples/interactive.py
# Pygame front end. Click adds a ball, R resets, Up/Down change the rotation
# speed multiplier. Requires the `viewer` extra.
import argparse
import logging

import pygame

from ring_sim import Simulation, SimulationConfig
from ring_sim.renderer import scroll_offset
from ring_sim.renderer.pygame_view import PygameRenderer
from ring_sim.util import log_level


def main():
    parser = argparse.ArgumentParser(description="Balls falling through rotating rings")
    parser.add_argument('--variant', choices=["single", "multi"], default="single")
    parser.add_argument('--speed-policy', choices=["reassign", "on_create"], default="reassign")
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--fps', type=int, default=60)
    args = parser.parse_args()

    logging.basicConfig(level=log_level(), format="%(levelname)s %(name)s: %(message)s")

    cfg = SimulationConfig(variant=args.variant, speed_policy=args.speed_policy)
    sim = Simulation(config=cfg, seed=args.seed)

    pygame.init()
    screen = pygame.display.set_mode((int(cfg.view_width), int(cfg.view_height)))
    pygame.display.set_caption("Ring Drop")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 24)
    renderer = PygameRenderer(screen, random_ring_colors=args.variant == "multi", seed=args.seed, flip=False)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                sim.add_projectile()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_r:
                    sim.reset()
                    renderer.forget()
                elif event.key == pygame.K_UP:
                    sim.set_rotation_speed_multiplier(sim.rotation_multiplier + 0.5)
                elif event.key == pygame.K_DOWN:
                    sim.set_rotation_speed_multiplier(sim.rotation_multiplier - 0.5)

        frame = sim.step()
        renderer.offset_y = scroll_offset(sim)
        renderer.render_frame(frame)
        label = font.render(
            f"speed x{sim.rotation_multiplier:.1f}  balls {len(frame.projectiles)}  rings {len(frame.rings)}",
            True, (40, 40, 40),
        )
        screen.blit(label, (10, 10))
        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()


if __name__ == '__main__':
    main()
