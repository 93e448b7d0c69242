"""Production Line: hold the mouse on the generator to run the chain.

Controls:
  Left mouse   Hold over G to drive generator -> motor -> producer
  Escape       Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from ongrid import GridView, SimulationConfig, create_default_engine, setup_logging
from ui.constants import FPS
from ui.renderer import Fonts, draw_counter, draw_entities, draw_grid, draw_margins
from ui.viewport import Viewport


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Production Line, ongrid visual demo")
    p.add_argument("--width", type=int, default=10, help="Grid columns (default: 10)")
    p.add_argument("--height", type=int, default=10, help="Grid rows (default: 10)")
    p.add_argument("--cycle-ms", type=float, default=1000.0,
                   help="Milliseconds per cycle at full rate (default: 1000)")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--log-file", default=None, metavar="FILE",
                   help="Also write the log to FILE")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging(getattr(logging, args.log_level), log_file=args.log_file)

    config = SimulationConfig(
        width=args.width,
        height=args.height,
        reference_cycle_duration=args.cycle_ms,
    )
    engine = create_default_engine(config)
    cursor = engine.state.cursor
    vp = Viewport(width=config.width, height=config.height)

    pygame.init()
    screen = pygame.display.set_mode(vp.screen_size)
    pygame.display.set_caption("Production Line")
    clock = pygame.time.Clock()
    fonts = Fonts(counter_size=vp.top)

    def render(view: GridView) -> None:
        draw_grid(screen, vp)
        draw_margins(screen, vp)
        draw_counter(screen, vp, view, fonts)
        draw_entities(screen, vp, view, fonts)
        pygame.display.flip()

    engine.on_tick(render)

    running = True
    while running:
        clock.tick(FPS)

        # --- Events (input only touches the cursor) ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.MOUSEMOTION:
                cursor.move_to(*vp.to_grid(*event.pos))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                cursor.move_to(*vp.to_grid(*event.pos))
                cursor.press()
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                cursor.release()

        # --- Tick + render ---
        engine.frame(pygame.time.get_ticks())

    logging.getLogger("ongrid").info(
        "Stopped after %d ticks, ledger total %.2f",
        engine.clock.tick_number, engine.state.ledger.total,
    )
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
