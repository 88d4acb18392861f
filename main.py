import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_engine import Engine
from tetris_input import handle_key
from tetris_layout import compute_dims
from tetris_render import RenderAssets


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    engine = Engine(CONFIG["GRID_WIDTH"], CONFIG["GRID_HEIGHT"])
    dims = compute_dims(engine.grid.width, engine.grid.height)
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetris Game")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 28)

    render = RenderAssets(dims, font, big_font)
    render.rebuild_board_surface(engine.grid)
    clock = pygame.time.Clock()

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                was_over = engine.game_over
                if handle_key(engine, e.key) and (was_over or e.key == pygame.K_r):
                    render.rebuild_board_surface(engine.grid)

        # a drop step may lock a piece and clear lines
        if engine.tick(dt):
            render.rebuild_board_surface(engine.grid)

        render.draw(screen, engine)
        pygame.display.flip()


if __name__ == '__main__':
    main()
