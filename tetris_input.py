"""Key -> engine action dispatch"""
import pygame

from tetris_engine import Engine

KEYMAP = {
    pygame.K_LEFT: "move_left",
    pygame.K_RIGHT: "move_right",
    pygame.K_DOWN: "soft_drop",
    pygame.K_UP: "rotate",
    pygame.K_x: "rotate",
    pygame.K_r: "reset",
}
RESTART_KEYS = (pygame.K_SPACE, pygame.K_r)


def handle_key(engine: Engine, key: int) -> bool:
    """Apply the action bound to ``key``; return True if one ran.

    After game over only the restart keys do anything.
    """
    if engine.game_over:
        if key in RESTART_KEYS:
            engine.reset()
            return True
        return False
    action = KEYMAP.get(key)
    if action is None:
        return False
    getattr(engine, action)()
    return True
