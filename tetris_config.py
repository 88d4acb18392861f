"""Tunable gameplay and window constants"""

CONFIG = {
    "GRID_WIDTH": 10,
    "GRID_HEIGHT": 20,
    "CELL_SIZE": 30,
    "BASE_DROP_MS": 1000,
    "MIN_DROP_MS": 100,
    "DROP_STEP_MS": 100,
    "LINES_PER_LEVEL": 10,
    "FPS": 60,
    "SEED": None,
}


def drop_interval_ms(level: int) -> int:
    """Milliseconds between automatic drops at ``level`` (1-based)."""
    step = (level - 1) * CONFIG["DROP_STEP_MS"]
    return max(CONFIG["MIN_DROP_MS"], CONFIG["BASE_DROP_MS"] - step)
