import unittest

import pygame

from tetris_engine import Engine
from tetris_input import handle_key
from tetris_rng import SequenceRandom


class HandleKeyTests(unittest.TestCase):
    def setUp(self):
        self.engine = Engine(10, 20, rng=SequenceRandom("T"))

    def test_arrow_keys(self):
        self.assertTrue(handle_key(self.engine, pygame.K_LEFT))
        self.assertEqual(self.engine.current.x, 2)
        handle_key(self.engine, pygame.K_RIGHT)
        handle_key(self.engine, pygame.K_RIGHT)
        self.assertEqual(self.engine.current.x, 4)
        handle_key(self.engine, pygame.K_DOWN)
        self.assertEqual((self.engine.current.y, self.engine.score), (1, 1))

    def test_rotate_keys(self):
        handle_key(self.engine, pygame.K_UP)
        self.assertEqual(self.engine.current.shape, [[1, 0], [1, 1], [1, 0]])
        handle_key(self.engine, pygame.K_x)
        self.assertEqual(self.engine.current.shape, [[1, 1, 1], [0, 1, 0]])

    def test_unbound_key(self):
        self.assertFalse(handle_key(self.engine, pygame.K_q))

    def test_space_only_restarts_after_game_over(self):
        self.assertFalse(handle_key(self.engine, pygame.K_SPACE))
        self.engine._game_over = True
        self.assertFalse(handle_key(self.engine, pygame.K_LEFT))
        self.assertEqual(self.engine.current.x, 3)
        self.assertTrue(handle_key(self.engine, pygame.K_SPACE))
        self.assertFalse(self.engine.game_over)
