"""Tests for the keyboard adapter, policies and the pygame drawing helpers."""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pygame

from game_engine import GameState, RESTART, ALIVE, WIN, DEAD, WIDTH, HEIGHT, HAZARD_SPRITE
from lanecross.app.game import frame_dt, handle_events, new_game
from lanecross.config.loader import load_settings
from lanecross.input.keymap import translate_key, translate_keycode
from lanecross.policies.registry import available_policies, load_policy
from lanecross.render.resources import ALL_IMAGES, SPRITE_H, SPRITE_W, Resources
from lanecross.render.scene import ROW_IMAGES, draw_board, draw_hud, load_fonts


class TestKeymap:
    def test_browser_codes(self):
        assert [translate_keycode(c) for c in (37, 38, 39, 40)] == ["left", "up", "right", "down"]
        assert translate_keycode(13) is None

    def test_pygame_keys(self):
        assert translate_key(pygame.K_UP) == "up"
        assert translate_key(pygame.K_a) == "left"
        assert translate_key(pygame.K_RETURN) == RESTART
        assert translate_key(pygame.K_SPACE) is None


class TestFrameDriver:
    def test_frame_dt_clamped(self):
        assert frame_dt(16, 0.1) == pytest.approx(0.016)
        assert frame_dt(5000, 0.1) == pytest.approx(0.1)
        assert frame_dt(-3, 0.1) == 0.0

    def test_new_game_uses_settings(self):
        settings = load_settings(ruleset="classic", seed=9, ensure_dirs=False)
        gs = new_game(settings)
        assert gs.ruleset == "classic"
        assert gs.encode() == new_game(settings).encode()

    def test_handle_events(self):
        gs = GameState(seed=1)
        gs.player.y = 3
        events = [pygame.event.Event(pygame.KEYUP, key=pygame.K_UP)]
        assert handle_events(gs, events)
        assert gs.player.dy == -1

        gs.player.status = DEAD
        assert handle_events(gs, [pygame.event.Event(pygame.KEYUP, key=pygame.K_RETURN)])
        assert gs.rounds == 2

        assert not handle_events(gs, [pygame.event.Event(pygame.QUIT)])


class TestPolicies:
    def test_registry(self):
        assert available_policies() == ["cautious", "random", "up"]
        with pytest.raises(ValueError):
            load_policy("teleport")

    def test_cautious_waits_for_traffic(self):
        gs = GameState(seed=2)
        for h in gs.hazards:
            h.x = -50.0
        gs.player.x, gs.player.y = 2, 4
        policy = load_policy("cautious")
        assert policy.decide(gs) == "up"
        gs.hazards[2].x = 1.5  # lane 3, just behind the player column
        assert policy.decide(gs) is None

    def test_cautious_backs_off(self):
        gs = GameState(seed=2)
        for h in gs.hazards:
            h.x = -50.0
        gs.player.x, gs.player.y = 2, 3
        gs.hazards[1].x = 1.0   # lane 2 ahead
        gs.hazards[2].x = 1.2   # lane 3, current
        assert load_policy("cautious").decide(gs) == "down"


class TestResources:
    def test_placeholders_for_missing_art(self, tmp_path):
        res = Resources(tmp_path)
        res.load(ALL_IMAGES)
        image = res.get(HAZARD_SPRITE)
        assert image.get_size() == (SPRITE_W, SPRITE_H)
        assert res.get(HAZARD_SPRITE) is image
        assert HAZARD_SPRITE in res

    def test_draw_board_and_entities(self, tmp_path):
        res = Resources(tmp_path)
        screen = pygame.Surface((WIDTH, HEIGHT))
        draw_board(screen, res)
        GameState(seed=4).render(screen, res)
        assert len(ROW_IMAGES) == 6


def render_hud(status):
    pygame.font.init()
    gs = GameState(seed=1)
    gs.player.status = status
    screen = pygame.Surface((WIDTH, HEIGHT))
    screen.fill((255, 255, 255))
    draw_hud(screen, gs, load_fonts(), blink=0)
    return screen


class TestHud:
    def test_no_overlay_while_alive(self):
        screen = render_hud(ALIVE)
        assert tuple(screen.get_at((5, HEIGHT - 5)))[:3] == (255, 255, 255)

    @pytest.mark.parametrize("status", [WIN, DEAD])
    def test_overlay_dims_board_when_round_over(self, status):
        screen = render_hud(status)
        r, g, b = tuple(screen.get_at((5, HEIGHT - 5)))[:3]
        assert max(r, g, b) < 200

    def test_win_and_game_over_banners_differ(self):
        win = pygame.image.tostring(render_hud(WIN), "RGB")
        dead = pygame.image.tostring(render_hud(DEAD), "RGB")
        assert win != dead
