"""
Pure game logic for LANECROSS — no pygame dependency.
Used by the pygame front end, the headless simulator and the tests.

Positions are grid units (columns, lanes). Rendering multiplies by the
cell size; entities draw themselves onto anything with a pygame-style
``blit(image, (x, y))`` using a resource service with ``get(path)``.
"""

from __future__ import annotations

import random
from typing import Protocol

# ─────────────────────────────────────────
# Constants
# ─────────────────────────────────────────
COLS, ROWS = 5, 6
CELL_W, CELL_H = 101, 83
HAZARD_Y_OFFSET = 22
WIDTH, HEIGHT = COLS * CELL_W, 606
FPS = 60

MIN_X, MIN_Y = 0, 0
MAX_X, MAX_Y = COLS - 1, ROWS - 1

HAZARD_LANES = (1, 2, 3)
HAZARD_COUNT = 9
COLLISION_MARGIN = 0.1

# Wraparound offset off the left edge, in whole columns
WRAP_MIN, WRAP_MAX = 1, 10
SPEED_MIN, SPEED_MAX = 1.0, 3.0

ALIVE, WIN, DEAD = "alive", "win", "dead"
RESTART = "restart"
DIRECTIONS = {
    "left": (-1, 0),
    "up": (0, -1),
    "right": (1, 0),
    "down": (0, 1),
}

RULESETS = ("standard", "classic")

HAZARD_SPRITE = "images/enemy-bug.png"
PLAYER_SPRITE = "images/char-boy.png"
GEM_SPRITES = {
    1: "images/Gem Blue.png",
    2: "images/Gem Green.png",
    3: "images/Gem Orange.png",
}


def overlaps(ax, ay, bx, by, margin=0.0):
    """Two-sided anchor test between unit boxes anchored at (ax, ay) and (bx, by).

    True if b's anchor lies in a's box shrunk horizontally by ``margin``, or
    a's anchor lies in b's shrunk box. Partial overlaps where neither anchor
    is inside the other box are not detected.
    """
    b_in_a = (ax + margin <= bx < ax + 1 - margin) and (ay <= by < ay + 1)
    a_in_b = (bx + margin <= ax < bx + 1 - margin) and (by <= ay < by + 1)
    return b_in_a or a_in_b


def _wrap_offset(rng):
    return -float(rng.randint(WRAP_MIN, WRAP_MAX))


class Entity(Protocol):
    """What the frame loop needs from every variant."""

    sprite: str
    x: float
    y: float

    def update(self, *args, **kwargs) -> None: ...
    def pixel_pos(self) -> tuple[float, float]: ...
    def render(self, surface, resources) -> None: ...


# ─────────────────────────────────────────
# Game objects
# ─────────────────────────────────────────

class Hazard:
    """A bug crawling left to right along one stone lane."""

    def __init__(self, lane=None, rng=None):
        self.rng = rng or random.Random()
        self.sprite = HAZARD_SPRITE
        self.y = lane if lane is not None else self.rng.choice(HAZARD_LANES)
        self.x = _wrap_offset(self.rng)
        self.speed = self.rng.uniform(SPEED_MIN, SPEED_MAX)

    def update(self, dt, max_x=COLS):
        self.x += dt * self.speed
        if self.x > max_x:
            # Random re-entry distance keeps hazards from bunching up
            self.x = _wrap_offset(self.rng)

    def pixel_pos(self):
        return (self.x * CELL_W, self.y * CELL_H - HAZARD_Y_OFFSET)

    def render(self, surface, resources):
        px, py = self.pixel_pos()
        surface.blit(resources.get(self.sprite), (int(px), int(py)))

    def check_collision(self, player, margin=COLLISION_MARGIN,
                        max_x=MAX_X, max_y=MAX_Y, auto_reset=False):
        """Return True and apply the hit if this hazard touches a live player."""
        if player.status != ALIVE:
            return False
        if not overlaps(self.x, self.y, player.x, player.y, margin):
            return False
        if auto_reset:
            player.reset(max_x, max_y)
        else:
            player.status = DEAD
        return True

    def reset(self):
        self.x = _wrap_offset(self.rng)
        self.speed = self.rng.uniform(SPEED_MIN, SPEED_MAX)


class Player:
    def __init__(self, max_x=MAX_X, max_y=MAX_Y, rng=None):
        self.rng = rng or random.Random()
        self.sprite = PLAYER_SPRITE
        self.x = self.rng.randint(0, max_x)
        self.y = max_y
        self.dx = 0
        self.dy = 0
        self.status = ALIVE
        self.score = 0

    def update(self, min_x=MIN_X, min_y=MIN_Y, max_x=MAX_X, max_y=MAX_Y):
        """Apply the pending step, clamp to the board and detect the goal row."""
        self.x = min(max(self.x + self.dx, min_x), max_x)
        self.dx = 0
        self.y = min(max(self.y + self.dy, min_y), max_y)
        self.dy = 0
        if self.y == min_y:
            self.status = WIN

    def handle_input(self, direction):
        """Queue a single unit step. Later input overwrites earlier input."""
        if self.status != ALIVE or direction not in DIRECTIONS:
            return
        self.dx, self.dy = DIRECTIONS[direction]

    def pixel_pos(self):
        return (self.x * CELL_W, self.y * CELL_H)

    def render(self, surface, resources):
        surface.blit(resources.get(self.sprite), self.pixel_pos())

    def reset(self, max_x=MAX_X, max_y=MAX_Y):
        self.x = self.rng.randint(0, max_x)
        self.y = max_y
        self.dx = 0
        self.dy = 0
        self.status = ALIVE
        self.score = 0


class Gem:
    """Stationary bonus worth its type (1, 2 or 3) points."""

    def __init__(self, lane, rng=None, gem_type=None, max_x=MAX_X):
        self.rng = rng or random.Random()
        self.type = gem_type if gem_type is not None else self.rng.randint(1, 3)
        self.sprite = GEM_SPRITES[self.type]
        self.x = self.rng.randint(0, max_x)
        self.y = lane
        self.collected = False

    @property
    def value(self):
        return self.type

    def update(self, dt=0.0):
        pass

    def check_collision(self, player):
        if self.collected or player.status != ALIVE:
            return False
        if not overlaps(self.x, self.y, player.x, player.y, 0.0):
            return False
        player.score += self.value
        self.collected = True
        return True

    def pixel_pos(self):
        return (self.x * CELL_W, self.y * CELL_H)

    def render(self, surface, resources):
        if self.collected:
            return
        surface.blit(resources.get(self.sprite), self.pixel_pos())

    def reset(self, max_x=MAX_X):
        self.collected = False
        self.x = self.rng.randint(0, max_x)


# ─────────────────────────────────────────
# Game state
# ─────────────────────────────────────────

class GameState:
    """Everything one game owns: the population, the player and the counters."""

    def __init__(self, seed=None, ruleset="standard", hazard_count=HAZARD_COUNT,
                 margin=COLLISION_MARGIN):
        if ruleset not in RULESETS:
            raise ValueError(f"Unknown ruleset: {ruleset!r}. Expected one of {RULESETS}")
        self.rng = random.Random(seed)
        self.ruleset = ruleset
        self.margin = margin

        self.hazards = []
        for i in range(hazard_count):
            # Every lane gets at least one hazard; extras land anywhere
            lane = HAZARD_LANES[i] if i < len(HAZARD_LANES) else None
            self.hazards.append(Hazard(lane, self.rng))

        self.gems = []
        if ruleset == "standard":
            self.gems = [Gem(lane, self.rng) for lane in HAZARD_LANES[:hazard_count]]

        self.player = Player(MAX_X, MAX_Y, self.rng)
        self.frame = 0
        self.elapsed = 0.0
        self.rounds = 1
        self.wins = 0
        self.deaths = 0

    @property
    def classic(self):
        return self.ruleset == "classic"

    @property
    def status(self):
        return self.player.status

    def step(self, dt):
        """Advance one frame of ``dt`` seconds."""
        self.frame += 1
        self.elapsed += dt
        before = self.player.status

        for h in self.hazards:
            h.update(dt, COLS)
        for g in self.gems:
            g.update(dt)

        self.player.update(MIN_X, MIN_Y, MAX_X, MAX_Y)
        if self.classic and self.player.status == WIN:
            print(f"[round] Player reached the water on frame {self.frame}")
            self.wins += 1
            self.player.reset(MAX_X, MAX_Y)
            return

        for h in self.hazards:
            if h.check_collision(self.player, self.margin, MAX_X, MAX_Y,
                                 auto_reset=self.classic):
                if self.classic:
                    self.deaths += 1
        for g in self.gems:
            g.check_collision(self.player)

        if before == ALIVE and self.player.status == WIN:
            self.wins += 1
        elif before == ALIVE and self.player.status == DEAD:
            self.deaths += 1

    def handle_key(self, token):
        """Route a keyboard token: restart after a round ends, else a direction."""
        if token == RESTART:
            if self.player.status != ALIVE:
                self.restart()
            return
        self.player.handle_input(token)

    def restart(self):
        for h in self.hazards:
            h.reset()
        for g in self.gems:
            g.reset(MAX_X)
        self.player.reset(MAX_X, MAX_Y)
        self.rounds += 1

    def entities(self) -> list[Entity]:
        """Entities in back-to-front draw order."""
        return [*self.hazards, self.player, *self.gems]

    def render(self, surface, resources):
        for e in self.entities():
            e.render(surface, resources)

    def nearest_hazard_gap(self, lane):
        """Columns between the player and the closest hazard still approaching in ``lane``.

        Returns ``float("inf")`` for a lane with nothing coming.
        """
        px = self.player.x
        gaps = [px - h.x for h in self.hazards if h.y == lane and h.x <= px + 1]
        return min(gaps) if gaps else float("inf")

    def encode(self):
        """Encode current state as dict for replay/recording."""
        return {
            "player": [self.player.x, self.player.y],
            "status": self.player.status,
            "score": self.player.score,
            "hazards": [[round(h.x, 4), h.y, round(h.speed, 4)] for h in self.hazards],
            "gems": [[g.x, g.y, g.type, g.collected] for g in self.gems],
            "frame": self.frame,
            "elapsed": round(self.elapsed, 4),
        }
