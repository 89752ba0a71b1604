#!/usr/bin/env python3
"""Headless round simulator — plays one round with a scripted policy, records replay data."""

from game_engine import GameState, FPS, ALIVE

# Safety limit: stop if a round exceeds this many frames (~2 minutes at 60fps)
MAX_FRAMES = 7_200

# A human taps a key a few times per second, not every frame
DECISION_INTERVAL = max(1, FPS // 4)


def simulate(policy, seed=0, ruleset="standard", max_frames=MAX_FRAMES,
             hazard_count=None, margin=None):
    """
    Run one headless round.

    Args:
        policy: object with ``decide(state) -> token | None``
        seed: random seed for deterministic replay
        ruleset: "standard" or "classic"
        max_frames: frame cap before the round counts as a timeout

    Returns:
        dict: {
            'outcome': 'win' | 'dead' | 'timeout',
            'frames_alive': int,
            'score': int,
            'seed': int,
            'frames': list of frame dicts for replay
        }

    Each frame dict is the output of GameState.encode() plus a 'decision'
    key with the policy's token (None when it chose to wait).

    The classic ruleset never ends a round on its own, so the first win or
    death is taken as the outcome there.
    """
    kwargs = {}
    if hazard_count is not None:
        kwargs["hazard_count"] = hazard_count
    if margin is not None:
        kwargs["margin"] = margin
    game = GameState(seed=seed, ruleset=ruleset, **kwargs)
    dt = 1.0 / FPS
    frames = []
    decision = None

    while game.frame < max_frames:
        if game.player.status != ALIVE or game.wins or game.deaths:
            break

        if game.frame % DECISION_INTERVAL == 0:
            decision = policy.decide(game)
            game.handle_key(decision)
        else:
            decision = None

        # Record every other frame for replay (keeps data manageable)
        if game.frame % 2 == 0:
            state = game.encode()
            state["decision"] = decision
            frames.append(state)

        game.step(dt)

    if game.wins:
        outcome = "win"
    elif game.deaths:
        outcome = "dead"
    else:
        outcome = "timeout"

    # Record final frame
    if frames and frames[-1].get("frame") != game.frame:
        final = game.encode()
        final["decision"] = decision
        frames.append(final)

    return {
        "outcome": outcome,
        "frames_alive": game.frame,
        "score": game.player.score,
        "seed": seed,
        "frames": frames,
    }


def simulate_batch(policy_name, seeds, ruleset="standard", max_frames=MAX_FRAMES,
                   hazard_count=None, margin=None):
    """Run multiple rounds sequentially with a fresh policy per seed.

    Used by the simulation runner in worker processes; takes a policy
    name rather than an instance so the arguments stay picklable.
    """
    from lanecross.policies.registry import load_policy

    return [
        simulate(load_policy(policy_name, seed=seed), seed=seed,
                 ruleset=ruleset, max_frames=max_frames,
                 hazard_count=hazard_count, margin=margin)
        for seed in seeds
    ]


if __name__ == "__main__":
    from lanecross.policies.scripted import CautiousPolicy

    result = simulate(CautiousPolicy(), seed=42)
    print(f"Outcome: {result['outcome']} after {result['frames_alive']} frames "
          f"({result['frames_alive'] / FPS:.1f} sec), score {result['score']}")
    print(f"Frames recorded: {len(result['frames'])}")
