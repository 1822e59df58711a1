"""Lay out a grid once, then re-draw agent/goal pairs per episode."""

from arenaforge import generate_layout
from arenaforge.config import single_arena_cfg
from arenaforge.config.schema import GoalStrategy
from arenaforge.logging import init_logging
from arenaforge.placement import make_rng, reset_episode


def main() -> None:
    init_logging("info")
    cfg = single_arena_cfg(seed=7)
    result = generate_layout(cfg)
    outcome = result.outcomes[0]
    print("[episode_reset] initial", outcome.to_dict())

    rng = make_rng(1234)
    for episode in range(3):
        fresh = reset_episode(
            cfg.arena, outcome.arena, outcome.center, rng, strategy=GoalStrategy.REJECTING, strict=True
        )
        p = fresh.placement
        print(f"[episode_reset] episode {episode}: agent={p.agent.as_tuple()} goal={p.goal.as_tuple()} ok={fresh.ok}")


if __name__ == "__main__":
    main()
