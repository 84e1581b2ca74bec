#!/usr/bin/env python3
"""
texaspoker - Headless Simulation Script

Plays hands between random agents until one player holds every chip or
the hand limit is reached.

Usage:
    python run.py [--players N] [--hands N] [--seed SEED] [--log-level LEVEL]
"""

import argparse
import asyncio
import logging
import random

from texaspoker.agents import RandomAgent
from texaspoker.core.game import TexasHoldemGame
from texaspoker.schemas import TableConfig


logger = logging.getLogger(__name__)

AI_NAMES = ["Alice", "Bob", "Charlie", "Diana", "Eve", "Frank", "Grace", "Henry", "Iris"]


async def simulate(game: TexasHoldemGame, rng: random.Random, max_hands: int) -> None:
    agents = {
        p.player_id: RandomAgent(p.player_id, p.name, rng=random.Random(rng.random()))
        for p in game.players
    }
    for _ in range(max_hands):
        result = await game.play_hand(agents)
        if result is None:
            break
        logger.info(
            f"Hand #{result.hand_number}: {game.state.get_player(result.winner_id).name} "
            f"wins {result.amount}" + (f" with {result.description}" if result.showdown else "")
        )


def main():
    parser = argparse.ArgumentParser(description="texaspoker simulation")
    parser.add_argument("--players", type=int, default=4, help="Number of players (2-9)")
    parser.add_argument("--hands", type=int, default=20, help="Maximum number of hands")
    parser.add_argument("--seed", type=int, default=None, help="Seed for shuffling and agents")
    parser.add_argument("--small-blind", type=int, default=10)
    parser.add_argument("--big-blind", type=int, default=20)
    parser.add_argument("--buy-in", type=int, default=1000)
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    config = TableConfig(
        player_names=AI_NAMES[:args.players],
        small_blind=args.small_blind,
        big_blind=args.big_blind,
        buy_in=args.buy_in,
    )
    rng = random.Random(args.seed)
    game = TexasHoldemGame.from_config(config, rng=rng)

    asyncio.run(simulate(game, rng, args.hands))

    for player in sorted(game.players, key=lambda p: p.chips, reverse=True):
        logger.info(f"{player.name}: {player.chips} chips")
    logger.info(f"Leader: {game.leader().name}")


if __name__ == "__main__":
    main()
