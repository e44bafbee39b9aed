"""Entry point for Flappy Bird with difficulty tiers."""

from __future__ import annotations

import argparse
import logging

from game import FlappyGame
from settings import SCORES_FILE, Difficulty


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Flap through the pipes and beat your best score!")
    parser.add_argument(
        "--difficulty",
        choices=[tier.value for tier in Difficulty],
        default=Difficulty.MEDIUM.value,
        help="Tier preselected in the menu (keys 1-4 change it in game).",
    )
    parser.add_argument(
        "--scores",
        default=SCORES_FILE,
        help="JSON file holding the best score of each tier.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed pipe and particle randomness for reproducible runs.",
    )
    parser.add_argument(
        "--hand",
        action="store_true",
        help="Also flap by raising your hand in front of the webcam.",
    )
    parser.add_argument(
        "--debug-hand",
        action="store_true",
        help="Show a debug window with the MediaPipe hand landmarks.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity of the console log.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = FlappyGame(
        difficulty=Difficulty(args.difficulty),
        scores_path=args.scores,
        seed=args.seed,
        enable_hand_control=args.hand,
        debug_hand=args.debug_hand,
    )
    game.run()


if __name__ == "__main__":
    main()
