"""Poker hand evaluation primitives: ranks, suits, evaluation codes and showdown shares."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "combinations",
    "errors",
    "poker_evaluation",
    "poker_hand_evaluation",
    "poker_hand_evaluator",
    "rank",
    "suit",
]