#!/usr/bin/env python3
"""Play a match between two Ultimate Tic-Tac-Toe agents."""
import argparse
import time
from functools import partial

from config import Config
from ai import (CustomHeuristic, MCTSAgent, MinimaxAgent, ParameterizedHeuristic,
                RandomAgent, RandomStartAgent)
from evaluation import play_match

AGENT_CHOICES = ('minimax', 'mcts', 'random')


def make_agent_factory(kind: str, config: Config):
    """Return a zero-argument callable building a fresh agent per game."""
    if kind == 'minimax':
        if config.minimax.heuristic == 'parameterized':
            heuristic = partial(ParameterizedHeuristic, weights=config.minimax.weights)
        else:
            heuristic = CustomHeuristic
        build = partial(MinimaxAgent, config.minimax.depth,
                        config.minimax.quiescence_depth, heuristic)
    elif kind == 'mcts':
        build = partial(MCTSAgent, config.mcts.iterations, config.mcts.seed)
    elif kind == 'random':
        build = RandomAgent
    else:
        raise ValueError(f"Unknown agent: {kind}")

    plies = config.match.random_opening_plies
    if plies > 0 and kind != 'random':
        return lambda: RandomStartAgent(plies, build())
    return build


def main():
    parser = argparse.ArgumentParser(description='Play Ultimate Tic-Tac-Toe agents against each other')
    parser.add_argument('agent_a', choices=AGENT_CHOICES, help='First agent')
    parser.add_argument('agent_b', choices=AGENT_CHOICES, help='Second agent')
    parser.add_argument('--games', type=int, default=None, help='Number of games')
    parser.add_argument('--workers', type=int, default=None, help='Worker threads')
    parser.add_argument('--depth', type=int, default=None, help='Minimax search depth')
    parser.add_argument('--quiescence-depth', type=int, default=None,
                        help='Quiescence search depth (0 disables it)')
    parser.add_argument('--heuristic', choices=('custom', 'parameterized'), default=None,
                        help='Minimax evaluation function')
    parser.add_argument('--iterations', type=int, default=None, help='MCTS iterations per move')
    parser.add_argument('--random-plies', type=int, default=None,
                        help='Random opening plies for diversity')
    parser.add_argument('--no-alternate', action='store_true',
                        help='Agent A always plays first')
    args = parser.parse_args()

    config = Config()
    if args.games is not None:
        config.match.num_games = args.games
    if args.workers is not None:
        config.match.num_workers = args.workers
    if args.depth is not None:
        config.minimax.depth = args.depth
    if args.quiescence_depth is not None:
        config.minimax.quiescence_depth = args.quiescence_depth
    if args.heuristic is not None:
        config.minimax.heuristic = args.heuristic
    if args.iterations is not None:
        config.mcts.iterations = args.iterations
    if args.random_plies is not None:
        config.match.random_opening_plies = args.random_plies
    config.match.alternate = not args.no_alternate

    print(f"=== {args.agent_a} vs {args.agent_b} ===")
    print(f"Games: {config.match.num_games}, workers: {config.match.num_workers}")

    start = time.time()
    result = play_match(
        make_agent_factory(args.agent_a, config),
        make_agent_factory(args.agent_b, config),
        num_games=config.match.num_games,
        num_workers=config.match.num_workers,
        alternate=config.match.alternate,
    )
    elapsed = time.time() - start

    print("\nResults:")
    print(f"  {args.agent_a} (A) won {result.win_rate_a:.2%}")
    print(f"  {args.agent_b} (B) won {result.win_rate_b:.2%}")
    print(f"  Draws: {result.draw_rate:.2%}")
    print(f"  Score A: {result.score_a:.3f}")
    print(f"Time taken: {elapsed:.1f}s")


if __name__ == "__main__":
    main()
