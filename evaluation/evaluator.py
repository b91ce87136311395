"""
Match engine for Ultimate Tic-Tac-Toe agents.

Games are independent: every game gets fresh agents from the factories and
is played to completion by a single worker. Nothing is shared between
games except what the factories choose to share (e.g. a BenchedAgent sink).
"""
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, Optional

from tqdm import tqdm
from game import Game, GameOutcome, Player, UltimateBoard
from ai.agent import Agent

AgentFactory = Callable[[], Agent]


# ─── Match result ────────────────────────────────────────────────

@dataclass
class MatchResult:
    wins_a: int = 0
    wins_b: int = 0
    draws: int = 0
    games: int = 0

    @property
    def win_rate_a(self):
        return self.wins_a / self.games if self.games else 0.0

    @property
    def win_rate_b(self):
        return self.wins_b / self.games if self.games else 0.0

    @property
    def draw_rate(self):
        return self.draws / self.games if self.games else 0.0

    @property
    def score_a(self):
        """Score for agent A (win=1, draw=0.5, loss=0)."""
        return (self.wins_a + 0.5 * self.draws) / self.games if self.games else 0.5

    def record(self, outcome: GameOutcome, a_is_p1: bool) -> None:
        self.games += 1
        if not outcome.is_win:
            self.draws += 1
        elif (outcome.winner == Player.ONE) == a_is_p1:
            self.wins_a += 1
        else:
            self.wins_b += 1


# ─── Single game ─────────────────────────────────────────────────

def play_game(agent_one: Agent, agent_two: Agent,
              board: Optional[UltimateBoard] = None) -> GameOutcome:
    """Play one game to the end. Illegal or missing moves propagate."""
    return Game(agent_one, agent_two, board).play()


def _play_indexed(game_idx: int, make_agent_a: AgentFactory, make_agent_b: AgentFactory,
                  alternate: bool):
    a_is_p1 = not alternate or game_idx % 2 == 0
    agent_a, agent_b = make_agent_a(), make_agent_b()
    if a_is_p1:
        outcome = play_game(agent_a, agent_b)
    else:
        outcome = play_game(agent_b, agent_a)
    return outcome, a_is_p1


# ─── Match ───────────────────────────────────────────────────────

def play_match(
    make_agent_a: AgentFactory,
    make_agent_b: AgentFactory,
    num_games: int,
    num_workers: int = 1,
    alternate: bool = True,
    disable_tqdm: bool = False,
) -> MatchResult:
    """Play num_games between agents built by the two factories.

    Args:
        make_agent_a: Builds agent A for one game.
        make_agent_b: Builds agent B for one game.
        num_games: Total games to play.
        num_workers: Size of the worker pool; 1 plays sequentially.
        alternate: Swap seats every other game (A starts the even games).
        disable_tqdm: Hide the progress bar.

    Returns:
        MatchResult with win/draw counts from agent A's perspective.
    """
    if num_games < 0:
        raise ValueError(f"num_games must be >= 0, got {num_games}")
    if num_workers < 1:
        raise ValueError(f"num_workers must be >= 1, got {num_workers}")

    result = MatchResult()
    pbar = tqdm(total=num_games, desc="Games", leave=False, disable=disable_tqdm, ncols=100)

    if num_workers == 1:
        for game_idx in range(num_games):
            outcome, a_is_p1 = _play_indexed(game_idx, make_agent_a, make_agent_b, alternate)
            result.record(outcome, a_is_p1)
            pbar.update(1)
            pbar.set_postfix({"A": result.wins_a, "B": result.wins_b, "D": result.draws})
    else:
        with ThreadPoolExecutor(max_workers=num_workers) as executor:
            futures = [
                executor.submit(_play_indexed, game_idx, make_agent_a, make_agent_b, alternate)
                for game_idx in range(num_games)
            ]
            for future in as_completed(futures):
                outcome, a_is_p1 = future.result()
                result.record(outcome, a_is_p1)
                pbar.update(1)
                pbar.set_postfix({"A": result.wins_a, "B": result.wins_b, "D": result.draws})

    pbar.close()
    return result
