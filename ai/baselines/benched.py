"""
Timing wrapper around another agent.

Every act() call appends one ActRecord to a sink list shared between games.
Games run on worker threads, so appends go through a lock.
"""
import threading
import time
from dataclasses import dataclass
from typing import List, Optional

from game import UltimateBoard
from ai.agent import Agent, AgentInfo


@dataclass
class ActRecord:
    name: str
    config: str
    player: str
    ply: int
    duration_us: int


class BenchedAgent(Agent):
    def __init__(self, agent: Agent, sink: Optional[List[ActRecord]] = None,
                 lock: Optional[threading.Lock] = None):
        self.agent = agent
        self.sink = sink if sink is not None else []
        self.lock = lock if lock is not None else threading.Lock()
        self.name = f"Benched({agent.name})"

    def act(self, board: UltimateBoard) -> Optional[int]:
        player = board.current_player.name
        ply = board.move_count()

        start = time.perf_counter()
        move = self.agent.act(board)
        elapsed = time.perf_counter() - start

        info = self.agent.info()
        record = ActRecord(info.name, info.config, player, ply, int(elapsed * 1e6))
        with self.lock:
            self.sink.append(record)
        return move

    def info(self) -> AgentInfo:
        inner = self.agent.info()
        return AgentInfo(f"Benched({inner.name})", inner.config)
