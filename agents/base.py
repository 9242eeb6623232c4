"""
Agent contract shared by every Blokus decision-maker.
"""

from __future__ import annotations

from typing import List, Protocol, Union

from engine.legality import PlayerInputs
from engine.move_generator import GiveUp, Move
from engine.pieces import Piece

Decision = Union[Move, GiveUp]


class Agent(Protocol):
    """
    Minimal agent contract consumed by the game driver.

    Agents only choose among moves the move generator produces; they never
    mutate the game state. description() identifies the agent in
    tournaments, so two agents with equal descriptions are considered the
    same agent.
    """

    def make_move(self, inputs: PlayerInputs, pieces: List[Piece]) -> Decision:
        ...

    def description(self) -> str:
        ...
