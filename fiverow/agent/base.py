from __future__ import annotations

import abc

from fiverow.game.session import GomokuGame
from fiverow.game.types import Move


class Agent(abc.ABC):
    @abc.abstractmethod
    def select_move(self, game: GomokuGame) -> Move:
        """Return the cell where this agent wants to play."""

    @property
    def name(self) -> str:
        return self.__class__.__name__
