"""
Play session: the facade a host UI talks to.

Wraps the active game, records every action the player makes and
keeps a win/loss tally and per-difficulty best times across games.
"""
import random
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from .cell import CellState
from .config import PRESETS, BoardConfig, Difficulty, GameOptions
from .game import Game, Phase
from .grid import Coord
from .reveal import RevealResult


# ============================================================================
# Play Log
# ============================================================================

class PlayType(Enum):
    """Kinds of player action."""

    REVEAL = "reveal"
    REVEAL_CHORD = "reveal_chord"
    CHORD = "chord"
    FLAG = "flag"


@dataclass(frozen=True)
class PlayEntry:
    """A single recorded action."""

    coord: Coord
    play_type: PlayType


@dataclass
class PlayLog:
    """Actions taken during the current game."""

    entries: List[PlayEntry] = field(default_factory=list)

    def push(self, entry: PlayEntry) -> None:
        self.entries.append(entry)

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)

    def _count(self, *play_types: PlayType) -> int:
        return sum(1 for e in self.entries if e.play_type in play_types)

    @property
    def clicks(self) -> int:
        return len(self.entries)

    @property
    def reveals(self) -> int:
        return self._count(PlayType.REVEAL, PlayType.REVEAL_CHORD)

    @property
    def flags(self) -> int:
        return self._count(PlayType.FLAG)

    @property
    def chords(self) -> int:
        return self._count(PlayType.CHORD, PlayType.REVEAL_CHORD)


# ============================================================================
# Best Times
# ============================================================================

MAX_ENTRIES_PER_BOARD = 25


@dataclass(frozen=True)
class BestTime:
    """A winning time on a leaderboard."""

    player: str
    time: float
    date: datetime


@dataclass
class LeaderBoard:
    """Fastest wins for one difficulty, quickest first."""

    entries: List[BestTime] = field(default_factory=list)

    def add(self, player: str, time: float) -> BestTime:
        entry = BestTime(player, time, datetime.now())
        self.entries.append(entry)
        self.sort_and_trim()
        return entry

    def sort_and_trim(self) -> None:
        """Order by time and keep the top ``MAX_ENTRIES_PER_BOARD``."""
        self.entries.sort(key=lambda e: e.time)
        del self.entries[MAX_ENTRIES_PER_BOARD:]

    @property
    def best(self) -> Optional[BestTime]:
        return self.entries[0] if self.entries else None

    def __len__(self) -> int:
        return len(self.entries)


# ============================================================================
# Session
# ============================================================================

class Session:
    """
    Sequence of games played at one configuration.

    Attributes:
        game: The active game.
        plays: Actions recorded for the active game.
        wins: Games won this session.
        losses: Games lost this session.
        leaderboards: Best winning times per preset difficulty.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
        options: Optional[GameOptions] = None,
        player: str = "Player",
    ) -> None:
        self.options = options or GameOptions()
        self.player = player
        self.game = Game(config, rng=rng, options=self.options)
        self.plays = PlayLog()
        self.wins = 0
        self.losses = 0
        self.leaderboards: Dict[Difficulty, LeaderBoard] = {
            difficulty: LeaderBoard() for difficulty in Difficulty
        }

    @property
    def config(self) -> BoardConfig:
        return self.game.config

    @property
    def difficulty(self) -> Optional[Difficulty]:
        """Preset matching the current board, or None for a custom one."""
        for difficulty, preset in PRESETS.items():
            if preset == self.config:
                return difficulty
        return None

    def leaderboard_for(self, difficulty: Difficulty) -> LeaderBoard:
        return self.leaderboards[difficulty]

    def new_game(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        mine_count: Optional[int] = None,
    ) -> Game:
        """Start a new game, keeping the tally."""
        self.game.new_game(width, height, mine_count)
        self.plays.clear()
        return self.game

    def new_game_for(self, difficulty: Difficulty) -> Game:
        """Start a new game at a preset difficulty."""
        preset = BoardConfig.for_difficulty(difficulty)
        return self.new_game(preset.width, preset.height, preset.num_mines)

    def restart(self) -> Game:
        """Replay the current mine layout from the start."""
        self.game.restart()
        self.plays.clear()
        return self.game

    # ========================================================================
    # Recorded Actions
    # ========================================================================

    def _play(self, coord: Coord, play_type: PlayType) -> None:
        self.plays.push(PlayEntry(coord, play_type))

    @property
    def _active(self) -> bool:
        return not self.game.phase.is_over and not self.game.is_paused

    def _tally(self, before: Phase) -> None:
        after = self.game.phase
        if before == after:
            return
        if after == Phase.WON:
            self.wins += 1
            self._record_time()
        elif after == Phase.LOST:
            self.losses += 1

    def _record_time(self) -> None:
        # Custom boards have no leaderboard
        difficulty = self.difficulty
        if difficulty is not None:
            self.leaderboards[difficulty].add(self.player, self.game.elapsed_time)

    def open(self, coord: Coord) -> RevealResult:
        """Primary action: open, or reveal-chord if enabled."""
        before, active = self.game.phase, self._active
        result = self.game.primary_action(coord)
        if active:
            play_type = (PlayType.REVEAL_CHORD if self.options.left_click_chord
                         else PlayType.REVEAL)
            self._play(coord, play_type)
        self._tally(before)
        return result

    def chord(self, coord: Coord) -> RevealResult:
        before, active = self.game.phase, self._active
        result = self.game.chord(coord)
        if active:
            self._play(coord, PlayType.CHORD)
        self._tally(before)
        return result

    def toggle_flag(self, coord: Coord) -> Optional[CellState]:
        active = self._active
        state = self.game.toggle_flag(coord)
        if active:
            self._play(coord, PlayType.FLAG)
        return state

    @property
    def games_played(self) -> int:
        return self.wins + self.losses
