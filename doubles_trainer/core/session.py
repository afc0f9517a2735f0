from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

DOUBLES: tuple[int, ...] = tuple(range(1, 21))
LAST_INDEX = len(DOUBLES) - 1
ROUND_SIZE = 3


class Outcome(Enum):
    HIT = "hit"
    MISS = "miss"


class ActionResult(Enum):
    """What a user action did to the session."""

    ACCEPTED = "accepted"
    COMMITTED = "committed"
    REJECTED_FULL = "rejected_full"
    NOTHING_TO_UNDO = "nothing_to_undo"


@dataclass(frozen=True)
class Throw:
    """A single dart thrown at one double."""

    outcome: Outcome
    double: int

    def __post_init__(self) -> None:
        if self.double not in DOUBLES:
            raise ValueError(f"double must be between 1 and 20, got {self.double}")

    @property
    def is_hit(self) -> bool:
        return self.outcome is Outcome.HIT

    @property
    def advanced_cursor(self) -> bool:
        """True if recording this throw moved the target on (hits below D20)."""
        return self.is_hit and self.double < DOUBLES[-1]


Round = tuple[Throw, ...]


class TrainerSession:
    """Round-based throw tracker for the ascending D1–D20 drill.

    Throws are buffered per round (at most three). Filling the buffer commits
    the round to the history automatically, unless an undo happened just
    before: ``suppress_auto_commit`` is set by :meth:`undo` and consumed by the
    next transition to a full buffer, so the user can fix a throw and then
    submit manually. A manual submit leaves the flag in place.

    Every action returns an :class:`ActionResult`; invalid actions are no-ops.
    """

    def __init__(self) -> None:
        self._cursor = 0
        self._pending: list[Throw] = []
        self._history: list[Round] = []
        self._committed: list[Throw] = []
        self._suppress_auto_commit = False

    @property
    def cursor(self) -> int:
        """Index (0-based) of the double currently being thrown at."""
        return self._cursor

    @property
    def current_double(self) -> int:
        return DOUBLES[self._cursor]

    @property
    def pending_throws(self) -> tuple[Throw, ...]:
        return tuple(self._pending)

    @property
    def history(self) -> tuple[Round, ...]:
        return tuple(self._history)

    @property
    def committed_throws(self) -> tuple[Throw, ...]:
        return tuple(self._committed)

    @property
    def suppress_auto_commit(self) -> bool:
        return self._suppress_auto_commit

    def all_throws(self) -> tuple[Throw, ...]:
        """Committed throws followed by the in-flight ones."""
        return tuple(self._committed) + tuple(self._pending)

    def can_record(self) -> bool:
        return len(self._pending) < ROUND_SIZE

    def can_undo(self) -> bool:
        return bool(self._pending or self._history)

    def record_outcome(self, outcome: Outcome) -> ActionResult:
        """Add a throw at the current double, advancing on a hit."""
        if not self.can_record():
            logger.debug("Ignoring %s: round buffer is full", outcome.value)
            return ActionResult.REJECTED_FULL

        throw = Throw(outcome=outcome, double=self.current_double)
        self._pending.append(throw)
        if throw.is_hit and self._cursor < LAST_INDEX:
            self._cursor += 1
        logger.debug("Recorded %s at D%d (%d pending)", outcome.value, throw.double, len(self._pending))

        if len(self._pending) == ROUND_SIZE:
            if self._suppress_auto_commit:
                self._suppress_auto_commit = False
                return ActionResult.ACCEPTED
            return self.commit_round()
        return ActionResult.ACCEPTED

    def commit_round(self) -> ActionResult:
        """Move the pending throws into the history.

        An empty buffer is committed as three misses at the current double,
        so skipping a target counts against it. A partial buffer is committed
        as-is.
        """
        if self._pending:
            round_ = tuple(self._pending)
        else:
            round_ = tuple(Throw(Outcome.MISS, self.current_double) for _ in range(ROUND_SIZE))
            logger.debug("Empty submit: penalising D%d", self.current_double)

        self._history.append(round_)
        self._committed.extend(round_)
        self._pending = []
        logger.debug("Committed round %d (%d throws)", len(self._history), len(round_))
        return ActionResult.COMMITTED

    def undo(self) -> ActionResult:
        """Remove the last pending throw, or reopen the last committed round."""
        if self._pending:
            throw = self._pending.pop()
            if throw.advanced_cursor and self._cursor > 0:
                self._cursor -= 1
            logger.debug("Undid pending %s at D%d", throw.outcome.value, throw.double)
        elif self._history:
            round_ = self._history.pop()
            del self._committed[len(self._committed) - len(round_):]
            self._pending = list(round_)
            rewind = sum(1 for t in round_ if t.is_hit)
            self._cursor = max(0, self._cursor - rewind)
            logger.debug("Reopened round %d for editing", len(self._history) + 1)
        else:
            return ActionResult.NOTHING_TO_UNDO

        self._suppress_auto_commit = True
        return ActionResult.ACCEPTED

    def reset(self) -> None:
        """Start the drill again from D1 with an empty history."""
        self._cursor = 0
        self._pending = []
        self._history = []
        self._committed = []
        self._suppress_auto_commit = False
        logger.info("Session reset")
