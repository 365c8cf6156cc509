# File: paperdrill_app/modules/exercise/logics/session_engine.py
"""
Sentence-reconstruction state machine.

Every transition takes an ``ExerciseSession`` and returns a new one; the
session object is never mutated in place. Phases per sentence:

    ASSEMBLING --check--> CORRECT | INCORRECT
    ASSEMBLING --reveal--> REVEALED --hide--> ASSEMBLING
    INCORRECT --retry--> ASSEMBLING          (tiles kept)
    CORRECT --advance--> next sentence | COMPLETED
    ASSEMBLING/REVEALED --skip--> next sentence | COMPLETED

Tile placement (place / remove / reorder) is only allowed while ASSEMBLING.
"""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from paperdrill_app.core.error_handlers import InvalidTransitionError, ValidationError
from paperdrill_app.modules.catalog.schemas import Sentence
from .normalizer import WhitespaceMode, answers_match


class Phase(str, Enum):
    ASSEMBLING = 'assembling'
    REVEALED = 'revealed'
    CORRECT = 'correct'
    INCORRECT = 'incorrect'
    COMPLETED = 'completed'


class Outcome(str, Enum):
    UNDETERMINED = 'undetermined'
    CORRECT = 'correct'
    INCORRECT = 'incorrect'


@dataclass(frozen=True)
class Tile:
    """A placed word; ``id`` tells repeated words apart."""
    id: str
    text: str


@dataclass(frozen=True)
class ExerciseSession:
    article_id: str
    sentences: Tuple[Sentence, ...]
    index: int = 0
    placed: Tuple[Tile, ...] = ()
    pool: Tuple[str, ...] = ()
    outcome: Outcome = Outcome.UNDETERMINED
    revealed: bool = False
    completed: bool = False

    @property
    def phase(self) -> Phase:
        if self.completed:
            return Phase.COMPLETED
        if self.revealed:
            return Phase.REVEALED
        if self.outcome is Outcome.CORRECT:
            return Phase.CORRECT
        if self.outcome is Outcome.INCORRECT:
            return Phase.INCORRECT
        return Phase.ASSEMBLING

    @property
    def total(self) -> int:
        return len(self.sentences)

    @property
    def current(self) -> Sentence:
        return self.sentences[self.index]

    @property
    def is_last(self) -> bool:
        return self.index == self.total - 1

    @property
    def can_check(self) -> bool:
        return self.phase is Phase.ASSEMBLING and bool(self.placed)

    @property
    def answer(self) -> str:
        return ' '.join(tile.text for tile in self.placed)


RandomSource = random.Random
TileIdFactory = Callable[[], str]


def new_tile_id() -> str:
    return uuid.uuid4().hex


def _require(session: ExerciseSession, *phases: Phase, action: str) -> None:
    if session.phase not in phases:
        allowed = ', '.join(p.value for p in phases)
        raise InvalidTransitionError(
            f"Cannot {action} while {session.phase.value} (allowed: {allowed})",
            phase=session.phase.value,
        )


def shuffle_words(words: Sequence[str], rng: Optional[RandomSource] = None) -> Tuple[str, ...]:
    """Fair shuffle that avoids handing back the stored order when it can."""
    rng = rng or random
    pool = list(words)
    rng.shuffle(pool)
    if len(set(words)) > 1:
        while pool == list(words):
            rng.shuffle(pool)
    return tuple(pool)


def initialize(session: ExerciseSession, rng: Optional[RandomSource] = None) -> ExerciseSession:
    """Fresh tile state for the sentence at ``session.index``."""
    return replace(
        session,
        pool=shuffle_words(session.current.words, rng),
        placed=(),
        outcome=Outcome.UNDETERMINED,
        revealed=False,
    )


def start(article_id: str, sentences: Optional[Sequence[Sentence]], rng: Optional[RandomSource] = None) -> ExerciseSession:
    """Open an exercise on the first sentence; an empty payload has no entry state."""
    if not sentences:
        raise InvalidTransitionError(f"Article {article_id} has no exercise sentences")
    return initialize(ExerciseSession(article_id=article_id, sentences=tuple(sentences)), rng)


def place(
    session: ExerciseSession,
    pool_index: int,
    word: Optional[str] = None,
    new_id: TileIdFactory = new_tile_id,
) -> ExerciseSession:
    """Move ``pool[pool_index]`` to the end of the placed tiles."""
    _require(session, Phase.ASSEMBLING, action='place a tile')
    if not 0 <= pool_index < len(session.pool):
        raise ValidationError(f"Pool index {pool_index} out of range")
    text = session.pool[pool_index]
    if word is not None and word != text:
        raise ValidationError(f"Pool index {pool_index} holds {text!r}, not {word!r}")
    pool = session.pool[:pool_index] + session.pool[pool_index + 1:]
    return replace(session, pool=pool, placed=session.placed + (Tile(id=new_id(), text=text),))


def _tile_position(session: ExerciseSession, tile_id: str) -> int:
    for position, tile in enumerate(session.placed):
        if tile.id == tile_id:
            return position
    raise ValidationError(f"No placed tile {tile_id}")


def reorder(session: ExerciseSession, tile_id: str, position: int) -> ExerciseSession:
    """Stable move of one placed tile to ``position`` (clamped)."""
    _require(session, Phase.ASSEMBLING, action='reorder tiles')
    source = _tile_position(session, tile_id)
    target = max(0, min(position, len(session.placed) - 1))
    if source == target:
        return session
    tiles = list(session.placed)
    tile = tiles.pop(source)
    tiles.insert(target, tile)
    return replace(session, placed=tuple(tiles))


def remove(session: ExerciseSession, tile_id: str) -> ExerciseSession:
    """Take a placed tile back; its word goes to the end of the pool."""
    _require(session, Phase.ASSEMBLING, action='remove a tile')
    position = _tile_position(session, tile_id)
    tile = session.placed[position]
    placed = session.placed[:position] + session.placed[position + 1:]
    return replace(session, placed=placed, pool=session.pool + (tile.text,))


def check_answer(session: ExerciseSession, mode: WhitespaceMode = WhitespaceMode.COLLAPSE) -> ExerciseSession:
    _require(session, Phase.ASSEMBLING, action='check the answer')
    if not session.placed:
        raise InvalidTransitionError("Place at least one tile before checking", phase=session.phase.value)
    correct = answers_match(session.current.reference, session.answer, mode)
    return replace(session, outcome=Outcome.CORRECT if correct else Outcome.INCORRECT)


def retry(session: ExerciseSession) -> ExerciseSession:
    """Back to assembling with the tiles exactly as they were."""
    _require(session, Phase.INCORRECT, action='retry')
    return replace(session, outcome=Outcome.UNDETERMINED)


def reveal(session: ExerciseSession) -> ExerciseSession:
    _require(session, Phase.ASSEMBLING, action='reveal the answer')
    return replace(session, revealed=True)


def hide(session: ExerciseSession) -> ExerciseSession:
    _require(session, Phase.REVEALED, action='hide the answer')
    return replace(session, revealed=False)


def _next_sentence(session: ExerciseSession, rng: Optional[RandomSource]) -> ExerciseSession:
    if session.is_last:
        return replace(session, completed=True, revealed=False)
    return initialize(replace(session, index=session.index + 1), rng)


def advance(session: ExerciseSession, rng: Optional[RandomSource] = None) -> ExerciseSession:
    _require(session, Phase.CORRECT, action='advance')
    return _next_sentence(session, rng)


def skip(session: ExerciseSession, rng: Optional[RandomSource] = None) -> ExerciseSession:
    _require(session, Phase.ASSEMBLING, Phase.REVEALED, action='skip')
    return _next_sentence(session, rng)


def session_view(session: ExerciseSession) -> dict:
    """Client-facing snapshot; the reference text only shows once earned or revealed."""
    phase = session.phase
    view = {
        'articleId': session.article_id,
        'phase': phase.value,
        'index': session.index,
        'total': session.total,
        'placed': [{'id': t.id, 'text': t.text} for t in session.placed],
        'pool': list(session.pool),
        'canCheck': session.can_check,
        'isLast': session.is_last,
    }
    if phase is not Phase.COMPLETED:
        view['hint'] = session.current.hint
    if phase in (Phase.REVEALED, Phase.CORRECT):
        view['reference'] = session.current.reference
    return view
