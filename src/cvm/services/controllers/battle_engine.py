"""UI-agnostic battle engine that owns the live state of one battle."""
from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, List

from cvm.core.rng import RNG
from cvm.core.types import BattlePhase
from cvm.domain.battle_models import BattleState
from cvm.domain.entities import Ability, Character, Monster
from cvm.services.battle_service import BattleService, BattleView

logger = logging.getLogger(__name__)

DeferredPhase = Callable[[BattleState, Character, RNG], BattleState]


class BattleEngine:
    """
    Owns the battle state for one character against one monster at a time.

    The engine wraps BattleService and adds the pieces the rules leave out:
    - the pending ability selection
    - the awaiting_selection / resolving / defeated phase
    - the queue of deferred phases (status tick, then counterattack)

    While deferred phases are queued the engine is resolving and rejects new
    selections, resolves and resets. Each deferred phase reads the latest
    state when it runs, never a snapshot captured when it was queued.

    Non-responsibilities (handled by presentation layer):
    - Rendering the log or pacing its display
    - Prompting for input
    """

    def __init__(self, battle_service: BattleService, character: Character, monster: Monster, rng: RNG) -> None:
        self._service = battle_service
        self._character = character
        self._rng = rng
        self._state = battle_service.start_battle(character, monster)
        self._pending_ability: Ability | None = None
        self._pending_phases: Deque[DeferredPhase] = deque()

    @property
    def state(self) -> BattleState:
        return self._state

    @property
    def character(self) -> Character:
        return self._character

    @property
    def pending_ability(self) -> Ability | None:
        return self._pending_ability

    @property
    def phase(self) -> BattlePhase:
        if self._pending_phases:
            return "resolving"
        if self._state.is_defeated:
            return "defeated"
        return "awaiting_selection"

    @property
    def has_pending_phases(self) -> bool:
        return bool(self._pending_phases)

    def get_battle_view(self) -> BattleView:
        """Return structured view of current battle state for rendering."""
        return self._service.get_battle_view(self._state, self._character)

    def available_abilities(self) -> List[Ability]:
        return self._service.available_abilities(self._state, self._character)

    def select_ability(self, ability: Ability) -> bool:
        """Mark ``ability`` as the one to use next. Returns False when the selection is rejected."""
        if self.phase != "awaiting_selection":
            logger.debug("Ignored selection of %r while %s", ability.name, self.phase)
            return False
        if ability not in self.available_abilities():
            logger.debug("Ignored selection of unavailable ability %r", ability.name)
            return False
        self._pending_ability = ability
        return True

    def begin_turn(self) -> BattleState:
        """Resolve the selected ability and queue the deferred phases."""
        if self.phase != "awaiting_selection":
            logger.debug("Ignored resolve while %s", self.phase)
            return self._state
        ability = self._pending_ability
        if ability is None:
            self._state = self._service.advise_no_selection(self._state)
            return self._state

        self._pending_ability = None
        self._state = self._service.resolve_action(self._state, self._character, ability, self._rng)
        if not self._state.is_defeated:
            self._pending_phases.extend((self._service.tick_status, self._service.counterattack))
        return self._state

    def run_next_phase(self) -> BattleState:
        """Apply the next deferred phase, if any, to the latest state."""
        if not self._pending_phases:
            return self._state
        phase = self._pending_phases.popleft()
        self._state = phase(self._state, self._character, self._rng)
        return self._state

    def resolve_turn(self) -> BattleState:
        """Resolve the selected ability and run its deferred phases to completion."""
        if self.phase != "awaiting_selection":
            logger.debug("Ignored resolve while %s", self.phase)
            return self._state
        self.begin_turn()
        while self._pending_phases:
            self.run_next_phase()
        return self._state

    def reset(self) -> BattleState:
        """Bring in a new monster and clear everything tied to the old one."""
        if self._pending_phases:
            logger.debug("Ignored reset while deferred phases are pending")
            return self._state
        self._pending_ability = None
        self._state = self._service.reset_battle(self._state, self._rng)
        return self._state
