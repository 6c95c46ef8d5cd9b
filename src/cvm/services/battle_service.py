"""Battle rules: every operation maps a BattleState to a new BattleState."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List

from cvm.core.rng import RNG
from cvm.domain.battle_models import BattleState
from cvm.domain.entities import Ability, Character, Monster, MonsterStatus
from cvm.domain.status import apply_debuff, apply_dot, apply_stun, clear_stun, tick_dot
from cvm.services.ability_generator import AbilityGenerator
from cvm.services.factories import respawn_monster

logger = logging.getLogger(__name__)

ULTIMATE_UNLOCK_THRESHOLD = 0.30
ULTIMATE_MARKER = "⚡"

STUN_DAMAGE_RANGE = (5, 15)
DEBUFF_DAMAGE_RANGE = (3, 11)
KIND_DAMAGE_RANGES = {
    "attack": (15, 35),
    "defense": (5, 15),
    "ultimate": (40, 70),
}
SUPPORT_DAMAGE_RANGE = (5, 10)


@dataclass(slots=True)
class BattleView:
    """Presentation view for the current battle state."""

    character_name: str
    monster_name: str
    monster_description: str
    hp: int
    max_hp: int
    status_tags: List[str]
    turn_count: int
    is_defeated: bool
    ultimate_name: str | None
    raw_status: MonsterStatus


@dataclass(frozen=True, slots=True)
class ActionOutcome:
    """Damage, narration and resulting monster status for one ability use."""

    damage: int
    text: str
    status: MonsterStatus


class BattleService:
    """Stateless battle rules for a single character against a single monster."""

    def __init__(self, ability_generator: AbilityGenerator) -> None:
        self._ability_generator = ability_generator

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def start_battle(self, character: Character, monster: Monster) -> BattleState:
        state = BattleState(monster=monster)
        return state.with_log(f"The battle begins! {character.name} versus {monster.name}!")

    def reset_battle(self, state: BattleState, rng: RNG) -> BattleState:
        """Replace the monster and clear every per-monster field."""
        monster = respawn_monster(state.monster, rng)
        logger.debug("Reset battle: %s replaced by %s (%d hp)", state.monster.name, monster.name, monster.hp)
        return BattleState(monster=monster).with_log(f"A new enemy appears: {monster.name}!")

    def get_battle_view(self, state: BattleState, character: Character) -> BattleView:
        """Return structured information for rendering."""
        monster = state.monster
        return BattleView(
            character_name=character.name,
            monster_name=monster.name,
            monster_description=monster.description,
            hp=monster.hp,
            max_hp=monster.max_hp,
            status_tags=describe_status(monster.status),
            turn_count=state.turn_count,
            is_defeated=state.is_defeated,
            ultimate_name=state.ultimate_ability.name if state.ultimate_available and state.ultimate_ability else None,
            raw_status=monster.status,
        )

    def available_abilities(self, state: BattleState, character: Character) -> List[Ability]:
        """Return the character's abilities plus the ultimate while it is usable."""
        abilities = list(character.abilities)
        if state.ultimate_available and state.ultimate_ability is not None:
            abilities.append(state.ultimate_ability)
        return abilities

    # -----------------------
    # Player Actions
    # -----------------------
    def advise_no_selection(self, state: BattleState) -> BattleState:
        return state.with_log("Choose an ability before making a move!")

    def resolve_action(self, state: BattleState, character: Character, ability: Ability, rng: RNG) -> BattleState:
        """Apply the player's ability: damage, status, defeat check, ultimate unlock."""
        if state.is_defeated:
            return state

        outcome = self.compute_outcome(character, state.monster, ability, rng)
        text = outcome.text
        ultimate_available = state.ultimate_available
        if ability.is_ultimate:
            text = f"{ULTIMATE_MARKER} {text} {ULTIMATE_MARKER}"
            ultimate_available = False

        monster = replace(
            state.monster,
            hp=_clamp_hp(state.monster.hp - outcome.damage, state.monster.max_hp),
            status=outcome.status,
        )
        next_state = replace(
            state,
            monster=monster,
            turn_count=state.turn_count + 1,
            ultimate_available=ultimate_available,
        ).with_log(text, is_player_action=True, is_special=ability.is_ultimate)
        logger.debug(
            "Turn %d: %s used %r for %d damage (%s hp %d/%d)",
            next_state.turn_count,
            character.name,
            ability.name,
            outcome.damage,
            monster.name,
            monster.hp,
            monster.max_hp,
        )

        next_state = self._check_defeat(next_state, character)
        return self.check_ultimate_unlock(next_state, character, rng)

    def compute_outcome(self, character: Character, monster: Monster, ability: Ability, rng: RNG) -> ActionOutcome:
        """Work out damage and narration for an ability without touching any state."""
        effect = ability.effect
        status = monster.status
        who = character.name
        target = monster.name

        if effect is not None and effect.kind == "damage":
            damage = effect.value
            return ActionOutcome(damage, f"{who} uses {ability.name} and deals {damage} damage to {target}!", status)

        if effect is not None and effect.kind == "dot":
            damage = effect.value // 2
            status = apply_dot(status, damage=effect.value, turns=effect.duration)
            text = (
                f"{who} uses {ability.name}, dealing {damage} damage! {target} will take "
                f"{status.dot_damage} more damage each turn for {_turns(status.dot_turns)}."
            )
            return ActionOutcome(damage, text, status)

        if effect is not None and effect.kind == "stun":
            damage = rng.randrange(*STUN_DAMAGE_RANGE)
            status = apply_stun(status)
            text = (
                f"{who} uses {ability.name}, dealing {damage} damage! "
                f"{target} is stunned for {_turns(effect.duration or 1)}."
            )
            return ActionOutcome(damage, text, status)

        if effect is not None and effect.kind == "debuff":
            damage = rng.randrange(*DEBUFF_DAMAGE_RANGE)
            status = apply_debuff(status, percent=effect.value)
            text = f"{who} uses {ability.name}, dealing {damage} damage and weakening {target} by {effect.value}%!"
            return ActionOutcome(damage, text, status)

        if effect is not None and effect.kind == "aoe":
            damage = effect.value
            text = f"{who} unleashes {ability.name}, engulfing everything around {target} for {damage} damage!"
            return ActionOutcome(damage, text, status)

        # heal, buff and effect-less abilities fall back to the ability kind
        damage = rng.randrange(*KIND_DAMAGE_RANGES.get(ability.kind, SUPPORT_DAMAGE_RANGE))
        if ability.kind == "attack":
            text = f"{who} attacks with {ability.name} and deals {damage} damage!"
        elif ability.kind == "defense":
            text = f"{who} counters with {ability.name}, dealing {damage} damage!"
        elif ability.kind == "ultimate":
            text = f"{who} unleashes the ultimate {ability.name}, dealing {damage} damage!"
        else:
            text = f"{who} uses {ability.name} and deals {damage} damage."
        return ActionOutcome(damage, text, status)

    # -----------------------
    # Deferred Phases
    # -----------------------
    def tick_status(self, state: BattleState, character: Character, rng: RNG) -> BattleState:
        """Apply one turn of damage-over-time to the monster."""
        if state.is_defeated or not state.monster.status.has_dot:
            return state

        tick = tick_dot(state.monster.status)
        monster = replace(
            state.monster,
            hp=_clamp_hp(state.monster.hp - tick.damage, state.monster.max_hp),
            status=tick.status,
        )
        text = f"{monster.name} takes {tick.damage} damage from lingering effects."
        if tick.expired:
            text += " The effect wears off."
        next_state = state.with_monster(monster).with_log(text)
        next_state = self._check_defeat(next_state, character)
        return self.check_ultimate_unlock(next_state, character, rng)

    def counterattack(self, state: BattleState, character: Character, rng: RNG) -> BattleState:
        """Run the monster's turn. The monster never deals damage."""
        if state.is_defeated:
            return state
        monster = state.monster
        if monster.status.stunned:
            # stun always lasts exactly one monster turn, whatever duration was narrated
            stunned_state = state.with_monster(replace(monster, status=clear_stun(monster.status)))
            return stunned_state.with_log(f"{monster.name} is stunned and cannot act!")
        return state.with_log(f"{monster.name} tries to attack {character.name}, but fails!")

    # -----------------------
    # Helpers
    # -----------------------
    def check_ultimate_unlock(self, state: BattleState, character: Character, rng: RNG) -> BattleState:
        """Unlock the ultimate the first time the monster drops to the threshold.

        Once an ultimate exists for this monster it is never regenerated.
        """
        if state.is_defeated or state.ultimate_ability is not None:
            return state
        if state.monster.hp_ratio > ULTIMATE_UNLOCK_THRESHOLD:
            return state

        ultimate = self._ability_generator.generate_ultimate(character, rng)
        logger.info("Ultimate unlocked for %s: %s", character.name, ultimate.name)
        unlocked = replace(state, ultimate_ability=ultimate, ultimate_available=True)
        return unlocked.with_log(
            f"{state.monster.name} is badly wounded! {character.name} unlocks the ultimate ability: {ultimate.name}!",
            is_special=True,
        )

    def _check_defeat(self, state: BattleState, character: Character) -> BattleState:
        if state.is_defeated or state.monster.is_alive:
            return state
        logger.debug("%s defeated on turn %d", state.monster.name, state.turn_count)
        return replace(state, is_defeated=True).with_log(f"{character.name} defeats {state.monster.name}!")


def describe_status(status: MonsterStatus) -> List[str]:
    """Return short labels for the active status effects."""
    tags: List[str] = []
    if status.stunned:
        tags.append("Stunned")
    if status.has_dot:
        tags.append(f"Burning {status.dot_damage}/turn ({_turns(status.dot_turns)})")
    if status.debuff > 0:
        tags.append(f"Weakened -{status.debuff}%")
    return tags


def _clamp_hp(hp: int, max_hp: int) -> int:
    return max(0, min(max_hp, hp))


def _turns(count: int) -> str:
    return f"{count} turn" if count == 1 else f"{count} turns"
