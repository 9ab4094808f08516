"""Game state machine: rounds, playback, input validation and resets."""

import asyncio
import logging
import random
from typing import Optional

from keyecho.models import (
    AppConfig,
    Difficulty,
    GamePhase,
    InputOutcome,
    OverlayKind,
    PhysicalKeyPolicy,
    RoundSnapshot,
    RoundState,
    SoundEvent,
)
from keyecho.protocols import GameEvent, GameObserver, Renderer, SoundPlayer, Target
from keyecho.utils import ObserverManager

from .playback import LEAD_IN_SECONDS, OverlayTracker, SequencePlayer, SleepFn
from .sequence import alphabet_for, generate_sequence

logger = logging.getLogger(__name__)

ROUND_WON_MESSAGE = "Congratulations! You win round!"
GAME_WON_MESSAGE = "Congratulations! You win game!"
FATAL_MESSAGE = "Error! Try again!"

# Phases from which a round may be started
_STARTABLE = (GamePhase.IDLE, GamePhase.ROUND_WON, GamePhase.GAME_WON)


class GameController:
    """
    The game's state machine and the single owner of RoundState.

    UI-agnostic: all presentation goes through a Renderer and all sound
    through a SoundPlayer, so the same controller drives the Textual UI
    and the test suite.

    Every entry point gates on the current GamePhase rather than on what
    the screen shows. Entry points called in the wrong phase are ignored
    (and report it through their return value) instead of raising.

    Wrong keys are transitions, not exceptions:
    - first wrong key: the error budget is spent and the round continues at
      the same cursor position
    - second wrong key: the game resets to round 1
    """

    def __init__(
        self,
        renderer: Renderer,
        sound: SoundPlayer,
        difficulty: Difficulty = Difficulty.EASY,
        *,
        physical_key_policy: PhysicalKeyPolicy = PhysicalKeyPolicy.PER_DIFFICULTY,
        max_repeats: Optional[int] = 1,
        rng: Optional[random.Random] = None,
        sleep: SleepFn = asyncio.sleep,
    ):
        """
        Initialize the controller.

        Args:
            renderer: Presentation collaborator
            sound: Sound collaborator
            difficulty: Initial difficulty tier
            physical_key_policy: Which tiers accept typed keys
            max_repeats: Replays allowed per round (None = unlimited)
            rng: Random source for sequence generation (seed it for reproducible games)
            sleep: Awaitable sleep used for every timed step
        """
        self._renderer = renderer
        self._sound = sound
        self._state = RoundState(difficulty=Difficulty(difficulty))
        self._phase = GamePhase.IDLE
        self._policy = physical_key_policy
        self._max_repeats = max_repeats
        self._rng = rng
        self._sleep = sleep

        self._player = SequencePlayer(renderer, sound, sleep)
        self._overlay = OverlayTracker(renderer, sleep)
        self._observers = ObserverManager[GameObserver](observer_type_name="game")

        if physical_key_policy == PhysicalKeyPolicy.HARD_ONLY:
            logger.info("Physical keys restricted to Hard difficulty")

    @classmethod
    def from_config(
        cls, config: AppConfig, renderer: Renderer, sound: SoundPlayer, **kwargs
    ) -> "GameController":
        """Create a controller using the game settings from `config`."""
        return cls(
            renderer,
            sound,
            config.default_difficulty,
            physical_key_policy=config.physical_key_policy,
            max_repeats=config.max_repeats_per_round,
            **kwargs,
        )

    # =================================================================
    # Read-only state
    # =================================================================

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def difficulty(self) -> Difficulty:
        return self._state.difficulty

    @property
    def current_round(self) -> int:
        return self._state.current_round

    @property
    def keyboard_enabled(self) -> bool:
        """True while the controller is reading player symbols."""
        return self._phase == GamePhase.AWAITING_INPUT

    @property
    def state(self) -> RoundSnapshot:
        """Immutable snapshot of the round state."""
        return self._state.snapshot()

    @property
    def active_overlay(self) -> Optional[OverlayKind]:
        return self._overlay.active

    async def wait_for_overlays(self) -> None:
        """Wait until every success/failure overlay has expired."""
        await self._overlay.wait()

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: GameObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: GameObserver) -> None:
        self._observers.unregister(observer)

    # =================================================================
    # Commands
    # =================================================================

    def present(self) -> None:
        """Render the initial screen for the current difficulty."""
        self._renderer.mark_difficulty(self._state.difficulty)
        self._show_layouts()
        self._renderer.set_text(Target.MESSAGE, "")
        self._reset()

    def new_game(self) -> bool:
        """
        Abandon the current game and return to round 1.

        Returns:
            False if ignored because a playback is running
        """
        if self._phase == GamePhase.DEMONSTRATING:
            logger.debug("New game ignored during playback")
            return False

        logger.info("New game requested")
        self._reset()
        return True

    def select_difficulty(self, difficulty: Difficulty) -> bool:
        """
        Switch difficulty tier. Only allowed while idle.

        Returns:
            False if ignored because a game is in progress
        """
        if self._phase != GamePhase.IDLE:
            logger.debug(f"Difficulty change to {difficulty} ignored in phase {self._phase.value}")
            return False

        self._state.difficulty = Difficulty(difficulty)
        self._renderer.mark_difficulty(self._state.difficulty)
        self._show_layouts()
        self._renderer.set_text(Target.MESSAGE, "")
        self._reset()

        logger.info(f"Difficulty set to {self._state.difficulty.value}")
        self._notify(GameEvent.DIFFICULTY_CHANGED, difficulty=self._state.difficulty)
        return True

    async def start_round(self) -> bool:
        """
        Generate the sequence for the current round and play it back.

        Returns once playback has finished and the keyboard is live.

        Returns:
            False if ignored (a round is already running)
        """
        if self._phase not in _STARTABLE:
            logger.debug(f"Start ignored in phase {self._phase.value}")
            return False

        if self._phase == GamePhase.GAME_WON:
            self._state.reset()

        state = self._state
        state.begin_round(generate_sequence(state.current_round, state.difficulty, self._rng))
        self._phase = GamePhase.DEMONSTRATING

        r = self._renderer
        r.set_text(Target.FIELD, "")
        r.set_text(Target.ROUND, f"Round: {state.current_round}")
        r.set_visible(Target.START, False)
        r.set_visible(Target.NEW_GAME, True)
        r.set_visible(Target.REPEAT, True)
        r.set_enabled(Target.NEW_GAME, False)
        r.set_enabled(Target.REPEAT, False)
        r.set_enabled(Target.KEYBOARD, False)
        r.set_enabled(Target.DIFFICULTY, False)

        logger.info(
            f"Round {state.current_round} started ({state.difficulty.value}, "
            f"{len(state.sequence)} keys)"
        )
        self._notify(GameEvent.ROUND_STARTED, sequence_length=len(state.sequence))

        await self._sleep(LEAD_IN_SECONDS)
        await self._demonstrate()
        return True

    async def repeat_sequence(self) -> bool:
        """
        Play the same sequence again and restart input from its first key.

        Round number and error budget are left untouched.

        Returns:
            False if ignored (not awaiting input, or no repeats left)
        """
        if self._phase != GamePhase.AWAITING_INPUT or not self._repeat_available():
            logger.debug("Repeat ignored")
            return False

        self._state.repeats_used += 1
        self._state.rewind()
        self._phase = GamePhase.DEMONSTRATING

        self._renderer.set_enabled(Target.REPEAT, False)
        self._renderer.set_enabled(Target.KEYBOARD, False)
        self._renderer.set_text(Target.FIELD, "")

        logger.info(f"Repeating round {self._state.current_round} sequence")
        await self._demonstrate()
        return True

    # =================================================================
    # Input
    # =================================================================

    def on_physical_key(self, key: str) -> InputOutcome:
        """
        Handle a typed key.

        The key is upper-cased and must belong to the current difficulty's
        alphabet; the physical-key policy may also rule out the tier entirely.
        """
        if not self.keyboard_enabled:
            return InputOutcome.IGNORED

        symbol = key.upper()
        if len(symbol) != 1:
            return InputOutcome.IGNORED
        if self._policy == PhysicalKeyPolicy.HARD_ONLY and self._state.difficulty != Difficulty.HARD:
            return InputOutcome.IGNORED
        if symbol not in alphabet_for(self._state.difficulty):
            return InputOutcome.IGNORED

        return self._dispatch(symbol)

    def on_control_activated(self, symbol: str) -> InputOutcome:
        """Handle an on-screen key; its label is used as-is."""
        if not self.keyboard_enabled:
            return InputOutcome.IGNORED
        return self._dispatch(symbol)

    def handle_input(self, symbol: str) -> InputOutcome:
        """
        Validate one symbol against the sequence and apply the transition.

        Returns:
            The transition that fired
        """
        if self._phase != GamePhase.AWAITING_INPUT:
            return InputOutcome.IGNORED

        state = self._state
        if symbol == state.expected_symbol:
            state.accept(symbol)
            self._renderer.set_text(Target.FIELD, "".join(state.user_progress))
            logger.debug(f"Accepted {symbol!r} ({state.cursor}/{len(state.sequence)})")

            if state.is_complete:
                if state.is_final_round:
                    return self._win_game()
                return self._win_round()

            self._notify(GameEvent.SYMBOL_ACCEPTED, symbol=symbol)
            return InputOutcome.ACCEPTED

        if state.error_budget >= 1:
            state.error_budget -= 1
            self._renderer.set_text(Target.MESSAGE, f"Error! Errors left: {state.error_budget}")
            self._sound.play(SoundEvent.ERROR)
            self._overlay.flash(OverlayKind.FAILURE)

            logger.info(f"Wrong key {symbol!r}, expected {state.expected_symbol!r}; budget spent")
            self._notify(GameEvent.MISMATCH_FIRST_OFFENSE, symbol=symbol)
            return InputOutcome.MISMATCH_FIRST_OFFENSE

        logger.info(f"Wrong key {symbol!r} with no budget left; restarting from round 1")
        self._renderer.set_text(Target.MESSAGE, FATAL_MESSAGE)
        self._sound.play(SoundEvent.FAIL)
        self._reset()
        self._renderer.set_enabled(Target.START, True)
        self._overlay.flash(OverlayKind.FAILURE)
        self._notify(GameEvent.MISMATCH_FATAL, symbol=symbol)
        return InputOutcome.MISMATCH_FATAL

    # =================================================================
    # Transitions
    # =================================================================

    def _dispatch(self, symbol: str) -> InputOutcome:
        # Key click first: sounddevice.play() stops whatever is playing, so
        # the result cue must be the last sound started.
        self._sound.play(SoundEvent.KEYBOARD)
        return self.handle_input(symbol)

    async def _demonstrate(self) -> None:
        self._notify(GameEvent.DEMONSTRATION_STARTED)
        await self._player.demonstrate(self._state.sequence)

        self._phase = GamePhase.AWAITING_INPUT
        self._renderer.set_enabled(Target.KEYBOARD, True)
        self._renderer.set_enabled(Target.NEW_GAME, True)
        self._renderer.set_enabled(Target.REPEAT, self._repeat_available())
        self._notify(GameEvent.DEMONSTRATION_FINISHED)

    def _win_round(self) -> InputOutcome:
        self._state.current_round += 1
        self._phase = GamePhase.ROUND_WON

        r = self._renderer
        r.set_text(Target.MESSAGE, ROUND_WON_MESSAGE)
        r.set_enabled(Target.KEYBOARD, False)
        r.set_text(Target.START, "next")
        r.set_visible(Target.START, True)
        r.set_enabled(Target.START, True)
        r.set_visible(Target.REPEAT, False)
        self._sound.play(SoundEvent.WIN_ROUND)
        self._overlay.flash(OverlayKind.SUCCESS)

        logger.info(f"Round won; next round is {self._state.current_round}")
        self._notify(GameEvent.ROUND_WON)
        return InputOutcome.ROUND_WON

    def _win_game(self) -> InputOutcome:
        self._state.game_won = True
        self._phase = GamePhase.GAME_WON

        r = self._renderer
        r.set_text(Target.MESSAGE, GAME_WON_MESSAGE)
        r.set_enabled(Target.KEYBOARD, False)
        r.set_enabled(Target.REPEAT, False)
        r.set_text(Target.START, "start")
        r.set_visible(Target.START, True)
        r.set_enabled(Target.START, True)
        self._sound.play(SoundEvent.WIN)
        self._overlay.flash(OverlayKind.SUCCESS)

        logger.info("Game won")
        self._notify(GameEvent.GAME_WON)
        return InputOutcome.GAME_WON

    def _reset(self) -> None:
        self._state.reset()
        self._phase = GamePhase.IDLE

        r = self._renderer
        r.set_text(Target.FIELD, "")
        r.set_text(Target.ROUND, "Round: 1")
        r.set_text(Target.START, "start")
        r.set_visible(Target.NEW_GAME, False)
        r.set_visible(Target.START, True)
        r.set_enabled(Target.START, True)
        r.set_visible(Target.REPEAT, False)
        r.set_enabled(Target.KEYBOARD, False)
        r.set_enabled(Target.DIFFICULTY, True)

        self._notify(GameEvent.GAME_RESET)

    def _repeat_available(self) -> bool:
        if self._max_repeats is None:
            return True
        return self._state.repeats_used < self._max_repeats

    def _show_layouts(self) -> None:
        difficulty = self._state.difficulty
        self._renderer.set_visible(
            Target.DIGIT_KEYS, difficulty in (Difficulty.EASY, Difficulty.HARD)
        )
        self._renderer.set_visible(
            Target.LETTER_KEYS, difficulty in (Difficulty.MEDIUM, Difficulty.HARD)
        )

    def _notify(self, event: GameEvent, **kwargs) -> None:
        self._observers.notify(
            "on_game_event",
            event,
            phase=self._phase,
            round_number=self._state.current_round,
            **kwargs,
        )
