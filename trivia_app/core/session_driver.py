"""Owns the quiz session and wires it to storage, the question provider and the countdown."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future
import logging
import random

from trivia_app.constants.quiz_constants import TICK_INTERVAL_MS
from trivia_app.core.models import (
    AnswerQuestion,
    Event,
    FinishQuiz,
    LoadState,
    Login,
    Reset,
    Session,
    SetQuestions,
    Tick,
)
from trivia_app.core.question_formatter import format_questions
from trivia_app.core.services.question_provider import (
    QuestionProvider,
    QuestionProviderError,
    RawQuestion,
)
from trivia_app.core.services.runners import FetchRunner, InlineFetchRunner, TickScheduler
from trivia_app.core.services.scoreboard import ScoreSummary, summarize
from trivia_app.core.services.session_store import SessionStore
from trivia_app.core.session_reducer import initial_session, transition

logger = logging.getLogger(__name__)

SessionListener = Callable[[Session], None]


class SessionDriver:
    """Single owner of the :class:`Session` value.

    Every change goes through :meth:`dispatch`, which applies the pure
    transition, persists the result, notifies listeners, and then reacts to the
    new state: finishing a session whose time or questions ran out, keeping the
    one-second tick armed, and fetching questions when the session waits for
    them. All of this runs on one thread; the fetch runner hands provider
    results back to that thread.
    """

    def __init__(
        self,
        store: SessionStore,
        provider: QuestionProvider,
        scheduler: TickScheduler,
        fetch_runner: FetchRunner | None = None,
        shuffle_rng: random.Random | None = None,
    ) -> None:
        self._store = store
        self._provider = provider
        self._scheduler = scheduler
        self._fetch_runner = fetch_runner or InlineFetchRunner()
        self._shuffle_rng = shuffle_rng or random.Random()

        self._state: Session = initial_session()
        self._listeners: list[SessionListener] = []
        self._fetch_in_flight: bool = False
        self._armed_for_timer: int | None = None

    @property
    def current_state(self) -> Session:
        return self._state

    @property
    def is_fetch_in_flight(self) -> bool:
        return self._fetch_in_flight

    def subscribe(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- Lifecycle ---

    def start(self) -> None:
        """Seed the session from the store, then react to whatever was restored."""
        restored = self._store.load()
        if restored.session is not None:
            logger.info("Restoring saved quiz for %r", restored.session.username)
            self.dispatch(LoadState(restored.session))
        elif restored.username:
            logger.info("Restoring login for %r", restored.username)
            self.dispatch(Login(restored.username))
        else:
            self._store.save(self._state)
            self._react()

    def stop(self) -> None:
        self._scheduler.cancel()
        self._armed_for_timer = None

    # --- Presentation entry points ---

    def dispatch(self, event: Event) -> Session:
        self._state = transition(self._state, event)
        self._store.save(self._state)
        for listener in list(self._listeners):
            listener(self._state)
        self._react()
        return self._state

    def login(self, name: str) -> bool:
        """Log in with ``name``; blank names are refused without dispatching."""
        cleaned = name.strip()
        if not cleaned:
            return False
        self.dispatch(Login(cleaned))
        return True

    def answer(self, choice: str) -> bool:
        state = self._state
        if state.is_quiz_finished or state.current_question is None:
            logger.warning("Ignoring answer %r: no question is open", choice)
            return False
        self.dispatch(AnswerQuestion(choice))
        return True

    def finish(self) -> None:
        self.dispatch(FinishQuiz())

    def reset(self) -> None:
        self.dispatch(Reset())

    def summary(self) -> ScoreSummary:
        return summarize(self._state)

    # --- Reactions to state changes ---

    def _react(self) -> None:
        if self._should_finish(self._state):
            self.dispatch(FinishQuiz())
            return
        self._sync_ticking()
        self._maybe_fetch_questions()

    @staticmethod
    def _should_finish(state: Session) -> bool:
        if not state.is_logged_in or state.is_quiz_finished:
            return False
        if state.timer <= 0:
            return True
        return bool(state.questions) and state.current_question_index >= len(state.questions)

    def _sync_ticking(self) -> None:
        state = self._state
        if state.is_logged_in and not state.is_quiz_finished:
            if self._armed_for_timer != state.timer:
                self._armed_for_timer = state.timer
                self._scheduler.schedule(TICK_INTERVAL_MS, self._handle_tick)
        elif self._armed_for_timer is not None:
            self._armed_for_timer = None
            self._scheduler.cancel()

    def _handle_tick(self) -> None:
        self._armed_for_timer = None
        state = self._state
        if not state.is_logged_in or state.is_quiz_finished:
            return
        self.dispatch(Tick())

    def _maybe_fetch_questions(self) -> None:
        if not self._state.is_awaiting_questions or self._fetch_in_flight:
            return
        self._fetch_in_flight = True
        logger.info("Requesting questions for %r", self._state.username)
        self._fetch_runner.submit(self._provider.fetch_questions, self._handle_fetch_done)

    def _handle_fetch_done(self, future: Future[list[RawQuestion]]) -> None:
        self._fetch_in_flight = False
        if future.cancelled():
            return
        try:
            records = future.result()
        except QuestionProviderError as exc:
            logger.warning("Error fetching questions: %s", exc)
            return

        if not records:
            logger.warning("Question provider returned an empty batch")
            return
        if not self._state.is_awaiting_questions:
            logger.info("Discarding %d fetched questions; session no longer waiting", len(records))
            return
        self.dispatch(SetQuestions(format_questions(records, self._shuffle_rng)))
