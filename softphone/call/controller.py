"""
Call session controller: the state machine behind the call screen.
"""

import uuid
from typing import Callable, List, Optional

from softphone.call.keyboard import CALL_SHORTCUTS, ESCAPE, KeyboardHub, KeyEvent
from softphone.call.session import CallSession
from softphone.call.timer import DurationTimer
from softphone.config import settings
from softphone.navigation.router import CLOSE_GLOBAL_DIALER, Section
from softphone.utils.formatting import format_duration
from softphone.utils.logging import LoggerMixin, call_id_var


NavigationCallback = Callable[[str], None]
SessionListener = Callable[[CallSession], None]


class CallSessionController(LoggerMixin):
    """
    Owns the single call session and every transition on it.

    The controller is the only writer of the session. Readers either pull a
    snapshot through ``session`` or subscribe to be pushed one after every
    change. Navigation requests go out through a single callback registered
    by the view router.
    """

    def __init__(
        self,
        keyboard: Optional[KeyboardHub] = None,
        tick_interval: Optional[float] = None,
    ):
        """
        Initialize the controller in the idle state.

        Args:
            keyboard: Key event hub the in-call shortcuts attach to
            tick_interval: Seconds between duration ticks (defaults to settings)
        """
        self.keyboard = keyboard
        self._session = CallSession()
        self._timer = DurationTimer(self.tick, interval=tick_interval)
        self._navigation_callback: Optional[NavigationCallback] = None
        self._listeners: List[SessionListener] = []

    # ------------------------------------------------------------------
    # Read side

    @property
    def session(self) -> CallSession:
        """Snapshot of the current session."""
        return self._session.snapshot()

    @property
    def is_active(self) -> bool:
        return self._session.active

    @property
    def timer_running(self) -> bool:
        return self._timer.is_running

    def format_duration(self) -> str:
        return format_duration(self._session.duration_seconds)

    def subscribe(self, listener: SessionListener):
        """Receive a session snapshot after every state change."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: SessionListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_navigation_callback(self, callback: Optional[NavigationCallback]):
        """Register where navigation requests are sent."""
        self._navigation_callback = callback

    # ------------------------------------------------------------------
    # Call lifecycle

    def initiate_call(
        self,
        number: str,
        name: Optional[str] = None,
        avatar: Optional[str] = None,
    ):
        """
        Start a call to ``number``.

        The number is stored as given. A missing or empty name falls back to
        the configured default caller name.
        """
        if self._session.active:
            self.logger.warning("initiate_call_ignored", reason="call_already_active")
            return

        self._session = CallSession(
            active=True,
            dialed_number=number,
            caller_name=name or settings.default_caller_name,
            caller_avatar=avatar or "",
        )
        call_id_var.set(uuid.uuid4().hex)
        self.logger.info("call_initiated", number=number, caller_name=self._session.caller_name)
        self._after_change()

    def end_call(self):
        """End the call and return to the idle baseline."""
        if not self._session.active:
            return

        duration = self._session.duration_seconds
        self._session = CallSession()
        self._after_change()
        self.logger.info("call_ended", duration_seconds=duration)
        call_id_var.set(None)

    # ------------------------------------------------------------------
    # In-call controls

    def toggle_mute(self):
        self._toggle("muted")

    def toggle_hold(self):
        self._toggle("on_hold")

    def toggle_speaker(self):
        self._toggle("speaker_on")

    def toggle_recording(self):
        self._toggle("recording")

    def toggle_in_call_dialer(self):
        self._toggle("in_call_dialer_open")

    def toggle_call_minimized(self):
        """Flip between the full call screen and the corner widget."""
        if not self._toggle("minimized"):
            return
        if self._session.minimized:
            self._signal(CLOSE_GLOBAL_DIALER)

    def maximize_call(self):
        """Restore the full call screen and bring the dialer section forward."""
        if not self._session.active:
            return
        if self._session.minimized:
            self._session.minimized = False
            self._after_change()
        self._signal(Section.DIALER.value)

    def update_dialed_number(self, digits: str):
        if not self._session.active:
            return
        self._session.dialed_number = digits
        self._after_change()

    def tick(self):
        """Advance the call duration by one second."""
        if not self._session.should_tick:
            return
        self._session.duration_seconds += 1
        self._notify()

    # ------------------------------------------------------------------
    # Collaborator entry points

    def handle_section_change(self, section: str):
        """
        Auto-minimize or restore the call when the active section changes.

        Leaving the dialer minimizes a full-screen call; returning to it
        restores a minimized one. Repeated calls with the same section do
        nothing further.
        """
        session = self._session
        to_dialer = section == Section.DIALER.value

        if session.active and not session.minimized and not to_dialer:
            session.minimized = True
            self.logger.debug("call_auto_minimized", target=section)
            self._after_change()
            self._signal(CLOSE_GLOBAL_DIALER)
        elif session.active and session.minimized and to_dialer:
            session.minimized = False
            self.logger.debug("call_auto_restored")
            self._after_change()

    def handle_key(self, event: KeyEvent) -> Optional[str]:
        """
        Dispatch an in-call keyboard shortcut.

        Returns:
            Name of the action performed, or None if the key was not handled
        """
        if not self._session.active or event.in_text_field:
            return None

        key = event.normalized
        action = CALL_SHORTCUTS.get(key)
        if action:
            getattr(self, action)()
            return action

        if key == ESCAPE:
            if self._session.in_call_dialer_open:
                self.toggle_in_call_dialer()
                return "toggle_in_call_dialer"
            self.end_call()
            return "end_call"

        if self._session.in_call_dialer_open and event.is_dtmf:
            self.update_dialed_number(self._session.dialed_number + event.key)
            self.logger.info("dtmf_tone_sent", digit=event.key)
            return "send_dtmf"

        return None

    async def aclose(self):
        """End any active call and wait for the timer to unwind."""
        self.end_call()
        self._timer.stop()
        await self._timer.wait_stopped()

    # ------------------------------------------------------------------
    # Internals

    def _toggle(self, flag: str) -> bool:
        if not self._session.active:
            self.logger.debug("toggle_ignored", flag=flag, reason="no_active_call")
            return False
        value = not getattr(self._session, flag)
        setattr(self._session, flag, value)
        self.logger.info("call_flag_toggled", flag=flag, value=value)
        self._after_change()
        return True

    def _after_change(self):
        self._sync_timer()
        self._sync_keyboard()
        self._notify()

    def _sync_timer(self):
        if self._session.should_tick:
            self._timer.start()
        else:
            self._timer.stop()

    def _sync_keyboard(self):
        if self.keyboard is None:
            return
        if self._session.active:
            self.keyboard.add_listener(self.handle_key)
        else:
            self.keyboard.remove_listener(self.handle_key)

    def _notify(self):
        if not self._listeners:
            return
        snapshot = self._session.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                self.log_error("session_listener", e)

    def _signal(self, target: str):
        if self._navigation_callback is None:
            return
        self.logger.debug("navigation_signal", target=target)
        try:
            self._navigation_callback(target)
        except Exception as e:
            self.log_error("navigation_signal", e, target=target)
