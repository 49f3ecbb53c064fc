"""
View router tracking the active top-level section.
"""

from typing import Optional

from softphone.config import Section, settings
from softphone.utils.logging import LoggerMixin, section_var


# Navigation target meaning "close the globally presented dialer overlay"
CLOSE_GLOBAL_DIALER = "close-global-dialer"


class ViewRouter(LoggerMixin):
    """
    Tracks which section is shown and whether the global dialer overlay is open.

    Section changes are reported to the attached call controller, which may
    answer with navigation requests of its own through ``handle_call_signal``.
    """

    def __init__(self, default_section: Optional[str] = None):
        self.active_section = Section(default_section or settings.default_section)
        self.global_dialer_open = False
        self._controller = None
        section_var.set(self.active_section.value)

    def attach(self, controller):
        """Connect a call controller in both directions."""
        self._controller = controller
        controller.set_navigation_callback(self.handle_call_signal)

    def detach(self):
        if self._controller is not None:
            self._controller.set_navigation_callback(None)
            self._controller = None

    def navigate(self, section: str) -> Section:
        """
        Switch the active section.

        Raises:
            ValueError: If the section name is unknown
        """
        target = Section(section)
        if target == self.active_section:
            return target

        previous = self.active_section
        self.active_section = target
        section_var.set(target.value)
        self.logger.info("section_changed", previous=previous.value, current=target.value)

        if self._controller is not None:
            self._controller.handle_section_change(target.value)
        return target

    def handle_call_signal(self, target: str):
        """Apply a navigation request coming from the call controller."""
        if target == CLOSE_GLOBAL_DIALER:
            self.close_global_dialer()
        else:
            self.navigate(target)

    def open_global_dialer(self):
        self.global_dialer_open = True

    def close_global_dialer(self):
        if self.global_dialer_open:
            self.global_dialer_open = False
            self.logger.debug("global_dialer_closed")
