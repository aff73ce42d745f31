"""
Dispatch of recognized gesture labels to application actions.

The recognizer only produces labels. What a label does is decided here,
through a table of label -> action name bindings and a table of action name
-> handler callables supplied by the application. Handlers own any device
access; the dispatcher never touches devices itself.
"""

import logging
from typing import Callable, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

Handler = Callable[[], object]

DEFAULT_BINDINGS = {
    '<': 'start_audio_capture',
    '>': 'start_video_capture',
    'V': 'call_guardian',
    '^': 'alert_police',
}

DEFAULT_MESSAGES = {
    'start_audio_capture': 'Audio recording started...',
    'start_video_capture': 'Video recording started...',
    'call_guardian': 'Emergency call to guardian initiated!',
    'alert_police': 'Alert sent to the nearby police station!',
}

UNRECOGNIZED_MESSAGE = 'Gesture not recognized. Try again.'


class ActionDispatcher:
    """Maps gesture labels to named actions and runs their handlers."""

    def __init__(self, handlers: Mapping[str, Handler],
                 bindings: Optional[Mapping[str, str]] = None,
                 fallback: Optional[Handler] = None):
        self.handlers: Dict[str, Handler] = dict(handlers)
        self.bindings: Dict[str, str] = dict(DEFAULT_BINDINGS if bindings is None else bindings)
        self.fallback = fallback

        for label, action in self.bindings.items():
            if action not in self.handlers:
                logger.warning(f"Gesture '{label}' is bound to '{action}' which has no handler")

    def action_for(self, label: str) -> Optional[str]:
        """Action name bound to a label, or None."""
        return self.bindings.get(label)

    def dispatch(self, label: str) -> Optional[str]:
        """
        Run the action bound to a label.

        Returns:
            The name of the action that ran, or None when the label is
            unbound (the fallback handler runs instead) or its action has
            no handler
        """
        action = self.bindings.get(label)
        if action is None:
            logger.debug(f"No action bound to '{label}'")
            if self.fallback is not None:
                self.fallback()
            return None

        handler = self.handlers.get(action)
        if handler is None:
            logger.warning(f"No handler for action '{action}' (gesture '{label}')")
            return None

        logger.info(f"Dispatching '{action}' for gesture '{label}'")
        handler()
        return action


def message_handlers(sink: Callable[[str], object],
                     messages: Optional[Mapping[str, str]] = None) -> Dict[str, Handler]:
    """Handlers that deliver each action's status message to `sink`."""
    messages = DEFAULT_MESSAGES if messages is None else messages
    return {action: (lambda text=text: sink(text)) for action, text in messages.items()}


def message_dispatcher(sink: Callable[[str], object]) -> ActionDispatcher:
    """Dispatcher that reports every default action, and misses, as a message."""
    return ActionDispatcher(
        message_handlers(sink),
        DEFAULT_BINDINGS,
        fallback=lambda: sink(UNRECOGNIZED_MESSAGE)
    )
