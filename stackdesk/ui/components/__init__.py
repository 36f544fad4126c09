"""Reusable UI components: action buttons, cards, response console."""

from stackdesk.ui.components.buttons import ActionButton, bind_action_button
from stackdesk.ui.components.cards import Card, StackCardWidget
from stackdesk.ui.components.console_view import ResponseConsoleView

__all__ = [
    "ActionButton",
    "bind_action_button",
    "Card",
    "StackCardWidget",
    "ResponseConsoleView",
]
