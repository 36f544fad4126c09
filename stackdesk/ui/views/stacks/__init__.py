from stackdesk.ui.views.stacks.view import StacksView

__all__ = ["StacksView"]
