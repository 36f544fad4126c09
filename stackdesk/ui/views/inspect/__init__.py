from stackdesk.ui.views.inspect.view import InspectView

__all__ = ["InspectView"]
