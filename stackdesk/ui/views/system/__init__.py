from stackdesk.ui.views.system.view import SystemView

__all__ = ["SystemView"]
