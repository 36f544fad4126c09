from stackdesk.ui.views.create.view import CreateView

__all__ = ["CreateView"]
