"""App shell: main window, tab bar, stack controller, lazy panels."""

from stackdesk.ui.shell.main_window import MainWindow
from stackdesk.ui.shell.stack_controller import StackController
from stackdesk.ui.shell.tab_bar import TabBar

__all__ = ["MainWindow", "StackController", "TabBar"]
