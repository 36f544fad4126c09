"""Application layer.

Panel state and the components that act on it: preferences, busy lock, console,
stack list, tabs and the action dispatcher.

Rule of thumb:
UI -> application (dispatcher, state) -> services/domain
"""
