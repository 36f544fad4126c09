"""StackDesk: desktop control panel for the stack lifecycle API."""
