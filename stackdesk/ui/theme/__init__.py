"""Design tokens and application stylesheet for the Qt UI."""

from stackdesk.ui.theme.manager import apply_theme, build_application_stylesheet
from stackdesk.ui.theme.tokens import Tokens, TokenSet

__all__ = ["Tokens", "TokenSet", "apply_theme", "build_application_stylesheet"]
