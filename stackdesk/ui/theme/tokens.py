"""
Design tokens: colors, spacing, radius. One dark palette; widgets read ``Tokens``.
"""
from __future__ import annotations


class TokenSet:
    __slots__ = (
        "background_main", "surface", "surface_hover",
        "primary", "primary_hover",
        "text_primary", "text_secondary",
        "border",
        "success", "warning", "error",
        "space_xs", "space_sm", "space_md", "space_lg",
        "radius_sm", "radius_md", "radius_lg",
        "card_padding", "border_width",
    )

    def __init__(
        self,
        *,
        background_main: str = "#1a1b26",
        surface: str = "#252736",
        surface_hover: str = "#2d2e3d",
        primary: str = "#3b82f6",
        primary_hover: str = "#60a5fa",
        text_primary: str = "#e2e8f0",
        text_secondary: str = "#94a3b8",
        border: str = "#334155",
        success: str = "#22c55e",
        warning: str = "#eab308",
        error: str = "#ef4444",
        space_xs: int = 4,
        space_sm: int = 8,
        space_md: int = 12,
        space_lg: int = 16,
        radius_sm: int = 6,
        radius_md: int = 10,
        radius_lg: int = 14,
        card_padding: int = 14,
        border_width: int = 1,
    ) -> None:
        self.background_main = background_main
        self.surface = surface
        self.surface_hover = surface_hover
        self.primary = primary
        self.primary_hover = primary_hover
        self.text_primary = text_primary
        self.text_secondary = text_secondary
        self.border = border
        self.success = success
        self.warning = warning
        self.error = error
        self.space_xs = space_xs
        self.space_sm = space_sm
        self.space_md = space_md
        self.space_lg = space_lg
        self.radius_sm = radius_sm
        self.radius_md = radius_md
        self.radius_lg = radius_lg
        self.card_padding = card_padding
        self.border_width = border_width

    def state_color(self, state: str) -> str:
        """Accent for a console record state: ok / error / idle."""
        return {"ok": self.success, "error": self.error}.get(state, self.text_secondary)

    def status_color(self, status: str) -> str:
        """Accent for a stack status badge."""
        s = status.lower()
        if s == "running":
            return self.success
        if s in ("failed", "node_deleted"):
            return self.error
        if s == "creating":
            return self.warning
        return self.text_secondary


Tokens: TokenSet = TokenSet()
