"""Server-rendered HTML pages (landing page, today dashboard)."""

from app.pages.root import render_root_page
from app.pages.today import render_today_page, render_today_panel

__all__ = [
    "render_root_page",
    "render_today_page",
    "render_today_panel",
]
