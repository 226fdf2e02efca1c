"""
Simple page router for Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.practice import render_practice_page
from app.pages.library import render_library_page


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[], None]


PAGES = [
    AppPage(title="Practice", render=render_practice_page),
    AppPage(title="Word Lists", render=render_library_page),
]
