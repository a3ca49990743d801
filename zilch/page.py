"""Numbered pages, each with its own arrangement of windows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .window import WindowLayout


@dataclass(eq=False)
class Page:
    """A numbered screenful of windows."""

    number: int
    layout: WindowLayout = field(default_factory=WindowLayout)


class PageSet:
    """The pages of a session, kept in order of number, and the current one.

    ``messages``, if given, is a message line told which page is shown.
    """

    def __init__(self, layout: WindowLayout | None = None, messages: Any = None) -> None:
        self.pages: list[Page] = []
        self.highest = 0
        self.messages = messages
        self._template = layout if layout is not None else WindowLayout()
        self.current: Page = self.new_page(0)
        self.current.layout = self._template
        self._sync()

    def _sync(self) -> None:
        single = len(self.pages) == 1
        for page in self.pages:
            page.layout.single_page = single

    def _find(self, number: int) -> Page | None:
        return next((p for p in self.pages if p.number == number), None)

    def new_page(self, number: int) -> Page:
        """Add an empty page numbered ``number`` in its place in the order."""
        source = self._template
        page = Page(number, WindowLayout(source.screen_size, source.max_screen_size))
        if not self.pages or number > self.highest:
            self.pages.append(page)
            self.highest = number
        else:
            index = next((i for i, p in enumerate(self.pages) if number <= p.number),
                         len(self.pages))
            self.pages.insert(index, page)
        self._sync()
        return page

    def _make_current(self, page: Page) -> None:
        for window in self.current.layout.windows:
            window._save_position()
        self.current = page
        self._template = page.layout
        for window in page.layout.windows:
            window.modified = True

    def switch(self, number: int) -> Page:
        """Show page ``number``, making it as a copy of the current page if new."""
        page = self._find(number)
        if page is None:
            layout = self.current.layout.copy()
            page = self.new_page(number)
            page.layout = layout
            self._sync()
        self._make_current(page)
        if self.messages is not None:
            self.messages.report_number("Page ", number, "")
        for window in page.layout.windows:
            window.ready()
        return page

    def generate(self, number: int) -> Page:
        """Make and show a new empty page numbered after ``number``."""
        candidate = number + 1
        if number != self.highest:
            while self._find(candidate) is not None:
                candidate += 1
        page = self.new_page(candidate)
        self._make_current(page)
        return page

    def next_page(self) -> Page:
        """Show the next page numbered 0 or more; LookupError at the last."""
        index = self.pages.index(self.current)
        following = next((p for p in self.pages[index + 1:] if p.number >= 0), None)
        if following is None:
            raise LookupError("This is the last page!")
        return self.switch(following.number)

    def previous_page(self) -> Page:
        """Show the previous page numbered 0 or more; LookupError at the first."""
        index = self.pages.index(self.current)
        preceding = next((p for p in reversed(self.pages[:index]) if p.number >= 0), None)
        if preceding is None:
            raise LookupError("This is the first page!")
        return self.switch(preceding.number)

    def previous_of(self, page: Page) -> Page | None:
        """Return the page before ``page``, or None if it is the first."""
        index = self.pages.index(page)
        return self.pages[index - 1] if index > 0 else None