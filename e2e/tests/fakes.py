"""
ブラウザなしで core / flows を動かすための Page / Locator の代役。
使うメソッドだけ実装している。
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Optional

from playwright.sync_api import Error as PlaywrightError


class FakeElement:
    def __init__(
        self,
        text: str = "",
        visible: bool = True,
        children: Optional[Dict[str, List["FakeElement"]]] = None,
        on_click: Optional[Callable[[], None]] = None,
    ):
        self.text = text
        self.visible = visible
        self.children = children or {}
        self.on_click = on_click
        self.value = ""
        self.clicks = 0


class FakeHandle:
    def __init__(self, element: FakeElement, page: "FakePage"):
        self.element = element
        self.page = page

    def evaluate(self, expression: str):
        # "el => el.isConnected" だけ対応
        return self.page.is_connected(self.element)


class FakeLocator:
    def __init__(self, resolve: Callable[[], List[FakeElement]], page: Optional["FakePage"] = None):
        self._resolve = resolve
        self._page = page

    def _all(self) -> List[FakeElement]:
        return list(self._resolve())

    def _one(self) -> FakeElement:
        els = self._all()
        if not els:
            raise PlaywrightError("element not found")
        return els[0]

    @property
    def first(self) -> "FakeLocator":
        return self.nth(0)

    def nth(self, i: int) -> "FakeLocator":
        return FakeLocator(lambda: self._all()[i:i + 1], self._page)

    def count(self) -> int:
        return len(self._all())

    def is_visible(self) -> bool:
        els = self._all()
        return bool(els) and els[0].visible

    def inner_text(self) -> str:
        return self._one().text

    def all_inner_texts(self) -> List[str]:
        return [e.text for e in self._all()]

    def locator(self, selector: str) -> "FakeLocator":
        return FakeLocator(lambda: [c for e in self._all() for c in e.children.get(selector, [])], self._page)

    def element_handle(self, timeout: Optional[int] = None) -> FakeHandle:
        return FakeHandle(self._one(), self._page)

    def click(self, timeout: Optional[int] = None) -> None:
        el = self._one()
        el.clicks += 1
        if el.on_click:
            el.on_click()

    def fill(self, text: str) -> None:
        self._one().value = text


class FakePage:
    def __init__(self, url: str = "about:blank"):
        self.url = url
        self.elements: Dict[str, List[FakeElement]] = {}
        self.html = ""
        self.history: List[str] = []
        self.handlers: List[tuple] = []
        self.load_waits = 0

    def add(self, selector: str, *elements: FakeElement) -> List[FakeElement]:
        self.elements.setdefault(selector, []).extend(elements)
        return self.elements[selector]

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(lambda: self.elements.get(selector, []), self)

    def is_connected(self, element: FakeElement) -> bool:
        def walk(els):
            return any(e is element or walk([c for cs in e.children.values() for c in cs]) for e in els)
        return walk([e for els in self.elements.values() for e in els])

    def wait_for_load_state(self, state: str = "load", timeout: Optional[int] = None) -> None:
        self.load_waits += 1

    def content(self) -> str:
        return self.html

    def goto(self, url: str) -> None:
        self.history.append(self.url)
        self.url = url

    def go_back(self) -> None:
        if self.history:
            self.url = self.history.pop()

    def once(self, event: str, handler) -> None:
        self.handlers.append((event, handler))

    def screenshot(self, path: str, full_page: bool = False) -> None:
        Path(path).write_bytes(b"\x89PNG")


def card(title: str, *actions: str, on_click: Optional[Dict[str, Callable[[], None]]] = None) -> FakeElement:
    """
    index.php の .card 相当。actions はカード内のボタン文言。
    """
    on_click = on_click or {}
    children = {
        f"button:has-text('{a}')": [FakeElement(a, on_click=on_click.get(a))] for a in actions
    }
    return FakeElement(f"{title}\nSome content", children=children)
