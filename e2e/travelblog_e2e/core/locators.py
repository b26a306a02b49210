from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

By = Literal["name", "class", "text"]


@dataclass(frozen=True)
class Locator:
    """
    要素の特定方法。一意とは限らない（0件・複数件もありうる）。
      - name : input[name=...]
      - class: .card / .error
      - text : tag のうち表示テキストに value を含むもの
    """

    by: By
    value: str
    tag: str = "*"

    @property
    def selector(self) -> str:
        if self.by == "name":
            return f"[name='{self.value}']"
        if self.by == "class":
            return f".{self.value}"
        if self.by == "text":
            return f"{self.tag}:has-text('{self.value}')"
        raise ValueError(f"Unknown locator kind: {self.by}")

    def __str__(self) -> str:
        if self.by == "text":
            return f"{self.tag} containing text {self.value!r}"
        return f"{self.by}={self.value!r}"


def by_name(value: str) -> Locator:
    return Locator("name", value)


def by_class(value: str) -> Locator:
    return Locator("class", value)


def by_text(tag: str, value: str) -> Locator:
    return Locator("text", value, tag=tag)
