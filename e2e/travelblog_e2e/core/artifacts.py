from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from playwright.sync_api import Page

logger = logging.getLogger(__name__)


@dataclass
class Artifacts:
    base_dir: Path
    scenario_id: str

    @property
    def out_dir(self) -> Path:
        d = self.base_dir / self.scenario_id
        d.mkdir(parents=True, exist_ok=True)
        return d

    def path(self, filename: str) -> Path:
        return self.out_dir / filename

    def save_debug(self, page: Optional[Page], prefix: str) -> None:
        """
        失敗時の証跡。ここでの失敗は元のエラーを上書きしない。
        """
        if page is None:
            return
        # スクショ
        try:
            page.screenshot(path=str(self.path(f"{prefix}.png")), full_page=True)
        except Exception as e:
            logger.warning("screenshot failed for %s: %s", self.scenario_id, e)
        # HTML
        try:
            html = page.content()
            self.path(f"{prefix}.html").write_text(html, encoding="utf-8")
        except Exception as e:
            logger.warning("html dump failed for %s: %s", self.scenario_id, e)

    def save_failure(self, page: Optional[Page]) -> None:
        self.save_debug(page, "failure")
