from __future__ import annotations

from abc import ABC, abstractmethod

from .models import CheckStats
from .yaml_config import get_output_strings


class OutputHandler(ABC):
    @abstractmethod
    def emit_result(self, url: str, allowed: bool) -> None: ...

    @abstractmethod
    def emit_summary(self, stats: CheckStats) -> None: ...


class StdoutHandler(OutputHandler):
    def emit_result(self, url: str, allowed: bool) -> None:
        strings = get_output_strings()
        label = strings["allowed_label"] if allowed else strings["rejected_label"]
        print(f"  [{label:8s}] {url}")

    def emit_summary(self, stats: CheckStats) -> None:
        strings = get_output_strings()
        print(strings["summary_header"])
        if stats.total == 0:
            print(strings["no_urls_message"])
        else:
            print(strings["stats_template"].format(**stats.model_dump()))
        print(strings["summary_footer"])
