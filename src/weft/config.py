from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Breakpoint(Enum):
    """The two responsive presets, valued by their pixel boundary."""

    MOBILE = 768
    TABLET = 1024

    @property
    def px(self) -> int:
        return self.value


@dataclass(frozen=True)
class WeftConfig:
    class_prefix: str = "wf-"
    hash_selector: str = ".x"  # placeholder selector serialized for hashing
    group_prefix: str = "weft-group-"


DEFAULT_CONFIG = WeftConfig()
