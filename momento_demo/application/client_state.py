from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .ports import CacheClientPort


@dataclass(frozen=True)
class Uninitialized:
    pass


@dataclass(frozen=True)
class Ready:
    client: CacheClientPort


ClientState = Union[Uninitialized, Ready]
