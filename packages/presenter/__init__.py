from __future__ import annotations
from typing import List
from .base import BasePresenter, REGISTRY, register

from . import ansi  # noqa: F401
from . import plain  # noqa: F401
from . import emoji  # noqa: F401


def create_presenter(presenter_id: str) -> BasePresenter:
    """
    Factory: instantiate a registered presenter by id.
    """
    try:
        cls = REGISTRY[presenter_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown presenter id: {presenter_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_presenter_ids() -> List[str]:
    """
    Return all registered presenter ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
