"""Ambient selection state kept in a context variable."""

# SPDX-License-Identifier: MIT

import logging
from contextvars import ContextVar
from typing import Optional, Protocol

from taskgantt.model.selection import Selection

logger = logging.getLogger(__name__)


class SelectionStoreProtocol(Protocol):
    def get(self) -> Selection: ...

    def set(self, selection: Selection) -> None: ...


class SelectionStore:
    """Selection store backed by a ContextVar.

    Each store owns its own context variable so separate charts in one
    process never see each other's selection.
    """

    def __init__(self, initial: Optional[Selection] = None) -> None:
        self._selection_var: ContextVar[Selection] = ContextVar(
            "selection",
            default=initial or {"run_id": None, "task_id": None},
        )

    def get(self) -> Selection:
        return self._selection_var.get()

    def set(self, selection: Selection) -> None:
        logger.debug(
            "Selected run %s task %s", selection["run_id"], selection["task_id"]
        )
        self._selection_var.set(selection)
