from abc import ABC, abstractmethod
from enum import Enum
from typing import List, NamedTuple

from .commands import CommandVisitor
from .log import get_logger
from .script import EditScript

logger = get_logger(__name__)


class ReplacementsHandler(ABC):
    @abstractmethod
    def handle_replacement(self, skipped: int, from_elements: List[object],
                           to_elements: List[object]) -> None:
        """Called once per replacement block.

        ``skipped`` is the number of elements kept since the previous block,
        ``from_elements`` the deleted elements and ``to_elements`` the
        inserted ones, both in script order.
        """


class ReplacementBlock(NamedTuple):
    skipped: int
    from_elements: List[object]
    to_elements: List[object]


class ReplacementsCollector(ReplacementsHandler):
    def __init__(self):
        self.blocks: List[ReplacementBlock] = []

    def handle_replacement(self, skipped: int, from_elements: List[object],
                           to_elements: List[object]) -> None:
        self.blocks.append(ReplacementBlock(skipped, from_elements, to_elements))

    def total_skipped(self) -> int:
        return sum(block.skipped for block in self.blocks)


class FinderState(str, Enum):
    IDLE = 'idle'
    ACCUMULATING = 'accumulating'


class ReplacementsFinder(CommandVisitor):
    """Folds the raw command stream into replacement blocks.

    Consecutive deletes and inserts, in any interleaving, form one block; a
    keep closes the block and is counted towards the next one. Visiting a
    script does not report the trailing state: call flush() once the
    traversal is complete, or use find_replacements().
    """

    def __init__(self, handler: ReplacementsHandler):
        self.handler = handler
        self.state = FinderState.IDLE
        self.skipped = 0
        self._pending_deletions: List[object] = []
        self._pending_insertions: List[object] = []

    def on_insert(self, element) -> None:
        self._pending_insertions.append(element)
        self.state = FinderState.ACCUMULATING

    def on_delete(self, element) -> None:
        self._pending_deletions.append(element)
        self.state = FinderState.ACCUMULATING

    def on_keep(self, element) -> None:
        if self.state == FinderState.IDLE:
            self.skipped += 1
            return
        self._emit()
        self.skipped = 1

    def flush(self) -> None:
        if not (self._pending_deletions or self._pending_insertions or self.skipped):
            return
        logger.debug("replacement_flushed",
                     skipped=self.skipped,
                     deleted=len(self._pending_deletions),
                     inserted=len(self._pending_insertions))
        self._emit()
        self.skipped = 0

    def _emit(self) -> None:
        deletions, insertions = self._pending_deletions, self._pending_insertions
        self._pending_deletions = []
        self._pending_insertions = []
        self.state = FinderState.IDLE
        self.handler.handle_replacement(self.skipped, deletions, insertions)


def find_replacements(script: EditScript, handler: ReplacementsHandler) -> None:
    finder = ReplacementsFinder(handler)
    script.visit(finder)
    finder.flush()
