from typing import List, Sequence, TypeVar

from .commands import CommandVisitor
from .script import EditScript

T = TypeVar('T')


class ExecutionVisitor(CommandVisitor):
    """Replays a script: inserted and kept elements are output, deleted ones dropped."""

    def __init__(self):
        self._output: List[object] = []

    def on_insert(self, element) -> None:
        self._output.append(element)

    def on_delete(self, element) -> None:
        pass

    def on_keep(self, element) -> None:
        self._output.append(element)

    def get_sequence(self) -> List[object]:
        return self._output

    def get_string(self) -> str:
        return ''.join(str(element) for element in self._output)


class PatchVisitor(CommandVisitor):
    def __init__(self, original: Sequence[T]):
        self.original = original
        self._index = 0
        self._output: List[T] = []

    def _consume(self, element, kind: str) -> None:
        if self._index >= len(self.original):
            raise ValueError(f"Script inconsistent at {kind}, index {self._index}")
        if self.original[self._index] != element:
            raise ValueError(f"{kind} mismatch at {self._index}: "
                             f"{self.original[self._index]!r} != {element!r}")
        self._index += 1

    def on_insert(self, element) -> None:
        self._output.append(element)

    def on_delete(self, element) -> None:
        self._consume(element, 'DELETE')

    def on_keep(self, element) -> None:
        self._consume(element, 'KEEP')
        self._output.append(element)

    def result(self) -> List[T]:
        if self._index != len(self.original):
            raise ValueError(f"Script incomplete: consumed {self._index} of {len(self.original)}")
        return self._output


def apply_script(script: EditScript) -> List[object]:
    visitor = ExecutionVisitor()
    script.visit(visitor)
    return visitor.get_sequence()


def patch(original: Sequence[T], script: EditScript) -> List[T]:
    visitor = PatchVisitor(original)
    script.visit(visitor)
    return visitor.result()
