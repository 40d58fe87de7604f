from typing import Iterator, List, Tuple

from .commands import Command, CommandType, CommandVisitor


class EditScript:
    """Ordered record of the commands transforming a left sequence into a right one.

    The number of keep commands is the length of the longest common
    subsequence; inserts and deletes together are the modifications.
    """

    def __init__(self):
        self._commands: List[Command] = []
        self._lcs_length = 0
        self._modifications = 0

    def append(self, command: Command) -> None:
        self._commands.append(command)
        if command.op == CommandType.KEEP:
            self._lcs_length += 1
        else:
            self._modifications += 1

    def get_lcs_length(self) -> int:
        return self._lcs_length

    def get_modifications(self) -> int:
        return self._modifications

    def visit(self, visitor: CommandVisitor) -> None:
        for command in self._commands:
            command.accept(visitor)

    def to_tuples(self) -> List[Tuple[str, object]]:
        return [(command.op.value, command.value) for command in self._commands]

    def count_commands(self) -> dict:
        counts = {
            'inserts': 0,
            'deletes': 0,
            'keeps': 0,
            'total': len(self._commands)
        }
        for command in self._commands:
            if command.op == CommandType.INSERT:
                counts['inserts'] += 1
            elif command.op == CommandType.DELETE:
                counts['deletes'] += 1
            else:
                counts['keeps'] += 1
        return counts

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return (f"EditScript(commands={len(self._commands)}, "
                f"lcs_length={self._lcs_length}, modifications={self._modifications})")
