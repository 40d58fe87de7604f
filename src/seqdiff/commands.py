from abc import ABC, abstractmethod
from enum import Enum
from typing import NamedTuple, TypeVar

T = TypeVar('T')


class CommandType(str, Enum):
    INSERT = 'insert'
    DELETE = 'delete'
    KEEP = 'keep'


class CommandVisitor(ABC):
    """Receives the commands of an edit script one at a time, in script order."""

    @abstractmethod
    def on_insert(self, element) -> None:
        pass

    @abstractmethod
    def on_delete(self, element) -> None:
        pass

    @abstractmethod
    def on_keep(self, element) -> None:
        pass


class Command(NamedTuple):
    op: CommandType
    value: object

    def accept(self, visitor: CommandVisitor) -> None:
        if self.op == CommandType.INSERT:
            visitor.on_insert(self.value)
        elif self.op == CommandType.DELETE:
            visitor.on_delete(self.value)
        else:
            visitor.on_keep(self.value)

    def __repr__(self) -> str:
        return f"Command({self.op.value!r}, {self.value!r})"


def make_insert(value: T) -> Command:
    return Command(CommandType.INSERT, value)


def make_delete(value: T) -> Command:
    return Command(CommandType.DELETE, value)


def make_keep(value: T) -> Command:
    return Command(CommandType.KEEP, value)
