"""Myers' O(ND) shortest edit script, computed by divide and conquer.

Each recursion level looks for the middle snake of its sub-problem with a
simultaneous forward and backward search, emits the snake as keep commands
and recurses on both sides of it. See E. Myers, "An O(ND) Difference
Algorithm and Its Variations", Algorithmica 1 (1986).
"""

from typing import Callable, Generic, List, NamedTuple, Optional, Sequence, TypeVar

from .commands import make_delete, make_insert, make_keep
from .log import get_logger
from .script import EditScript
from .tokenize import TokenType, get_tokenizer, tokenize_words

T = TypeVar('T')

logger = get_logger(__name__)


class MiddleSnakeNotFoundError(RuntimeError):
    """The bidirectional search ran out of D-steps without the two paths meeting."""


class Snake(NamedTuple):
    start: int
    end: int
    diag: int


class _SearchContext:
    # furthest reaching x per diagonal, offset so that negative diagonals fit
    def __init__(self, size: int):
        self.v_down: List[int] = [0] * size
        self.v_up: List[int] = [0] * size


def _default_equals(left_item, right_item) -> bool:
    return left_item == right_item


class SequenceComparator(Generic[T]):
    """Computes the edit script turning ``left`` into ``right``.

    ``equals`` is always called as ``equals(left_item, right_item)``. Insert
    commands carry elements of ``right``; delete and keep commands carry
    elements of ``left``.
    """

    def __init__(self, left: Sequence[T], right: Sequence[T],
                 equals: Optional[Callable[[T, T], bool]] = None):
        self.left = left
        self.right = right
        self.equals = equals or _default_equals

    def get_script(self) -> EditScript:
        script = EditScript()
        context = _SearchContext(len(self.left) + len(self.right) + 2)
        self._build_script(context, 0, len(self.left), 0, len(self.right), script)
        logger.debug("edit_script_built",
                     left_length=len(self.left),
                     right_length=len(self.right),
                     lcs_length=script.get_lcs_length(),
                     modifications=script.get_modifications())
        return script

    def _build_script(self, context: _SearchContext, start1: int, end1: int,
                      start2: int, end2: int, script: EditScript) -> None:
        middle = self._get_middle_snake(context, start1, end1, start2, end2)
        if (middle is None
                or (middle.start == end1 and middle.diag == end1 - end2)
                or (middle.end == start1 and middle.diag == start1 - start2)):
            self._build_linear(start1, end1, start2, end2, script)
            return
        self._build_script(context, start1, middle.start,
                           start2, middle.start - middle.diag, script)
        for i in range(middle.start, middle.end):
            script.append(make_keep(self.left[i]))
        self._build_script(context, middle.end, end1,
                           middle.end - middle.diag, end2, script)

    def _build_linear(self, start1: int, end1: int, start2: int, end2: int,
                      script: EditScript) -> None:
        left, right, equals = self.left, self.right, self.equals
        left_longer = end1 - start1 > end2 - start2
        i, j = start1, start2
        while i < end1 or j < end2:
            if i < end1 and j < end2 and equals(left[i], right[j]):
                script.append(make_keep(left[i]))
                i += 1
                j += 1
            elif i < end1 and (j == end2 or left_longer):
                script.append(make_delete(left[i]))
                i += 1
            else:
                script.append(make_insert(right[j]))
                j += 1

    def _build_snake(self, start: int, diag: int, end1: int, end2: int) -> Snake:
        end = start
        while (end - diag < end2 and end < end1
               and self.equals(self.left[end], self.right[end - diag])):
            end += 1
        return Snake(start, end, diag)

    def _get_middle_snake(self, context: _SearchContext, start1: int, end1: int,
                          start2: int, end2: int) -> Optional[Snake]:
        m = end1 - start1
        n = end2 - start2
        if m == 0 or n == 0:
            return None
        left, right, equals = self.left, self.right, self.equals
        v_down, v_up = context.v_down, context.v_up

        delta = m - n
        total = n + m
        offset = (total if total % 2 == 0 else total + 1) // 2
        v_down[1 + offset] = start1
        v_up[1 + offset] = end1 + 1

        for d in range(offset + 1):
            # forward D-step
            for k in range(-d, d + 1, 2):
                i = k + offset
                if k == -d or (k != d and v_down[i - 1] < v_down[i + 1]):
                    v_down[i] = v_down[i + 1]
                else:
                    v_down[i] = v_down[i - 1] + 1
                x = v_down[i]
                y = x - start1 + start2 - k
                while x < end1 and y < end2 and equals(left[x], right[y]):
                    x += 1
                    y += 1
                    v_down[i] = x
                if (delta % 2 != 0 and delta - d <= k <= delta + d
                        and v_up[i - delta] <= v_down[i]):
                    return self._build_snake(v_up[i - delta], k + start1 - start2, end1, end2)

            # backward D-step
            for k in range(delta - d, delta + d + 1, 2):
                i = k + offset - delta
                if k == delta - d or (k != delta + d and v_up[i + 1] <= v_up[i - 1]):
                    v_up[i] = v_up[i + 1] - 1
                else:
                    v_up[i] = v_up[i - 1]
                x = v_up[i] - 1
                y = x - start1 + start2 - k
                while x >= start1 and y >= start2 and equals(left[x], right[y]):
                    v_up[i] = x
                    x -= 1
                    y -= 1
                if delta % 2 == 0 and -d <= k <= d and v_up[i] <= v_down[i + delta]:
                    return self._build_snake(v_up[i], k + start1 - start2, end1, end2)

        logger.error("middle_snake_not_found",
                     start1=start1, end1=end1, start2=start2, end2=end2)
        raise MiddleSnakeNotFoundError(
            f"no middle snake for left[{start1}:{end1}] and right[{start2}:{end2}]")


class StringsComparator(SequenceComparator[str]):
    """Character-wise comparison of two strings."""

    def __init__(self, left: str, right: str):
        super().__init__(left, right)


class WordWiseStringsComparator(SequenceComparator[str]):
    def __init__(self, left: Sequence[str], right: Sequence[str]):
        super().__init__(list(left), list(right))

    @classmethod
    def from_text(cls, left: str, right: str) -> 'WordWiseStringsComparator':
        return cls(tokenize_words(left), tokenize_words(right))


def diff(left: Sequence[T], right: Sequence[T],
         equals: Optional[Callable[[T, T], bool]] = None) -> EditScript:
    return SequenceComparator(left, right, equals).get_script()


def compare_text(left: str, right: str, token_type: TokenType = TokenType.CHAR) -> EditScript:
    tokenizer = get_tokenizer(token_type)
    return SequenceComparator(tokenizer(left), tokenizer(right)).get_script()


def lcs_length(left: Sequence[T], right: Sequence[T],
               equals: Optional[Callable[[T, T], bool]] = None) -> int:
    return diff(left, right, equals).get_lcs_length()


def modifications(left: Sequence[T], right: Sequence[T],
                  equals: Optional[Callable[[T, T], bool]] = None) -> int:
    return diff(left, right, equals).get_modifications()
