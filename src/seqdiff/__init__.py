from seqdiff.commands import (
    CommandType, Command, CommandVisitor, make_insert, make_delete, make_keep
)
from seqdiff.script import EditScript
from seqdiff.visitors import ExecutionVisitor, PatchVisitor, apply_script, patch
from seqdiff.comparator import (
    SequenceComparator, StringsComparator, WordWiseStringsComparator,
    MiddleSnakeNotFoundError, diff, compare_text, lcs_length, modifications
)
from seqdiff.replacements import (
    ReplacementsHandler, ReplacementsFinder, ReplacementsCollector,
    ReplacementBlock, FinderState, find_replacements
)
from seqdiff.tokenize import (
    TokenType, tokenize_lines, tokenize_words, tokenize_chars,
    get_tokenizer, join_tokens
)
from seqdiff.log import configure_logging, get_logger


__version__ = "1.0.0"

__all__ = [
    "CommandType", "Command", "CommandVisitor", "make_insert", "make_delete", "make_keep",
    "EditScript",
    "ExecutionVisitor", "PatchVisitor", "apply_script", "patch",
    "SequenceComparator", "StringsComparator", "WordWiseStringsComparator",
    "MiddleSnakeNotFoundError", "diff", "compare_text", "lcs_length", "modifications",
    "ReplacementsHandler", "ReplacementsFinder", "ReplacementsCollector",
    "ReplacementBlock", "FinderState", "find_replacements",
    "TokenType", "tokenize_lines", "tokenize_words", "tokenize_chars",
    "get_tokenizer", "join_tokens",
    "configure_logging", "get_logger",
]
