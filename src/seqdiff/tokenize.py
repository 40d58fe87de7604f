import re
from enum import Enum
from typing import Callable, List


class TokenType(str, Enum):
    LINE = 'line'
    WORD = 'word'
    CHAR = 'char'


_WORD_PATTERN = re.compile(r'\S+|\s+')


def tokenize_lines(text: str) -> List[str]:
    if not text:
        return []
    return text.split('\n')


def tokenize_words(text: str) -> List[str]:
    if not text:
        return []
    return _WORD_PATTERN.findall(text)


def tokenize_chars(text: str) -> List[str]:
    return list(text)


def get_tokenizer(token_type: TokenType) -> Callable[[str], List[str]]:
    tokenizers = {
        TokenType.LINE: tokenize_lines,
        TokenType.WORD: tokenize_words,
        TokenType.CHAR: tokenize_chars
    }
    try:
        return tokenizers[TokenType(token_type)]
    except ValueError:
        raise ValueError(f"Unknown token type: {token_type!r}") from None


def join_tokens(tokens: List[str], token_type: TokenType) -> str:
    if token_type == TokenType.LINE:
        return '\n'.join(tokens)
    return ''.join(tokens)
