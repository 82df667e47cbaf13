import logging as lg
from pathlib import Path

import pyparsing as pp

import intcode.loader.grammar as grammar
from intcode.common.errors import IntcodeError
from intcode.runtime.memory import Memory


class ParseError(IntcodeError):
    def __init__(self, token: str, index: int):
        self.token = token
        self.index = index
        super().__init__(f'Invalid integer {token!r} at word {index}')


def parse_word(token: str, index: int) -> int:
    try:
        (value,) = grammar.word.parse_string(token, parse_all=True)
        return value

    except pp.ParseException as e:
        raise ParseError(token, index) from e


def parse_program(text: str) -> Memory:
    if not text.strip():
        return Memory()

    tokens = text.split(grammar.DELIMITER)
    return Memory.from_words(parse_word(t, i) for i, t in enumerate(tokens))


def load_program(path: Path) -> Memory:
    lg.info(f'Loading {path.name}')
    memory = parse_program(path.read_text(encoding='utf-8'))
    lg.debug(f'Loaded {len(memory)} words')
    return memory
