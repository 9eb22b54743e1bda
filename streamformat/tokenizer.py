"""
Tokenizer for the text format.

It reads a byte channel one byte at a time and splits it into tokens:

 1. tokens are separated by any byte of the terminator set or by NUL;
 2. a token starting with a double quote extends up to the next unescaped
    double quote, terminators included, and ``\\"`` stands for a literal quote;
 3. ``//`` and ``#`` start a comment that runs up to the end of the line,
    ``/*`` a comment that runs up to ``*/``. A comment also ends the token
    being accumulated.

The work is done by a finite-state machine with one method per state: each
method receives a byte and returns True when the current token is complete.
"""
import logging
from enum import Enum, auto
from typing import Iterator

from .strings import BoundedString


logger = logging.getLogger(__name__)

DEFAULT_TERMINATORS = b' \t\r\n'
DEFAULT_SCRATCH_CAPACITY = 128

QUOTE     = ord('"')
BACKSLASH = ord('\\')
SLASH     = ord('/')
STAR      = ord('*')
HASH      = ord('#')
NEWLINE   = ord('\n')
NUL       = 0


class State(Enum):
    BARE               = auto()
    QUOTED             = auto()
    LINE_COMMENT       = auto()
    BLOCK_COMMENT      = auto()
    BLOCK_COMMENT_STAR = auto()  # inside a block comment, just seen a '*'


class Tokenizer(object):

    def __init__(self, stream, terminators=DEFAULT_TERMINATORS, capacity=DEFAULT_SCRATCH_CAPACITY):
        if not terminators:
            raise ValueError('the terminator set cannot be empty')

        self.stream = stream
        self.terminators = bytes(terminators)
        self.capacity = capacity
        self.exhausted = False
        self.state = State.BARE
        self.token = BoundedString(capacity)

        self._transitions = {
            State.BARE: self._on_bare,
            State.QUOTED: self._on_quoted,
            State.LINE_COMMENT: self._on_line_comment,
            State.BLOCK_COMMENT: self._on_block_comment,
            State.BLOCK_COMMENT_STAR: self._on_block_comment_star,
        }

    def is_delimiter(self, char: int) -> bool:
        return char == NUL or char in self.terminators

    def next_token(self) -> BoundedString:
        '''Consume the channel up to the end of the next token and return it.

        The returned buffer is a new one at every call, it is empty when the
        end of the input is reached before any token.'''
        self.token = BoundedString(self.capacity)
        self.state = State.BARE

        while True:
            char = self.stream.read(1)
            if len(char) == 0:
                self.exhausted = True
                break

            if self._transitions[self.state](char[0]):
                break

        return self.token

    def tokens(self) -> Iterator[bytes]:
        '''Iterate over the content of the tokens up to the end of the input.'''
        while True:
            token = self.next_token()
            if self.exhausted and token.is_empty():
                return

            yield token.value

    def _enter(self, state: State):
        logger.debug('tokenizer %s -> %s' % (self.state.name, state.name))
        self.state = state

    def _end_comment(self) -> bool:
        '''The byte closing a comment is replaced by a terminator and examined again.'''
        self._enter(State.BARE)
        return self._on_bare(self.terminators[0])

    def _on_bare(self, char: int) -> bool:
        token = self.token

        if self.is_delimiter(char):
            # leading delimiters are skipped
            return not token.is_empty()

        if char == QUOTE and token.is_empty():
            self._enter(State.QUOTED)
            return False

        if char == HASH:
            self._enter(State.LINE_COMMENT)
            return False

        if not token.append(char):
            return False

        length = token.length
        if length >= 2 and token[length - 2] == SLASH:
            if token[length - 1] == SLASH:
                token.trim(length - 2)
                self._enter(State.LINE_COMMENT)
            elif token[length - 1] == STAR:
                token.trim(length - 2)
                self._enter(State.BLOCK_COMMENT)

        return False

    def _on_quoted(self, char: int) -> bool:
        token = self.token

        if char != QUOTE:
            token.append(char)
            return False

        length = token.length
        if length and token[length - 1] == BACKSLASH:
            token.trim(length - 1)
            token.append(QUOTE)
            return False

        return True

    def _on_line_comment(self, char: int) -> bool:
        if char == NEWLINE:
            return self._end_comment()

        return False

    def _on_block_comment(self, char: int) -> bool:
        if char == STAR:
            self._enter(State.BLOCK_COMMENT_STAR)

        return False

    def _on_block_comment_star(self, char: int) -> bool:
        if char == SLASH:
            return self._end_comment()

        if char != STAR:
            self._enter(State.BLOCK_COMMENT)

        return False
