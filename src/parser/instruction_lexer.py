# instruction lexer: one circuit instruction per line
#
#   123 -> x
#   x AND y -> d
#   NOT x -> h
#   x LSHIFT 2 -> f

import re
from typing import List, Optional, Tuple

from configs.circuit_paths import WORD_MASK
from src.circuit.errors import InstructionSyntaxError
from src.circuit.operations import (
    BINARY_KEYWORDS,
    OPERATION_KEYWORDS,
    Not,
    Direct,
    Operation,
    Operand,
    operand_from_token,
)

WIRE_PATTERN = re.compile(r"[a-z]+")
NUMBER_PATTERN = re.compile(r"\d+")

ARROW = '->'

TokenKind = {
    'WIRE' : 'WIRE',
    'NUMBER' : 'NUMBER',
    'KEYWORD' : 'KEYWORD',
    'ARROW' : 'ARROW',
}


class InstructionToken:
    def __init__(self, kind:str , text:str , column:int):
        self.kind = kind
        self.text = text
        self.column = column

    def is_operand(self):
        return self.kind in (TokenKind['WIRE'] , TokenKind['NUMBER'])

    def __repr__(self):
        return f"InstructionToken(Kind:[{self.kind}] , Text:[{self.text}] , Col:[{self.column}])"


class InstructionLexer:
    def __init__(self, line:str , line_number:Optional[int] = None):
        self.line = line.strip()
        self.line_number = line_number
        self.words = self.line.split()
        self.toks :List[InstructionToken] = []
        self.pos = 0

    def _error(self, reason:str):
        return InstructionSyntaxError(self.line , self.line_number , reason)

    def classify(self, word:str , column:int) -> InstructionToken:
        if word == ARROW:
            return InstructionToken(TokenKind['ARROW'] , word , column)
        if word in OPERATION_KEYWORDS and word != 'VALUE':
            return InstructionToken(TokenKind['KEYWORD'] , word , column)
        if NUMBER_PATTERN.fullmatch(word):
            if int(word) > WORD_MASK:
                raise self._error(f"literal {word} outside 16-bit range")
            return InstructionToken(TokenKind['NUMBER'] , word , column)
        if WIRE_PATTERN.fullmatch(word):
            return InstructionToken(TokenKind['WIRE'] , word , column)
        raise self._error(f"unexpected token '{word}'")

    def lexer(self) -> List[InstructionToken]:
        for column , word in enumerate(self.words):
            self.toks.append(self.classify(word , column))
        return self.toks

    # parser side ------------------------------------------------------------

    def peek(self) -> Optional[InstructionToken]:
        if self.pos < len(self.toks):
            return self.toks[self.pos]
        return None

    def advance(self) -> Optional[InstructionToken]:
        if self.pos < len(self.toks):
            tok = self.toks[self.pos]
            self.pos += 1
            return tok
        return None

    def expect_operand(self) -> Operand:
        tok = self.advance()
        if tok is None or not tok.is_operand():
            raise self._error("expected wire name or number")
        return operand_from_token(tok.text)

    def expect_target(self) -> str:
        tok = self.advance()
        if tok is None or tok.kind != TokenKind['ARROW']:
            raise self._error(f"expected '{ARROW}'")
        tok = self.advance()
        if tok is None or tok.kind != TokenKind['WIRE']:
            raise self._error("expected target wire name")
        if self.peek() is not None:
            raise self._error(f"trailing token '{self.peek().text}'")
        return tok.text

    def parse(self) -> Tuple[str , Operation]:
        """
        Parse the line into (wire, operation)
        """
        if not self.toks:
            self.lexer()
        if not self.toks:
            raise self._error("empty instruction")

        first = self.peek()
        if first.kind == TokenKind['KEYWORD']:
            if first.text != 'NOT':
                raise self._error(f"binary operator {first.text} without left operand")
            self.advance()
            source = self.expect_operand()
            return (self.expect_target() , Not(source))

        left = self.expect_operand()
        nxt = self.peek()
        if nxt is not None and nxt.kind == TokenKind['KEYWORD']:
            if nxt.text not in BINARY_KEYWORDS:
                raise self._error(f"{nxt.text} is not a binary operator")
            self.advance()
            right = self.expect_operand()
            op_class = OPERATION_KEYWORDS[nxt.text]
            return (self.expect_target() , op_class(left , right))

        return (self.expect_target() , Direct(left))


def parse_instruction(line:str , line_number:Optional[int] = None) -> Tuple[str , Operation]:
    return InstructionLexer(line , line_number).parse()
