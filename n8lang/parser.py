"""Recursive-descent parser that builds syntax trees from N8 tokens."""

from __future__ import annotations

import copy
from typing import Callable, Iterable, List, Optional, Tuple

from n8lang.convert import translate_digit
from n8lang.errors import ParserError
from n8lang.nodes import (
    ArrayAccessExpression,
    ArrayExpression,
    BinaryExpression,
    BlockExpression,
    BooleanLiteralExpression,
    BreakStatement,
    CatchHandleExpression,
    ContinueStatement,
    EmptyStatement,
    FunctionCallExpression,
    FunctionDeclarationExpression,
    GroupedExpression,
    HaltStatement,
    IfElseExpression,
    LockExpression,
    LoopExpression,
    MaybeExpression,
    NilCoalescingExpression,
    NilLiteralExpression,
    Node,
    NumberLiteralExpression,
    ParallelExpression,
    RandomExpression,
    RegexExpression,
    RenderExpression,
    ReturnStatement,
    SizeExpression,
    StringLiteralExpression,
    TestStatement,
    ThrowStatement,
    TypeExpression,
    UnaryExpression,
    UnlessExpression,
    UseStatement,
    VariableAccessExpression,
    VariableDeclarationExpression,
    WaitStatement,
    WhenExpression,
    WhileExpression,
)
from n8lang.token import Token, TokenType
from n8lang.tokenizer import Tokenizer

_OP = TokenType.OPERATOR
_KW = TokenType.KEYWORD

_UNARY_OPERATORS = ("+", "-", "~", "!")
_EQUALITY_OPERATORS = ("==", "!=", "=", "::", "!:")
_COMPARISON_OPERATORS = ("<", "<=", ">", ">=")
_SHIFT_OPERATORS = ("<<", ">>")
_TERM_OPERATORS = ("+", "-")
_FACTOR_OPERATORS = ("*", "/", "\\", "%")


class Parser:
    """Parses a token list into a list of top-level statements."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens: List[Token] = list(tokens)
        self.global_statements: List[Node] = []
        self._index = 0

    @classmethod
    def from_file(cls, file_name: str) -> "Parser":
        """Create a parser over the tokens of a source file."""
        return cls(Tokenizer.load_file(file_name).scan())

    def parse(self) -> List[Node]:
        """Parse every remaining statement and return all global statements."""
        while not self._at_end():
            self.global_statements.append(self._statement())
        return self.global_statements

    # Token navigation

    def _at_end(self) -> bool:
        return self._index >= len(self.tokens)

    def _advance(self) -> None:
        self._index += 1

    def _previous(self) -> Optional[Token]:
        if not self.tokens:
            return None
        if self._index > 1:
            return self.tokens[self._index - 1]
        return self.tokens[0]

    def _peek(self) -> Token:
        if self._at_end():
            raise ParserError(self._previous(), "Encountered end-of-file.")
        return self.tokens[self._index]

    def _current(self) -> Optional[Token]:
        if self._index >= len(self.tokens):
            return self._previous()
        return self.tokens[self._index]

    def _is_next(self, image: str, token_type: TokenType) -> bool:
        if self._at_end():
            return False
        token = self._peek()
        return token.image == image and token.type == token_type

    def _is_next_any(self, images: Tuple[str, ...], token_type: TokenType) -> bool:
        return any(self._is_next(image, token_type) for image in images)

    def _is_next_type(self, token_type: TokenType) -> bool:
        return not self._at_end() and self._peek().type == token_type

    def _consume(self, image: str) -> Token:
        if self._at_end():
            raise ParserError(
                self._previous(),
                f'Expecting "{image}", encountered end-of-code.',
            )
        token = self._peek()
        if token.image != image:
            raise ParserError(
                self._previous(),
                f'Expecting "{image}", encountered "{token.image}"',
            )
        self._advance()
        return token

    def _consume_type(self, token_type: TokenType) -> Token:
        if self._at_end():
            raise ParserError(
                self._previous(),
                "Expecting token type, encountered end-of-code.",
            )
        token = self._peek()
        if token.type != token_type:
            raise ParserError(
                self._current(),
                f"Expecting {token_type}, encountered {token.type}",
            )
        self._advance()
        return token

    def _optional_semicolon(self) -> None:
        if self._is_next(";", _OP):
            self._consume(";")

    def _else_branch(self) -> Optional[Node]:
        if self._is_next("else", _KW):
            self._consume("else")
            return self._expression()
        return None

    def _dotted_name(self) -> Token:
        name = copy.copy(self._consume_type(TokenType.IDENTIFIER))
        while self._is_next(".", _OP):
            self._consume(".")
            name.append_to_image("." + self._consume_type(TokenType.IDENTIFIER).image)
        return name

    def _index_suffixes(self, expression: Node) -> Node:
        while self._is_next("[", _OP):
            address = self._consume("[")
            index = self._expression()
            self._consume("]")
            expression = ArrayAccessExpression(address, expression, index)
        return expression

    def _variable_access(self) -> Node:
        return self._index_suffixes(VariableAccessExpression(self._dotted_name()))

    def _comma_separated(self, closing: str, item: Callable[[], object]) -> list:
        items: list = []
        while not self._is_next(closing, _OP):
            if items:
                self._consume(",")
            items.append(item())
        return items

    # Expressions

    def _expr_array(self) -> Node:
        address = self._consume("[")
        elements = self._comma_separated("]", self._expression)
        self._consume("]")
        return ArrayExpression(address, elements)

    def _expr_catch_handle(self) -> Node:
        address = self._consume("catch")
        catch_block = self._expression()
        self._consume("handle")
        handler = self._consume_type(TokenType.IDENTIFIER)
        handle_block = self._expression()

        final_block = None
        if self._is_next("then", _KW):
            self._consume("then")
            final_block = self._expression()

        return CatchHandleExpression(
            address, catch_block, handle_block, handler, final_block
        )

    def _expr_function_decl(self) -> Node:
        address = self._consume("func")
        self._consume("(")
        parameters = self._comma_separated(
            ")", lambda: self._consume_type(TokenType.IDENTIFIER)
        )
        self._consume(")")
        return FunctionDeclarationExpression(address, parameters, self._expression())

    def _expr_loop(self) -> Node:
        address = self._consume("loop")
        self._consume("(")
        initial = self._expression()
        self._consume(";")
        condition = self._expression()
        self._consume(";")
        postexpr = self._expression()
        self._consume(")")
        return LoopExpression(address, initial, condition, postexpr, self._expression())

    def _expr_if(self) -> Node:
        address = self._consume("if")
        self._consume("(")
        condition = self._expression()
        self._consume(")")
        then_branch = self._expression()
        return IfElseExpression(address, condition, then_branch, self._else_branch())

    def _expr_literal(self) -> Node:
        if self._is_next("true", _KW):
            return BooleanLiteralExpression(self._consume("true"), True)
        if self._is_next("false", _KW):
            return BooleanLiteralExpression(self._consume("false"), False)
        if self._is_next("maybe", _KW):
            return MaybeExpression(self._consume("maybe"))
        if self._is_next("nil", _KW):
            return NilLiteralExpression(self._consume("nil"))
        if self._is_next_type(TokenType.STRING):
            token = self._consume_type(TokenType.STRING)
            return StringLiteralExpression(token, token.image)
        if self._is_next_type(TokenType.DIGIT):
            token = self._consume_type(TokenType.DIGIT)
            return NumberLiteralExpression(token, translate_digit(token.image))
        if self._is_next_type(TokenType.REGEX):
            token = self._consume_type(TokenType.REGEX)
            return RegexExpression(token, token.image)
        if self._is_next_type(TokenType.IDENTIFIER):
            return self._variable_access()

        address = self._current()
        image = address.image if address is not None else ""
        raise ParserError(address, "Expecting expression, encountered " + image)

    def _expr_random(self) -> Node:
        address = self._consume("random")
        then_branch = self._expression()
        return RandomExpression(address, then_branch, self._else_branch())

    def _expr_parallel(self) -> Node:
        address = self._consume("parallel")
        return ParallelExpression(address, self._expression())

    def _expr_render(self) -> Node:
        address = self._consume("render")
        new_line = error_stream = False

        if self._is_next("!", _OP):
            self._consume("!")
            new_line = True
        if self._is_next("%", _OP):
            self._consume("%")
            error_stream = True

        return RenderExpression(address, new_line, error_stream, self._expression())

    def _expr_size(self) -> Node:
        address = self._consume("size")
        return SizeExpression(address, self._expression())

    def _expr_lock(self) -> Node:
        address = self._consume("lock")
        self._consume("(")
        variable = self._consume_type(TokenType.IDENTIFIER)
        self._consume(")")
        return LockExpression(address, variable, self._expression())

    def _expr_type(self) -> Node:
        address = self._consume("type")
        return TypeExpression(address, self._expression())

    def _expr_unless(self) -> Node:
        address = self._consume("unless")
        self._consume("(")
        condition = self._expression()
        self._consume(")")
        then_branch = self._expression()
        return UnlessExpression(address, condition, then_branch, self._else_branch())

    def _expr_when(self) -> Node:
        address = self._consume("when")
        self._consume("(")
        expression = self._expression()
        self._consume(")")
        self._consume("{")

        cases: List[Tuple[Node, Node]] = []
        default_case: Optional[Node] = None

        while not self._is_next("}", _OP):
            if cases:
                self._consume(",")

            if self._is_next("if", _KW):
                self._consume("if")
                self._consume("(")
                case_expr = self._expression()
                self._consume(")")
                cases.append((case_expr, self._expression()))
            elif self._is_next("else", _KW):
                if default_case is not None:
                    raise ParserError(
                        address,
                        "Cannot have more than one (1) else for when expression.",
                    )
                self._consume("else")
                default_case = self._expression()
            else:
                token = self._peek()
                raise ParserError(
                    token,
                    f'Expecting "if" or "else", encountered "{token.image}"',
                )

        self._consume("}")
        return WhenExpression(address, expression, cases, default_case)

    def _expr_while(self) -> Node:
        address = self._consume("while")
        self._consume("(")
        condition = self._expression()
        self._consume(")")
        return WhileExpression(address, condition, self._expression())

    def _expr_val(self) -> Node:
        native_path = ""
        address = self._consume("val")

        if self._is_next("(", _OP):
            self._consume("(")
            native_path = self._consume_type(TokenType.STRING).image
            self._consume(")")

        declarations: List[Tuple[Token, Node]] = []
        while True:
            if declarations:
                self._consume(",")

            variable = self._dotted_name()
            if native_path == "":
                self._consume("=")
                value: Node = self._expression()
            else:
                value = NilLiteralExpression(variable)
            declarations.append((variable, value))

            if not self._is_next(",", _OP):
                break

        return VariableDeclarationExpression(address, declarations, native_path)

    def _expr_block(self) -> Node:
        address = self._consume("{")
        statements: List[Node] = []
        while not self._is_next("}", _OP):
            statements.append(self._statement())
        self._consume("}")
        return BlockExpression(address, statements)

    def _expr_primary(self) -> Node:
        keyword_parsers = {
            "render": self._expr_render,
            "catch": self._expr_catch_handle,
            "if": self._expr_if,
            "while": self._expr_while,
            "loop": self._expr_loop,
            "unless": self._expr_unless,
            "random": self._expr_random,
            "when": self._expr_when,
            "func": self._expr_function_decl,
            "type": self._expr_type,
            "size": self._expr_size,
            "parallel": self._expr_parallel,
            "lock": self._expr_lock,
            "val": self._expr_val,
        }

        if self._is_next_any(_UNARY_OPERATORS, _OP):
            address = self._consume_type(_OP)
            expression: Node = UnaryExpression(address, address.image, self._expression())
        elif self._is_next("(", _OP):
            address = self._consume("(")
            expression = GroupedExpression(address, self._expression())
            self._consume(")")
        elif self._is_next("{", _OP):
            expression = self._expr_block()
        elif self._is_next_type(_KW) and self._peek().image in keyword_parsers:
            expression = keyword_parsers[self._peek().image]()
        elif self._is_next("[", _OP):
            expression = self._expr_array()
        elif self._is_next_type(TokenType.IDENTIFIER):
            expression = self._variable_access()
        else:
            expression = self._expr_literal()

        while self._is_next("(", _OP) or self._is_next("[", _OP):
            while self._is_next("(", _OP):
                address = self._consume("(")
                arguments = self._comma_separated(")", self._expression)
                self._consume(")")
                expression = FunctionCallExpression(address, expression, arguments)
            expression = self._index_suffixes(expression)

        return expression

    def _binary_level(
        self, operators: Tuple[str, ...], operand: Callable[[], Node]
    ) -> Node:
        expression = operand()
        while self._is_next_any(operators, _OP):
            op = self._consume_type(_OP)
            expression = BinaryExpression(op, expression, op.image, operand())
        return expression

    def _expr_factor(self) -> Node:
        return self._binary_level(_FACTOR_OPERATORS, self._expr_primary)

    def _expr_term(self) -> Node:
        return self._binary_level(_TERM_OPERATORS, self._expr_factor)

    def _expr_shift(self) -> Node:
        return self._binary_level(_SHIFT_OPERATORS, self._expr_term)

    def _expr_comparison(self) -> Node:
        return self._binary_level(_COMPARISON_OPERATORS, self._expr_shift)

    def _expr_equality(self) -> Node:
        return self._binary_level(_EQUALITY_OPERATORS, self._expr_comparison)

    def _expr_nil_coalescing(self) -> Node:
        expression = self._expr_equality()
        while self._is_next("?", _OP):
            address = self._consume("?")
            expression = NilCoalescingExpression(
                address, expression, self._expr_equality()
            )
        return expression

    def _expr_bitwise_and(self) -> Node:
        return self._binary_level(("&",), self._expr_nil_coalescing)

    def _expr_bitwise_xor(self) -> Node:
        return self._binary_level(("^",), self._expr_bitwise_and)

    def _expr_bitwise_or(self) -> Node:
        return self._binary_level(("|",), self._expr_bitwise_xor)

    def _expr_logic_and(self) -> Node:
        return self._binary_level(("&&",), self._expr_bitwise_or)

    def _expr_logic_or(self) -> Node:
        return self._binary_level(("||",), self._expr_logic_and)

    def _expression(self) -> Node:
        return self._expr_logic_or()

    # Statements

    def _stmt_simple(self, keyword: str, node_type: type) -> Node:
        address = self._consume(keyword)
        self._optional_semicolon()
        return node_type(address)

    def _stmt_with_expression(self, keyword: str, node_type: type) -> Node:
        address = self._consume(keyword)
        expression = self._expression()
        self._optional_semicolon()
        return node_type(address, expression)

    def _stmt_test(self) -> Node:
        address = self._consume("test")
        self._consume("(")
        test_name = self._expression()
        self._consume(")")
        test_body = self._expression()
        self._optional_semicolon()
        return TestStatement(address, test_name, test_body)

    def _stmt_use(self) -> Node:
        address = self._consume("use")
        library_name = self._expression()

        if not self._at_end() and self._peek().image == "@":
            self._consume("@")
            library_version = self._expression()
        else:
            library_version = StringLiteralExpression(address, "1.0.0")

        self._optional_semicolon()
        return UseStatement(address, library_name, library_version)

    def _statement(self) -> Node:
        if self._is_next("break", _KW):
            return self._stmt_simple("break", BreakStatement)
        if self._is_next("continue", _KW):
            return self._stmt_simple("continue", ContinueStatement)
        if self._is_next("halt", _KW):
            return self._stmt_simple("halt", HaltStatement)
        if self._is_next("ret", _KW):
            return self._stmt_with_expression("ret", ReturnStatement)
        if self._is_next("throw", _KW):
            return self._stmt_with_expression("throw", ThrowStatement)
        if self._is_next("test", _KW):
            return self._stmt_test()
        if self._is_next("use", _KW):
            return self._stmt_use()
        if self._is_next("wait", _KW):
            return self._stmt_simple("wait", WaitStatement)
        if self._is_next(";", _OP):
            return EmptyStatement(self._consume(";"))

        expression = self._expression()
        self._optional_semicolon()
        return expression


def parse_source(source: str, file_name: str = "<input>") -> List[Node]:
    """Tokenize and parse source text, returning its top-level statements."""
    return Parser(Tokenizer(source, file_name).scan()).parse()