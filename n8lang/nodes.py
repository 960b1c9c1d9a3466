"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields
from typing import Any, Iterator, List, Optional, Tuple

from n8lang.token import Token


def _nodes_in(value: Any) -> Iterator["Node"]:
    if isinstance(value, Node):
        yield value
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _nodes_in(item)


@dataclass
class Node:
    """Base of every syntax tree node; ``address`` marks where it starts."""

    address: Optional[Token]

    def children(self) -> Iterator["Node"]:
        """Yield the direct child nodes, in field order."""
        for item in fields(self):
            yield from _nodes_in(getattr(self, item.name, None))

    def walk(self) -> Iterator["Node"]:
        """Yield this node and all nodes below it, depth first."""
        yield self
        for child in self.children():
            yield from child.walk()


@dataclass
class ArrayAccessExpression(Node):
    """Indexing into an array: ``array[index]``."""

    array: Node
    index: Node


@dataclass
class ArrayExpression(Node):
    """An array literal: ``[a, b, c]``."""

    elements: List[Node]


@dataclass
class BinaryExpression(Node):
    """An infix operation between two operands."""

    left: Node
    op: str
    right: Node


@dataclass
class BlockExpression(Node):
    """A braced sequence of statements."""

    statements: List[Node]


@dataclass
class BooleanLiteralExpression(Node):
    """The literal ``true`` or ``false``."""

    value: bool


@dataclass
class CatchHandleExpression(Node):
    """``catch ... handle name ... then ...``."""

    catch_block: Node
    handle_block: Node
    handler: Token
    final_block: Optional[Node] = None


@dataclass
class FunctionCallExpression(Node):
    """A call of a callable value with arguments."""

    callable: Node
    arguments: List[Node]


@dataclass
class FunctionDeclarationExpression(Node):
    """An anonymous function: ``func(a, b) body``."""

    parameters: List[Token]
    body: Node

    @property
    def function_image(self) -> Optional[Token]:
        """The ``func`` token that introduced the function."""
        return self.address


@dataclass
class GroupedExpression(Node):
    """A parenthesised expression."""

    expression: Node


@dataclass
class IfElseExpression(Node):
    """``if (condition) then-branch else else-branch``."""

    condition: Node
    then_branch: Node
    else_branch: Optional[Node] = None


@dataclass
class LockExpression(Node):
    """``lock (variable) body``."""

    variable: Token
    body: Node


@dataclass
class LoopExpression(Node):
    """``loop (initial; condition; post) body``."""

    initial: Node
    condition: Node
    postexpr: Node
    body: Node


@dataclass
class MaybeExpression(Node):
    """The ``maybe`` literal, a random boolean."""


@dataclass
class NilCoalescingExpression(Node):
    """``left ? right``: the right side when the left is nil."""

    left: Node
    right: Node


@dataclass
class NilLiteralExpression(Node):
    """The ``nil`` literal."""


@dataclass
class NumberLiteralExpression(Node):
    """A numeric literal."""

    value: float


@dataclass
class ParallelExpression(Node):
    """``parallel expression``: run an expression concurrently."""

    expression: Node


@dataclass
class RandomExpression(Node):
    """``random then-branch else else-branch``."""

    then_branch: Node
    else_branch: Optional[Node] = None


@dataclass
class RegexExpression(Node):
    """A regular expression literal."""

    pattern: str


@dataclass
class RenderExpression(Node):
    """``render`` output, optionally with newline (``!``) or to stderr (``%``)."""

    new_line: bool
    error_stream: bool
    expression: Node


@dataclass
class SizeExpression(Node):
    """``size expression``."""

    expression: Node


@dataclass
class StringLiteralExpression(Node):
    """A string literal."""

    value: str


@dataclass
class TypeExpression(Node):
    """``type expression``."""

    expression: Node


@dataclass
class UnaryExpression(Node):
    """A prefix operator applied to an operand."""

    op: str
    expression: Node


@dataclass
class UnlessExpression(Node):
    """``unless (condition) then-branch else else-branch``."""

    condition: Node
    then_branch: Node
    else_branch: Optional[Node] = None


@dataclass
class VariableAccessExpression(Node):
    """A read of a (possibly dotted) variable name."""

    address: Optional[Token] = field(init=False, repr=False)
    name: Token

    def __post_init__(self) -> None:
        self.address = copy.copy(self.name)


@dataclass
class VariableDeclarationExpression(Node):
    """``val name = value, ...`` or a native binding with ``val("lib")``.

    Declarations are kept ordered by token kind and text; a repeated name
    keeps its first value.
    """

    declarations: List[Tuple[Token, Node]]
    native_path: str = ""

    def __post_init__(self) -> None:
        unique: dict = {}
        for token, value in self.declarations:
            unique.setdefault(token.sort_key(), (token, value))
        self.declarations = [unique[key] for key in sorted(unique)]


@dataclass
class WhenExpression(Node):
    """``when (value) { if (case) then, ..., else default }``."""

    expression: Node
    cases: List[Tuple[Node, Node]]
    default_case: Optional[Node] = None


@dataclass
class WhileExpression(Node):
    """``while (condition) body``."""

    condition: Node
    body: Node


@dataclass
class BreakStatement(Node):
    """``break``."""


@dataclass
class ContinueStatement(Node):
    """``continue``."""


@dataclass
class EmptyStatement(Node):
    """A lone ``;``."""


@dataclass
class HaltStatement(Node):
    """``halt``: stop the program."""


@dataclass
class ReturnStatement(Node):
    """``ret expression``."""

    expression: Node


@dataclass
class TestStatement(Node):
    """``test (name) body``."""

    test_name: Node
    test_body: Node


@dataclass
class ThrowStatement(Node):
    """``throw expression``."""

    expression: Node


@dataclass
class UseStatement(Node):
    """``use library @ version``."""

    library_name: Node
    library_version: Node


@dataclass
class WaitStatement(Node):
    """``wait``: block until parallel tasks finish."""