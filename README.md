# n8lang

A tokenizer, parser and set of support utilities for the N8 programming
language.

## What is in the package

- `n8lang.tokenizer`: `Tokenizer` and `tokenize()` turn N8 source text into
  a list of `Token` objects. They handle string literals (`"..."`) and
  regular-expression literals (`` `...` ``) with the escapes `\n`, `\r`, `\t`,
  `\a`, `\b`, `\v`, `\f` and `\e`; `#` comments to the end of the line;
  number literals in decimal (with optional fraction and `e+`/`e-` exponent),
  binary (`0b`), base 3 (`0t`), octal (`0c`) and hexadecimal (`0x`); and
  multi-character operators such as `==`, `<<`, `&&` and `::`.
  `is_valid_identifier()` tells whether a text could be used as a name.
- `n8lang.token`: `Token` (image, file name, line, column, type), the
  `TokenType` enum, the `OPERATORS` and `KEYWORDS` sets and the helpers
  `is_keyword()` and `is_operator()`.
- `n8lang.parser`: `Parser`, a recursive-descent parser, and
  `parse_source()`. They build a list of top-level statements from tokens,
  covering `if`, `unless`, `when`, `while`, `loop`, `catch … handle … then`,
  `func`, `val`, `render`, `parallel`, `lock`, `random`, `type`, `size`,
  `test`, `use`, `ret`, `throw`, `break`, `continue`, `halt`, `wait`, array
  literals, indexing, calls and the full set of unary and binary operators.
- `n8lang.nodes`: the syntax tree node classes (`BinaryExpression`,
  `IfElseExpression`, `VariableDeclarationExpression` and so on), all based
  on `Node`. Every node has an `address` token, and `children()` and
  `walk()` for moving through the tree.
- `n8lang.errors`: `LexicalAnalysisError` for bad literals, `ParserError`
  for unexpected tokens and `ASTNodeError`. `ParserError` and `ASTNodeError`
  carry the token where the problem was found in `address`, and the text in
  `message`.
- `n8lang.convert`: `translate_digit()` for number literals, and
  `to_bytes()` / `to_double()` for big-endian IEEE 754 doubles.
- `n8lang.semver`: `SemVer` with `SemVer.parse()`, and `validate_semver()`.
- `n8lang.vectormath`: element-wise `add`, `sub`, `mul`, `div`, `rem`,
  `bitwise_and`, `bitwise_or`, `bitwise_xor`, `shift_left` and `shift_right`
  on equally sized lists of numbers.
- `n8lang.arguments`: `ArgumentParser`, which recognises declared
  `-short` / `--long` flags and collects the remaining arguments as input
  files.
- `n8lang.escapes`: `replace_escape_sequences()`.
- `n8lang.randomutil`: `random_bool()` and `generate_uuid()`.

## Usage

Tokenize a piece of source:

```python
from n8lang.tokenizer import tokenize

for token in tokenize('val greeting = "hello\\n";', "example.n8"):
    print(token.image, token.type)
```

Parse source text into a syntax tree:

```python
from n8lang.parser import parse_source

program = parse_source("render! 1 + 2 * 3;", "example.n8")
for node in program[0].walk():
    print(type(node).__name__)
```

Parse a file from disk:

```python
from n8lang.parser import Parser

statements = Parser.from_file("main.n8").parse()
```

Handle syntax errors:

```python
from n8lang.errors import LexicalAnalysisError, ParserError
from n8lang.parser import parse_source

try:
    parse_source("if (x", "broken.n8")
except ParserError as error:
    print(error.message, error.address)
except LexicalAnalysisError as error:
    print(error)
```

### Utilities

```python
from n8lang.convert import translate_digit, to_bytes, to_double
from n8lang.semver import SemVer, validate_semver
from n8lang import vectormath

translate_digit("0x1F")          # 31.0
translate_digit("0b101")         # 5.0
to_double(to_bytes(2.5))         # 2.5

version = SemVer.parse("1.2.3-beta+build.7")
str(version)                     # "1.2.3-beta+build.7"
validate_semver("1.2")           # False

vectormath.add([1.0, 2.0], [3.0, 4.0])   # [4.0, 6.0]
```

```python
from n8lang.arguments import ArgumentParser

args = ArgumentParser(["n8", "-t", "main.n8"])
args.define_parameter("t", "test", "Run the test blocks")
args.has_parameter("t")          # True
args.input_files()               # ["main.n8"]
print(args.describe())
```

## What the package does not do

The package reads and parses N8 code; it does not run it. The syntax tree
nodes describe a program but have no evaluation, so there is no runtime,
no REPL and no command to execute `.n8` files. Nor does it locate or load
installed N8 modules or native libraries named in `use` or `val("...")`.

## Running the tests

Install the `test` extra and run `pytest` from the project root.