# compilerlab

Small, self-contained compiler-construction exercises. Each one is a library
function and a console command.

## Installation

```
pip install .
pip install ".[test]"   # adds pytest for the test suite
```

## Modules

| Module | What it does | Command |
| --- | --- | --- |
| `compilerlab.first_sets` | FIRST sets for productions written as `X->rhs` (`@` is epsilon, `i` is `id`) | `compilerlab-first` |
| `compilerlab.follow_sets` | FOLLOW sets for productions written as `X=rhs` (`$` is epsilon and the end marker) | `compilerlab-follow` |
| `compilerlab.lexer` | Splits C-like text into keywords, identifiers, operators and special symbols | `compilerlab-lex` |
| `compilerlab.stack_alloc` | A bounded stack of activation records, with an interactive menu | `compilerlab-stack` |
| `compilerlab.backtracking_parser` | Backtracking recognizer for `S -> cAd`, `A -> ab \| a`, input ended by `#` | `compilerlab-backtrack` |
| `compilerlab.expr_parser` | Predictive parser for `+`, `*`, parentheses and `id` | `compilerlab-expr` |
| `compilerlab.list_parser` | Predictive parser for `S -> (L) \| a`, `L -> S L'`, `L' -> , S L' \| ε`, ended by `#` | `compilerlab-list` |

## Library use

```python
from compilerlab.first_sets import DEFAULT_PRODUCTIONS, compute_first, format_first
from compilerlab.follow_sets import parse_productions, compute_follow
from compilerlab.lexer import tokenize, is_keyword
from compilerlab.backtracking_parser import accepts
from compilerlab.expr_parser import parse_expression, ParseError
from compilerlab.list_parser import parse_list, ListParseError
from compilerlab.stack_alloc import ActivationStack, Frame

print(format_first("E", compute_first(DEFAULT_PRODUCTIONS, "E")))
# FIRST(E) = { '(', 'id' }

grammar = parse_productions(["E=TD", "D=+TD", "D=$", "T=FS", "S=*FS", "S=$", "F=(E)", "F=a"])
print(compute_follow(grammar, "E"))

for token in tokenize("int x = y + 1;"):
    print(token)

print(is_keyword("while"))      # True
print(accepts("cabd#"))         # True

print(parse_expression("id+id*id"))   # True: all input consumed
try:
    parse_expression("id+*id")
except ParseError as exc:
    print(exc, exc.position)

print(parse_list("(a,(a,a))#"))       # True

stack = ActivationStack()
stack.push(Frame("main", 2, "0x00"))
print(stack.frames())           # top to bottom
stack.pop()
```

Notes on behaviour:

- `compute_first` and `compute_follow` return tuples in the order the symbols
  were found. The first production's left-hand side is the start symbol for
  FOLLOW, so its set contains `$`.
- `tokenize` yields `Token` values with a `TokenKind` of `KEYWORD`,
  `IDENTIFIER`, `OPERATOR` or `SPECIAL`. Digits are part of words, so there is
  no separate number token. An operator character (`+-*/%=`) is yielded as an
  operator and then again as a special symbol.
- `parse_expression` returns `False` when a valid expression is followed by
  leftover input and raises `ParseError` on a syntax error. `parse_list`
  returns `False` when the sentence is not followed by `#` and raises
  `ListParseError` on a syntax error. Both errors carry a `position`.
- `ActivationStack` holds ten frames by default (`capacity` can be changed);
  pushing onto a full stack raises `StackOverflowError`, popping an empty one
  raises `StackUnderflowError`.

## Commands

```
compilerlab-first              # prints FIRST(F), FIRST(C), FIRST(D), FIRST(T), FIRST(E)
compilerlab-follow < grammar   # reads a count, then that many productions
compilerlab-lex [path]         # tokenizes a file, input.txt by default
compilerlab-stack              # menu: 1.Push 2.Pop 3.Display 4.Exit
compilerlab-backtrack          # prompts for a string
compilerlab-expr               # prompts for an expression
compilerlab-list               # prompts for an expression
```

`compilerlab-expr` and `compilerlab-list` exit with status 1 after printing a
syntax error.

## Limits

- `compilerlab-first` works only on its built-in grammar; other grammars are
  handled through `compute_first`.
- `compilerlab-follow` reports only the symbols `E`, `D`, `T`, `S` and `F`.
- The activation stack lives in memory only; nothing is saved between runs.