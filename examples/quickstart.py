"""Quickstart example for pcomb.

This example builds a few small grammars: single tokens, a sequence,
numbers, and finally a recursive arithmetic evaluator that uses a Grammar
registry for forward references.
"""

from pcomb import (
    NO_MATCH,
    Grammar,
    alternation,
    char_class,
    literal,
    optional,
    parse,
    repetition,
    sequence,
)
from pcomb.formatters import matched_text, unwrap

# Example 1: Tokens
print("=" * 50)
print("Example 1: Tokens")
print("=" * 50)

print(parse(literal("hello"), "hello"))
# Output: {'literal': 'hello'}

print(parse(literal("hello"), "world"))
# Output: NO_MATCH

print(parse(optional(literal("+")), ""))
# Output: {'optional': ABSENT}

# Example 2: Sequences and formatters
print("\n" + "=" * 50)
print("Example 2: Sequences and Formatters")
print("=" * 50)

digit = char_class("0-9")
addition = sequence([digit, literal("+"), digit])
print(parse(addition, "2+5"))
# Output: {'sequence': [{'charClass': '2'}, {'literal': '+'}, {'charClass': '5'}]}

digits = repetition(digit, 1, matched_text)
print(parse(digits, "2017"))
# Output: 2017

# Example 3: Recursive arithmetic
print("\n" + "=" * 50)
print("Example 3: Recursive Arithmetic")
print("=" * 50)


def fold(value: dict) -> int:
    """Fold ``operand (op operand)*`` left to right."""
    first, rest = value["sequence"]
    total = first
    for op, operand in unwrap(rest):
        match unwrap(op):
            case "+":
                total += operand
            case "-":
                total -= operand
            case "*":
                total *= operand
    return total


g = Grammar(name="arithmetic")

number = alternation(
    [literal("0"), sequence([char_class("1-9"), repetition(digit)])],
    lambda value: int(matched_text(value)),
)
group = sequence([literal("("), g.ref("expr"), literal(")")], lambda value: value["sequence"][1])

g["factor"] = alternation([number, group], unwrap)
g["term"] = sequence(
    [g.ref("factor"), repetition(sequence([char_class("*"), g.ref("factor")], unwrap))],
    fold,
)
g["expr"] = sequence(
    [g.ref("term"), repetition(sequence([char_class("+\\-"), g.ref("term")], unwrap))],
    fold,
)

print(f"Unbound rules: {g.unbound()}")
# Output: Unbound rules: []

for source in ("1+2*3", "2*(3+4)-5", "(((7)))", "007", "1+"):
    result = parse(g["expr"], source)
    shown = "no match" if result is NO_MATCH else result
    print(f"{source!r:>12} -> {shown}")
# Output:
#      '1+2*3' -> 7
#  '2*(3+4)-5' -> 9
#    '(((7)))' -> 7
#        '007' -> no match
#         '1+' -> no match

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
