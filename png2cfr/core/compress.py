"""Loop-folding compressor for command strings.

A loop block '[X]' stands for X twice. The compressor looks for a balanced
substring immediately followed by a copy of itself and folds the pair into
one block, restarting from the beginning after every fold:

    CCFCCF      ->  [CCF]
    AFAFBAFAFB  ->  [[AF]B]

Earlier start offsets win over later ones, and for a given start the longest
doubled substring wins. The result is a fixed point of this fold order, not
a global minimum.
"""


def check_balanced(tokens: str) -> bool:
    """True when every ']' closes an open '[' and none are left open."""
    depth = 0
    for token in tokens:
        if token == '[':
            depth += 1
        elif token == ']':
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def fold_once(tokens: str) -> str | None:
    """Apply the first fold found, or return None when tokens is a fixed point."""
    length = len(tokens)
    begin = 0
    while begin < length:
        half = begin + (length - begin + 1) // 2
        # Single tokens are never folded: '[X]' would be longer than 'XX'
        for end in range(half - 1, begin, -1):
            part = tokens[begin : end + 1]
            if tokens.startswith(part, end + 1) and check_balanced(part):
                return tokens.replace(part + part, '[' + part + ']')
        begin += 1
    return None


def compress(tokens: str) -> str:
    """Fold doubled substrings until no fold applies."""
    while True:
        folded = fold_once(tokens)
        if folded is None:
            return tokens
        tokens = folded


def expand(tokens: str) -> str:
    """Undo compress: replace every '[X]' with XX, innermost first.

    Raises ValueError if the brackets are unbalanced.
    """
    stack: list[list[str]] = [[]]
    for token in tokens:
        if token == '[':
            stack.append([])
        elif token == ']':
            if len(stack) == 1:
                raise ValueError(f'Unmatched "]" in command string: {tokens!r}')
            body = ''.join(stack.pop())
            stack[-1].append(body + body)
        else:
            stack[-1].append(token)
    if len(stack) != 1:
        raise ValueError(f'Unclosed "[" in command string: {tokens!r}')
    return ''.join(stack[0])
