"""Title casing in the style of the `title-case` npm package.

Only ever upper-cases: a word already in capitals (an acronym) is left alone,
and small words keep their casing unless they open or close the phrase.
"""

import re

SMALL_WORDS = frozenset(
    "a an and as at because but by en for if in neither nor of on only or over "
    "per so some than that the to up upon v versus via vs when with without yet".split()
)

_WORD = re.compile(r"[A-Za-z][\w'’]*")


def title_case(text: str) -> str:
    words = list(_WORD.finditer(text))
    if not words:
        return text

    out = []
    last = 0
    for index, match in enumerate(words):
        word = match.group(0)
        edge = index == 0 or index == len(words) - 1
        mixed_case = any(c.isupper() for c in word[1:])  # "iPhone" stays as is
        if not mixed_case and (edge or word.lower() not in SMALL_WORDS):
            word = word[0].upper() + word[1:]
        out.append(text[last:match.start()])
        out.append(word)
        last = match.end()
    out.append(text[last:])
    return "".join(out)
