"""
annotation.py - Preface and ruby parsing for annotated verse

Micro-format:
- ``｜遠山（とおやま）`` attaches the gloss とおやま to the base run 遠山
- ``（（前書き））`` at the very start of the text is a preface
- ``｜（（`` at the very start suppresses the preface split

Malformed markup never raises; it is kept as literal text.
"""

from typing import Iterator, List, Optional, Tuple

from .models import ParsedHaiku, RubyToken, TextToken, Token

RUBY_START = "｜"
RUBY_OPEN = "（"
RUBY_CLOSE = "）"
PREFACE_OPEN = RUBY_OPEN * 2
PREFACE_CLOSE = RUBY_CLOSE * 2


def iter_ruby(text: str) -> Iterator[Token]:
    """Yield Text and Ruby tokens from *text*, left to right.

    An annotation missing either bracket turns the rest of the text, from the
    start marker onward, into one final Text token.
    """
    i = 0
    while i < len(text):
        bar = text.find(RUBY_START, i)
        if bar == -1:
            yield TextToken(text[i:])
            return

        if bar > i:
            yield TextToken(text[i:bar])

        open_ = text.find(RUBY_OPEN, bar + 1)
        close = text.find(RUBY_CLOSE, open_ + 1) if open_ != -1 else -1
        if close == -1:
            yield TextToken(text[bar:])
            return

        yield RubyToken(base=text[bar + 1:open_], gloss=text[open_ + 1:close])
        i = close + 1


def parse_ruby(text: str) -> List[Token]:
    return list(iter_ruby(text))


def split_preface(raw: str) -> Tuple[Optional[str], str]:
    """Return ``(preface, body)``; preface is None when there is none."""
    if not raw.startswith(PREFACE_OPEN):
        # covers the ｜（（ escape as well: it starts with the ruby marker
        return None, raw

    end = raw.find(PREFACE_CLOSE, len(PREFACE_OPEN))
    if end == -1:
        return None, raw
    return raw[len(PREFACE_OPEN):end], raw[end + len(PREFACE_CLOSE):].lstrip()


def parse(raw: str) -> ParsedHaiku:
    """Split *raw* into preface and body and tokenise both.

    >>> parse("（（寒し））｜遠山（とおやま）に日は入る").preface
    (TextToken(content='寒し'),)
    """
    preface, body = split_preface(raw)
    return ParsedHaiku(
        body=tuple(iter_ruby(body)),
        preface=tuple(iter_ruby(preface)) if preface is not None else None,
    )
