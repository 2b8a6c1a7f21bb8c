"""
layout.py - Vertical (tategaki) layout of a parsed verse

Columns are listed right to left, the order they are read in: the preface
column, when there is one, comes first and sits rightmost; the body column
follows to its left.
"""

import html
from dataclasses import dataclass
from typing import Optional, Tuple

from .models import ParsedHaiku, RubyToken, TextToken, Token


@dataclass(frozen=True)
class LayoutStyle:
    font_size: float = 18
    preface_font_size: float = 14
    height: int = 500
    ruby_scale: float = 0.7


@dataclass(frozen=True)
class Run:
    """A piece of text at one size, optionally carrying a side gloss."""
    text: str
    size: float
    gloss: Optional[str] = None
    gloss_size: Optional[float] = None


@dataclass(frozen=True)
class Column:
    role: str            # "preface" or "body"
    font_size: float
    runs: Tuple[Run, ...]


@dataclass(frozen=True)
class VerticalLayout:
    columns: Tuple[Column, ...]   # right to left
    height: int


def _run(token: Token, size: float, style: LayoutStyle) -> Run:
    if isinstance(token, TextToken):
        return Run(text=token.content, size=size)
    if isinstance(token, RubyToken):
        return Run(text=token.base, size=size,
                   gloss=token.gloss, gloss_size=size * style.ruby_scale)
    raise TypeError(f"Unknown token type: {type(token).__name__}")


def _column(role: str, tokens: Tuple[Token, ...], size: float,
            style: LayoutStyle) -> Column:
    return Column(role=role, font_size=size,
                  runs=tuple(_run(t, size, style) for t in tokens))


def compose(parsed: ParsedHaiku, style: LayoutStyle = LayoutStyle()) -> VerticalLayout:
    """Lay out *parsed* as right-to-left vertical columns.

    An empty preface (``（（））``) gets no column, same as no preface.
    """
    columns = []
    if parsed.preface:
        columns.append(_column("preface", parsed.preface,
                               style.preface_font_size, style))
    columns.append(_column("body", parsed.body, style.font_size, style))
    return VerticalLayout(columns=tuple(columns), height=style.height)


def _fmt_size(size: float) -> str:
    return f"{size:g}px"


def _run_html(run: Run) -> str:
    text = html.escape(run.text)
    if run.gloss is None:
        return f'<span style="font-size: {_fmt_size(run.size)}">{text}</span>'
    return (f'<ruby style="font-size: {_fmt_size(run.size)}">{text}'
            f'<rt style="font-size: {_fmt_size(run.gloss_size)}">'
            f'{html.escape(run.gloss)}</rt></ruby>')


def render_layout_html(layout: VerticalLayout) -> str:
    """Render *layout* as an HTML fragment.

    The container uses ``row-reverse`` so the first column lands on the right.
    """
    parts = [
        '<div class="haiku-vertical" style="display: flex; '
        'flex-direction: row-reverse; align-items: stretch; '
        f'justify-content: center; gap: 8px; height: {layout.height}px; '
        f'max-height: {layout.height}px; overflow: hidden;">'
    ]
    for column in layout.columns:
        # preface column reads a little lighter than the verse itself
        opacity = " opacity: 0.85;" if column.role == "preface" else ""
        parts.append(
            f'  <div class="haiku-{column.role}" style="writing-mode: vertical-rl; '
            'text-orientation: mixed; white-space: pre-wrap; '
            f'line-height: 1.8;{opacity}">'
            + "".join(_run_html(run) for run in column.runs)
            + "</div>"
        )
    parts.append("</div>")
    return "\n".join(parts)
