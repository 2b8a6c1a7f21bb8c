"""
html_generation.py - HTML results page for a published round

This module handles:
- Rendering each rank group with its dense rank and total score
- Laying out every verse (with its author) and its comment block vertically
"""

import html
from typing import List, Sequence

from .annotation import parse
from .comments import SIGNATURE_SEPARATOR, format_comments
from .layout import LayoutStyle, compose, render_layout_html
from .models import UNKNOWN_PEN_NAME, RankGroup, ResultRow, VotingRule
from .results import ranked

COMMENT_STYLE = LayoutStyle(font_size=14, preface_font_size=14, height=500)

PAGE_HEAD = """<!DOCTYPE html>
<html lang="ja">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.0-alpha1/dist/css/bootstrap.min.css" rel="stylesheet">
    <style>
        body {{
            padding: 24px;
            max-width: 1200px;
            margin: 0 auto;
        }}
        .rank-group {{
            margin-top: 24px;
            border: 1px solid #eee;
            border-radius: 12px;
            padding: 12px;
        }}
        .rank-heading {{
            font-weight: 700;
            margin-bottom: 8px;
        }}
        .result-row {{
            margin-top: 12px;
            padding: 12px;
            border: 1px solid #eee;
            border-radius: 12px;
            display: grid;
            grid-template-columns: minmax(0, 1fr) minmax(220px, 260px);
            column-gap: 16px;
        }}
        .comment-box {{
            border: 1px solid #eee;
            border-radius: 10px;
            padding: 8px;
            overflow-x: auto;
            display: flex;
            justify-content: flex-end;
        }}
        .verse-box {{
            border: 1px dashed #ccc;
            border-radius: 12px;
            padding: 12px;
        }}
        .entry-no {{
            margin-top: 4px;
            text-align: right;
            font-size: 12px;
        }}
    </style>
</head>
<body>
"""


def entry_display_text(row: ResultRow) -> str:
    """Verse body followed by the author's pen-name, as shown on the page."""
    return f"{row.body}{SIGNATURE_SEPARATOR}{row.author or UNKNOWN_PEN_NAME}"


def _row_html(row: ResultRow, rules: Sequence[VotingRule], style: LayoutStyle) -> str:
    verse = render_layout_html(compose(parse(entry_display_text(row)), style))
    comments = render_layout_html(compose(parse(format_comments(row, rules)), COMMENT_STYLE))
    return f"""        <div class="result-row">
            <div class="comment-box">
{comments}
            </div>
            <div class="verse-box">
{verse}
                <div class="entry-no">No.{row.entry_no}</div>
            </div>
        </div>
"""


def generate_results_html(title: str,
                          groups: List[RankGroup],
                          rules: Sequence[VotingRule],
                          style: LayoutStyle = LayoutStyle()) -> str:
    """Convert ranked groups into a standalone HTML results page."""
    out = PAGE_HEAD.format(title=html.escape(f"結果発表：{title}"))
    out += f'    <h1>結果発表：{html.escape(title)}</h1>\n'
    out += '    <p class="text-muted small">※作者名および選評文は俳号で表示されます。</p>\n'

    for rank, group in ranked(groups):
        out += '    <section class="rank-group">\n'
        out += f'        <div class="rank-heading">第{rank}位（合計 {group.score} 点）</div>\n'
        out += '        <div class="small">選評</div>\n'
        for row in group.rows:
            out += _row_html(row, rules, style)
        out += '    </section>\n'

    out += "</body>\n</html>\n"
    return out
