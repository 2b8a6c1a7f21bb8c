"""
Core module - Business logic for kukai

This module contains the core functionality organized by concern:
- annotation: preface and ruby parsing
- layout: vertical column layout of parsed verse
- results: vote aggregation and ranking
- comments: comment grouping and formatting
- rules: rule-set normalisation, validation and presets
"""

from .annotation import parse
from .comments import format_comments
from .layout import LayoutStyle, compose
from .results import aggregate, ranked

__all__ = [
    'parse',
    'compose',
    'LayoutStyle',
    'aggregate',
    'ranked',
    'format_comments',
]
