"""
kukai - verse annotation and results engine for online haiku rounds

Packages:
- core: annotation parsing, vertical layout, vote aggregation, comment formatting
- utils: logging, paths, I/O and text hygiene helpers
"""
