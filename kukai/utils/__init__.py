"""
Utils module - Shared utilities for kukai

This module provides common utilities used across the project:
- text_processing: Text cleanup, truncation and snippets
- io_helpers: BOM-safe UTF-8 reading and writing
- logging_helper: Consistent logging setup
- paths: Common path definitions
"""
