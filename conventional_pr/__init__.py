"""
Conventional PR

Validates GitHub pull requests against a configurable set of conventions:
title, commit and branch patterns, issue linkage, signed commits and
change size limits.
"""

__version__ = "1.0.0"
