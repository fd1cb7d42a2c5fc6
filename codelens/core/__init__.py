"""
Core — Parsing layer for Codelens

Contains:
- Parsing: language registry, parser/highlight factories, line classifier
"""
