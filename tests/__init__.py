"""
Test suite for hill_cipher

Contains:
- tests/unit/          : Unit tests for individual modules and the pipeline
"""
