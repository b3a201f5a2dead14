"""
Test suite for the Gangaji example library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
