"""Unit tests for pivotchat.

Tests use pytest with asyncio support; phrase stores and HTTP calls are replaced with
in-memory rows and unittest.mock doubles.
"""
