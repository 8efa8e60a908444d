"""Tests for flexjson."""
