"""Tests for mustache_js."""
