"""Tests for clirest."""
