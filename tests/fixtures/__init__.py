"""Test fixtures for the ratio split daemon."""
