"""Tests for Radiacode integration."""
