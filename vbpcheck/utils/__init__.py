"""Shared utilities for vbpcheck."""
