"""Shared utilities."""

from __future__ import annotations
