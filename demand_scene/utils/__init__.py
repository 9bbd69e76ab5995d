"""Shared helpers."""

from .config import configclass

__all__ = ["configclass"]
