"""Utility helpers for sqlchain."""

from sqlchain.utils import logging

__all__ = ("logging",)
