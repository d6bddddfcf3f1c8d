"""Centralized exceptions for the Inkwell application."""


class InkwellError(Exception):
    """Base exception for all Inkwell errors."""
