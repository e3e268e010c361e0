"""Presentation layer - command line."""
from .cli import LossesCommand, apply_arguments, build_parser

__all__ = [
    "LossesCommand",
    "apply_arguments",
    "build_parser",
]
