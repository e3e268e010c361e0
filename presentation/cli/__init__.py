"""Presentation CLI exports."""
from .losses_command import LossesCommand, apply_arguments, build_parser

__all__ = [
    "LossesCommand",
    "apply_arguments",
    "build_parser",
]
