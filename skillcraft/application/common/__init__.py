"""
Application common module.

Contains base classes for application layer:
- Command: Base class for write operations
- CommandHandler: Handles command execution
- Result: Result type for use case outcomes
"""

from .command import Command, CommandHandler
from .result import Failure, Result, Success

__all__ = [
    "Command",
    "CommandHandler",
    "Failure",
    "Result",
    "Success",
]
