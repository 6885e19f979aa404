"""
Text files module for Filehand.

Provides reading, writing, line editing and directory operations.
"""

from .file_ops import FileHandler, DirectoryEntry

__all__ = ['FileHandler', 'DirectoryEntry']
