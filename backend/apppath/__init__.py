"""
apppath - virtual paths over the filesystem and application directories.
"""

__version__ = "0.1.0"
