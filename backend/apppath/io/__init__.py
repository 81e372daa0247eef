"""
Filesystem access for virtual paths.
"""
