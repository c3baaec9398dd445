"""
Server core package.

Holds the unified configuration (``config``) and static constants (``constant``).
"""
