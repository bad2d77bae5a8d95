"""
connect_four.interfaces - User interfaces for Connect Four

This package contains the text console for playing and replaying games.
"""

# Don't import anything here to avoid circular imports
__all__ = []
