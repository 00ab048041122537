"""
connectfour.interfaces - User interfaces for Connect Four

Front ends that read player configuration, forward column choices to the
engine and draw the results.
"""

# Don't import anything here to avoid circular imports
__all__ = []
