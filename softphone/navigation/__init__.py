"""
Section navigation for the softphone client.
"""

from .router import CLOSE_GLOBAL_DIALER, Section, ViewRouter

__all__ = ["CLOSE_GLOBAL_DIALER", "Section", "ViewRouter"]
