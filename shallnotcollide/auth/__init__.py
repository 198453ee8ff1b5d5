"""
auth - Credential store backing the console login
"""

from .core import User, UserStore, default_store

__all__ = ['User', 'UserStore', 'default_store']
