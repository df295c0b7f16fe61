"""
git-autopush: stage, commit with sign-off, and push in one command.
"""

__version__ = "0.1.0"
