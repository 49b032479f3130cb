"""
state/ - Conversational State
=============================
Short-lived, in-memory, per-user state that carries a user's intent from
one update to the next. Nothing here survives a restart.

Store instances are created once in main.py and passed into every handler
that needs them.
"""
