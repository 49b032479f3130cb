"""
ui/ - Presentation
==================
Command identifiers, button labels, callback actions, keyboards and text
formatting. Pure functions and constants only; nothing here talks to
Telegram or the database.
"""
