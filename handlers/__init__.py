"""
handlers/ - Presentation Layer
================================
Command and update handlers. Each handler receives one classified update,
delegates to the appropriate Service, and sends the response back to the user.
Handlers catch their own failures and answer with a short apology; the
routers above them never do.
"""
