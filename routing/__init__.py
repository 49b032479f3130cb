"""
routing/ - Update Dispatch
==========================
Decides, for every inbound update, which single handler owns it.

    Dispatcher ──► CommandRouter  (exact command token match)
               └─► UpdateRouter   (first predicate match, in registration order)

No business logic lives here; handlers do the work and send the replies.
"""
