"""
services/ - Business Logic Layer
================================
Async facades over the repositories. Each call validates its arguments,
runs the blocking repository call in a worker thread and returns domain
models. Handlers talk to services, never to repositories.
"""
