"""
API package containing versioned routes.

Each version subpackage (currently ``v0``) exposes a top-level
``router`` which includes all of its endpoints.
"""
