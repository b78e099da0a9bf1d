"""
Version 0 of the API.

Breaking changes should be introduced in a new version subpackage to
keep existing clients working.
"""
