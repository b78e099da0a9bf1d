"""
Pydantic schema definitions.

``wonder`` defines the catalog entities, ``query`` the filter and sort
inputs accepted by the query service, ``error`` the error body
returned by the API.
"""
