"""
World Wonders API application package.

The code is organised in layers:

* ``schemas`` – Pydantic models for wonders, query inputs and errors.
* ``services`` – the dataset store and the query service.
* ``api`` – versioned FastAPI routers translating HTTP requests into
  service calls.
* ``core`` – configuration, logging and error types.

``main.create_app`` wires them together.
"""
