"""User management service.

REST API for user records: HTTP layer in `api`, persistence in `core`,
models in `entities`, configuration in `runtime`.
"""

__version__ = "1.0.0"
