"""
Service layer for business logic.

This layer separates todo handling from HTTP request handling so the
same operations can be tested without a web server.
"""
