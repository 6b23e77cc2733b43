"""
handlers/ - Presentation Layer
================================
FastAPI routers. Each handler decodes the HTTP request, delegates to the
appropriate Service, and wraps the result in the JSON response envelope.
No business logic lives here.
"""
