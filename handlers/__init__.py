"""
handlers/ - Presentation Layer
================================
FastAPI routers. Each handler receives an HTTP request,
delegates to the appropriate Service, and returns JSON to the caller.
No business logic lives here.
"""
