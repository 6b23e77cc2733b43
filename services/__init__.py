"""
services/ - Application Layer
==============================
Sits between the HTTP handlers and the repositories and shapes the data
returned to clients.
"""
