"""Room domain services: board rules, the room store and the coordinator.

Socket handlers and HTTP routes import from here; nothing in this package
reads Flask requests, only the Notifier seam it is handed.
"""
