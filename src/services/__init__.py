"""Business logic services used by handlers.

Handlers reach these through services.registry.ServiceRegistry, which the
router builds on first use so /health never needs a database.
"""
