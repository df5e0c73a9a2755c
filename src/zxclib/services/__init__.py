"""Service layer — declarative inputs, invocation, and outcomes.

Services may import from errors and log. They must never import from output or config.
"""
