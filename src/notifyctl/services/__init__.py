"""Service layer: builds notifications and hands them to a producer.

Services may import from domain and producers.
They must never import from commands or output.
"""
