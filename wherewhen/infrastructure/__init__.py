"""
Infrastructure layer - Frameworks and adapters.

Concrete implementations of the application ports: repositories, the
event cache, the external catalog client and configuration.
"""
