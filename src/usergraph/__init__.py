"""
usergraph
Demonstration GraphQL server with a validated EmailAddress scalar
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
