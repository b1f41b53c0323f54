"""oidcdp: configuration layer for the OIDC discovery provider."""

__version__ = "0.1.0"
