"""
Core domain models, decimal expansion, and contracts.

This package contains the canonical number representation and the
collaborator that builds it from Python numeric values.
"""
