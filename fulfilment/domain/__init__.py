"""Domain-level policies and business rules.

This package contains logic that defines *what* the warehouse rules are,
independent from *where* they are applied (services, repositories, etc.).
Rules talk to storage and location data only through the ports declared in
``fulfilment.domain.ports``.
"""
