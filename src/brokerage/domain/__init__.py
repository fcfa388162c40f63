"""Domain layer for brokerage.

Services are imported from their modules (e.g. ``brokerage.domain.payment``)
so that the database layer can depend on ``brokerage.domain.entities``
without importing the services that depend on it.
"""
