"""Repositories package — the only place that builds SQLAlchemy queries.

Every repository except OrganizationRepository is constructed with
``(session, organization_id)`` and never returns another tenant's rows.
"""
