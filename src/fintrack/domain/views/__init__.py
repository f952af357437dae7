"""View models for service outputs."""

from fintrack.domain.views.summary import ReconcileResult, OrganizationSummary

__all__ = [
    "ReconcileResult",
    "OrganizationSummary",
]
