"""
Aggregate expressions shared by the company, applicant and admin listings.
"""
from sqlalchemy import func, case, distinct

from recruitme.db.models import Application, OfferStatus


def applicant_count(name: str = "applicant_count"):
    return func.count(distinct(Application.id)).label(name)


def hired_count(name: str = "hired_count"):
    """Applications whose offer was accepted."""
    return func.count(
        distinct(case((Application.offer_status == OfferStatus.ACCEPTED, Application.id)))
    ).label(name)
