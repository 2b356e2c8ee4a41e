import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from judging.analytics.schemas.analytics_schema import AnalyticsSummary, LeaderboardEntry
from judging.analytics.services.analytics_service import AnalyticsService
from judging.core.database import get_db
from judging.core.errors import UnclassifiedFailure

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/leaderboard", response_model=List[LeaderboardEntry])
def leaderboard(limit: Optional[int] = Query(None, ge=1, le=100), db: Session = Depends(get_db)):
    """
    Projects ranked by their mean review score. Unreviewed projects are left out.
    """
    try:
        return AnalyticsService(db).leaderboard(limit)
    except SQLAlchemyError:
        logger.exception("Could not load leaderboard")
        raise UnclassifiedFailure("Could not load leaderboard")


@router.get("/admin/analytics", response_model=AnalyticsSummary)
def analytics(db: Session = Depends(get_db)):
    try:
        return AnalyticsService(db).summary()
    except SQLAlchemyError:
        logger.exception("Analytics failed")
        raise UnclassifiedFailure("Analytics failed")
