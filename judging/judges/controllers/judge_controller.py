import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from judging.core.database import get_db
from judging.core.errors import UnclassifiedFailure
from judging.judges.schemas.judge_schema import JudgeCreate, JudgeLogin, JudgeLoginResponse, JudgeRead, JudgeUpdate
from judging.judges.services.judge_service import JudgeService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/judges", response_model=List[JudgeRead])
def list_judges(db: Session = Depends(get_db)):
    try:
        return JudgeService(db).list_judges()
    except SQLAlchemyError:
        logger.exception("Could not fetch judges")
        raise UnclassifiedFailure("Could not fetch judges")


@router.post("/judges")
def create_judge(body: JudgeCreate, db: Session = Depends(get_db)):
    """Admin creates a judge account under an id of their choosing."""
    try:
        JudgeService(db).create_judge(body.id, body.password)
        return {"message": "Judge created"}
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Could not create judge")
        raise UnclassifiedFailure("Could not create judge")


@router.delete("/judges/{judge_id}")
def delete_judge(judge_id: str, db: Session = Depends(get_db)):
    try:
        JudgeService(db).delete_judge(judge_id)
        return {"message": "Judge deleted"}
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Could not delete judge {judge_id}")
        raise UnclassifiedFailure("Could not delete judge")


@router.post("/judge/login", response_model=JudgeLoginResponse)
def judge_login(body: JudgeLogin, db: Session = Depends(get_db)):
    try:
        judge = JudgeService(db).login(body.id, body.password)
        return {"judge": judge}
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Judge login failed")
        raise UnclassifiedFailure()


@router.put("/judge/update")
def update_judge(body: JudgeUpdate, db: Session = Depends(get_db)):
    try:
        JudgeService(db).update_password(body.id, body.password)
        return {"message": "Password updated"}
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Judge password update failed")
        raise UnclassifiedFailure("Could not update password")
