from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from database import get_db

router = APIRouter()


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint; also confirms the database answers."""
    db.execute(text("SELECT 1"))
    return {"status": "healthy"}
