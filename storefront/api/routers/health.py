# storefront/api/routers/health.py
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import HealthOut

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health-check", response_model=HealthOut)
def health_check(db: Session = Depends(get_db)):
    message = db.execute(text("select 'successfully connected' as message")).scalar_one()
    return {"message": message}
