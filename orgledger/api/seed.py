"""Seed endpoint: load the Acme Inc. sample organisation."""

from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from orgledger.database import get_db
from orgledger.dependencies import get_seed_service
from orgledger.logging_config import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.post("/")
def seed_sample_data(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Load the sample company; a no-op if it already exists."""
    summary = get_seed_service(db).load_sample_data()
    logger.info("sample_data_seeded", **summary)
    return summary
