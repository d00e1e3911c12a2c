import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from Bootstrap_module.bootstrap import DEFAULT_DATASETS, seed_default_data
from deps import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reset", tags=["Reset"])


def clear_all_data(db: Session) -> None:
    # Dependents first
    for dataset in reversed(DEFAULT_DATASETS):
        db.query(dataset.model).delete(synchronize_session=False)
    db.commit()


@router.post("", status_code=status.HTTP_204_NO_CONTENT)
def reset_database(db: Session = Depends(get_db)):
    """Wipe products, delivery options, cart and orders and load the default data again."""
    clear_all_data(db)
    counts = seed_default_data(db)
    logger.info("Database reset to default data: %s", counts)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
