import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from portfolio_api.database import get_db
from portfolio_api.models.work_experience import WorkExperience
from portfolio_api.schemas.work_experience import (
    WorkExperienceCreate,
    WorkExperienceUpdate,
    WorkExperienceResponse,
)
from portfolio_api.utils.clock import utc_timestamp

router = APIRouter(prefix="/work-experience", tags=["work-experience"])


def work_to_response(work: WorkExperience) -> WorkExperienceResponse:
    return WorkExperienceResponse(
        id=work.id,
        company=work.company,
        position=work.position,
        description=work.description,
        start_date=work.start_date,
        end_date=work.end_date,
        current_job=bool(work.current_job),
        created_at=work.created_at,
    )


def list_by_start_date(db: Session) -> list[WorkExperience]:
    return (
        db.query(WorkExperience)
        .order_by(WorkExperience.start_date.desc(), WorkExperience.created_at.desc())
        .all()
    )


def _get_work_or_404(db: Session, work_id: str) -> WorkExperience:
    work = db.query(WorkExperience).filter(WorkExperience.id == work_id).first()
    if not work:
        raise HTTPException(status_code=404, detail="Work experience not found")
    return work


@router.get("", response_model=list[WorkExperienceResponse])
async def list_work_experience(db: Session = Depends(get_db)):
    return [work_to_response(w) for w in list_by_start_date(db)]


@router.get("/{work_id}", response_model=WorkExperienceResponse)
async def get_work_experience(work_id: str, db: Session = Depends(get_db)):
    return work_to_response(_get_work_or_404(db, work_id))


@router.post("", response_model=WorkExperienceResponse, status_code=201)
async def create_work_experience(req: WorkExperienceCreate, db: Session = Depends(get_db)):
    work = WorkExperience(
        id=str(uuid.uuid4()),
        created_at=utc_timestamp(),
        **req.model_dump(),
    )
    db.add(work)
    db.commit()
    db.refresh(work)
    return work_to_response(work)


@router.put("/{work_id}", response_model=WorkExperienceResponse)
async def update_work_experience(
    work_id: str, req: WorkExperienceUpdate, db: Session = Depends(get_db)
):
    work = _get_work_or_404(db, work_id)
    for key, value in req.model_dump(exclude_unset=True).items():
        setattr(work, key, value)
    db.commit()
    db.refresh(work)
    return work_to_response(work)


@router.delete("/{work_id}")
async def delete_work_experience(work_id: str, db: Session = Depends(get_db)):
    work = _get_work_or_404(db, work_id)
    db.delete(work)
    db.commit()
    return {"message": "Work experience deleted"}
