import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from portfolio_api.database import get_db
from portfolio_api.models.project import project_skills
from portfolio_api.models.skill import Skill, proficiency_rank
from portfolio_api.schemas.skill import (
    SkillCreate,
    SkillUpdate,
    SkillResponse,
    SkillDetailResponse,
    SkillProjectSummary,
)
from portfolio_api.utils.clock import utc_timestamp

router = APIRouter(prefix="/skills", tags=["skills"])

_project_count = func.count(project_skills.c.project_id).label("project_count")


def _skills_with_counts(db: Session):
    return (
        db.query(Skill, _project_count)
        .outerjoin(project_skills, project_skills.c.skill_id == Skill.id)
        .group_by(Skill.id)
    )


def _skill_to_response(skill: Skill, project_count: int) -> SkillResponse:
    return SkillResponse(
        id=skill.id,
        name=skill.name,
        proficiency_level=skill.proficiency_level,
        category=skill.category,
        created_at=skill.created_at,
        project_count=project_count,
    )


def _count_projects(db: Session, skill: Skill) -> int:
    return (
        db.query(func.count(project_skills.c.project_id))
        .filter(project_skills.c.skill_id == skill.id)
        .scalar()
    )


def _get_skill_or_404(db: Session, skill_id: str) -> Skill:
    skill = db.query(Skill).filter(Skill.id == skill_id).first()
    if not skill:
        raise HTTPException(status_code=404, detail="Skill not found")
    return skill


@router.get("", response_model=list[SkillResponse])
async def list_skills(db: Session = Depends(get_db)):
    rows = _skills_with_counts(db).order_by(proficiency_rank().desc(), Skill.name).all()
    return [_skill_to_response(skill, count) for skill, count in rows]


@router.get("/top", response_model=list[SkillResponse])
async def top_skills(limit: int = Query(10, ge=1, le=100), db: Session = Depends(get_db)):
    rows = (
        _skills_with_counts(db)
        .order_by(_project_count.desc(), proficiency_rank().desc(), Skill.name)
        .limit(limit)
        .all()
    )
    return [_skill_to_response(skill, count) for skill, count in rows]


@router.get("/{skill_id}", response_model=SkillDetailResponse)
async def get_skill(skill_id: str, db: Session = Depends(get_db)):
    skill = _get_skill_or_404(db, skill_id)
    projects = sorted(skill.projects, key=lambda p: p.created_at, reverse=True)
    return SkillDetailResponse(
        **_skill_to_response(skill, len(projects)).model_dump(),
        projects=[
            SkillProjectSummary(
                id=p.id, title=p.title, description=p.description, created_at=p.created_at
            )
            for p in projects
        ],
    )


@router.post("", response_model=SkillResponse, status_code=201)
async def create_skill(req: SkillCreate, db: Session = Depends(get_db)):
    existing = db.query(Skill).filter(Skill.name == req.name).first()
    if existing:
        raise HTTPException(status_code=409, detail="Skill already exists")

    skill = Skill(
        id=str(uuid.uuid4()),
        name=req.name,
        proficiency_level=req.proficiency_level,
        category=req.category,
        created_at=utc_timestamp(),
    )
    db.add(skill)
    db.commit()
    db.refresh(skill)
    return _skill_to_response(skill, 0)


@router.put("/{skill_id}", response_model=SkillResponse)
async def update_skill(skill_id: str, req: SkillUpdate, db: Session = Depends(get_db)):
    skill = _get_skill_or_404(db, skill_id)
    if req.name is not None and req.name != skill.name:
        conflict = db.query(Skill).filter(Skill.name == req.name, Skill.id != skill_id).first()
        if conflict:
            raise HTTPException(status_code=409, detail="Skill name already exists")

    for key, value in req.model_dump(exclude_unset=True).items():
        setattr(skill, key, value)
    db.commit()
    db.refresh(skill)
    return _skill_to_response(skill, _count_projects(db, skill))


@router.delete("/{skill_id}")
async def delete_skill(skill_id: str, db: Session = Depends(get_db)):
    skill = _get_skill_or_404(db, skill_id)
    db.delete(skill)
    db.commit()
    return {"message": "Skill deleted"}
