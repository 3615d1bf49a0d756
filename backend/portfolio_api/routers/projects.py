import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from portfolio_api.database import get_db
from portfolio_api.models.project import Project
from portfolio_api.models.skill import Skill
from portfolio_api.schemas.project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectDetailResponse,
    ProjectSkill,
)
from portfolio_api.utils.clock import utc_timestamp

router = APIRouter(prefix="/projects", tags=["projects"])


def load_skills(db: Session, skill_ids: list[str]) -> list[Skill]:
    """Resolve skill ids, keeping request order and dropping duplicates."""
    wanted = list(dict.fromkeys(skill_ids))
    if not wanted:
        return []
    found = {s.id: s for s in db.query(Skill).filter(Skill.id.in_(wanted)).all()}
    missing = [sid for sid in wanted if sid not in found]
    if missing:
        raise HTTPException(status_code=404, detail=f"Skill not found: {missing[0]}")
    return [found[sid] for sid in wanted]


def _project_fields(project: Project) -> dict:
    return dict(
        id=project.id,
        title=project.title,
        description=project.description,
        github_link=project.github_link,
        live_link=project.live_link,
        image_url=project.image_url,
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


def _project_to_response(project: Project) -> ProjectResponse:
    return ProjectResponse(
        **_project_fields(project),
        skills=sorted(s.name for s in project.skills),
    )


def _project_to_detail(project: Project) -> ProjectDetailResponse:
    return ProjectDetailResponse(
        **_project_fields(project),
        skills=[
            ProjectSkill(
                id=s.id,
                name=s.name,
                proficiency_level=s.proficiency_level,
                category=s.category,
            )
            for s in sorted(project.skills, key=lambda s: s.name)
        ],
    )


def _get_project_or_404(db: Session, project_id: str) -> Project:
    project = db.query(Project).filter(Project.id == project_id).first()
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.get("", response_model=list[ProjectResponse])
async def list_projects(skill: str | None = None, db: Session = Depends(get_db)):
    query = db.query(Project)
    if skill:
        query = query.filter(Project.skills.any(Skill.name.ilike(f"%{skill}%")))
    projects = query.order_by(Project.created_at.desc(), Project.id).all()
    return [_project_to_response(p) for p in projects]


@router.get("/{project_id}", response_model=ProjectDetailResponse)
async def get_project(project_id: str, db: Session = Depends(get_db)):
    return _project_to_detail(_get_project_or_404(db, project_id))


@router.post("", response_model=ProjectDetailResponse, status_code=201)
async def create_project(req: ProjectCreate, db: Session = Depends(get_db)):
    now = utc_timestamp()
    project = Project(
        id=str(uuid.uuid4()),
        title=req.title,
        description=req.description,
        github_link=req.github_link,
        live_link=req.live_link,
        image_url=req.image_url,
        created_at=now,
        updated_at=now,
    )
    project.skills = load_skills(db, req.skill_ids)
    db.add(project)
    db.commit()
    db.refresh(project)
    return _project_to_detail(project)


@router.put("/{project_id}", response_model=ProjectDetailResponse)
async def update_project(project_id: str, req: ProjectUpdate, db: Session = Depends(get_db)):
    project = _get_project_or_404(db, project_id)

    update_data = req.model_dump(exclude_unset=True, exclude={"skill_ids"})
    for key, value in update_data.items():
        setattr(project, key, value)
    if req.skill_ids is not None:
        project.skills = load_skills(db, req.skill_ids)
    project.updated_at = utc_timestamp()

    db.commit()
    db.refresh(project)
    return _project_to_detail(project)


@router.delete("/{project_id}")
async def delete_project(project_id: str, db: Session = Depends(get_db)):
    project = _get_project_or_404(db, project_id)
    db.delete(project)
    db.commit()
    return {"message": "Project deleted"}
