import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from portfolio_api.database import get_db
from portfolio_api.models.profile import Profile
from portfolio_api.models.skill import PROFICIENCY_LEVELS
from portfolio_api.routers.projects import load_skills
from portfolio_api.routers.work_experience import list_by_start_date, work_to_response
from portfolio_api.schemas.profile import (
    ProfileCreate,
    ProfileUpdate,
    ProfileResponse,
    ProfileSkillsUpdate,
)
from portfolio_api.schemas.project import ProjectSkill
from portfolio_api.utils.clock import utc_timestamp

router = APIRouter(prefix="/profile", tags=["profile"])


def _profile_to_response(profile: Profile, db: Session) -> ProfileResponse:
    skills = sorted(
        profile.skills,
        key=lambda s: (-PROFICIENCY_LEVELS.index(s.proficiency_level), s.name),
    )
    return ProfileResponse(
        id=profile.id,
        name=profile.name,
        email=profile.email,
        education=profile.education,
        github_link=profile.github_link,
        linkedin_link=profile.linkedin_link,
        portfolio_link=profile.portfolio_link,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
        skills=[
            ProjectSkill(
                id=s.id,
                name=s.name,
                proficiency_level=s.proficiency_level,
                category=s.category,
            )
            for s in skills
        ],
        work_experience=[work_to_response(w) for w in list_by_start_date(db)],
    )


def _get_profile_or_404(db: Session) -> Profile:
    profile = db.query(Profile).first()
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.get("", response_model=ProfileResponse)
async def get_profile(db: Session = Depends(get_db)):
    return _profile_to_response(_get_profile_or_404(db), db)


@router.post("", response_model=ProfileResponse, status_code=201)
async def create_profile(req: ProfileCreate, db: Session = Depends(get_db)):
    if db.query(Profile).first():
        raise HTTPException(status_code=409, detail="Profile already exists")

    now = utc_timestamp()
    profile = Profile(id=str(uuid.uuid4()), created_at=now, updated_at=now, **req.model_dump())
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return _profile_to_response(profile, db)


@router.put("", response_model=ProfileResponse)
async def update_profile(req: ProfileUpdate, db: Session = Depends(get_db)):
    profile = _get_profile_or_404(db)
    for key, value in req.model_dump(exclude_unset=True).items():
        setattr(profile, key, value)
    profile.updated_at = utc_timestamp()
    db.commit()
    db.refresh(profile)
    return _profile_to_response(profile, db)


@router.post("/skills", response_model=ProfileResponse)
async def set_profile_skills(req: ProfileSkillsUpdate, db: Session = Depends(get_db)):
    """Replace the profile's skill set with ``skill_ids``."""
    profile = _get_profile_or_404(db)
    profile.skills = load_skills(db, req.skill_ids)
    profile.updated_at = utc_timestamp()
    db.commit()
    db.refresh(profile)
    return _profile_to_response(profile, db)
