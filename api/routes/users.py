"""
User endpoints
"""

from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List
from api.dependencies import get_user_service
from schemas.api import DeletedCount
from schemas.user import User, UserFilter, UserStatus, UserSummary
from services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=List[User])
async def get_all_users(service: UserService = Depends(get_user_service)):
    """All users ordered by last name, then first name."""
    return await service.get_all_users()


@router.get("/active", response_model=List[User])
async def get_active_users(service: UserService = Depends(get_user_service)):
    return await service.get_active_users()


@router.get("/summaries", response_model=List[UserSummary])
async def get_user_summaries(service: UserService = Depends(get_user_service)):
    return await service.get_user_summaries()


@router.get("/by-department")
async def get_users_by_department(service: UserService = Depends(get_user_service)):
    """Users grouped by department; users without one are listed under null."""
    return await service.get_users_by_department()


@router.get("/age-range", response_model=List[User])
async def get_users_by_age_range(
    min_age: int = Query(...),
    max_age: int = Query(...),
    service: UserService = Depends(get_user_service),
):
    return await service.get_users_by_age_range(min_age, max_age)


@router.get("/filter", response_model=List[User])
async def filter_users(
    email: str = Query(...),
    user_status: UserStatus = Query(UserStatus.ACTIVE, alias="status"),
    min_age: int = Query(0),
    service: UserService = Depends(get_user_service),
):
    return await service.filter_users(UserFilter(email=email, status=user_status, min_age=min_age))


@router.get("/count/active", response_model=int)
async def count_active_users(service: UserService = Depends(get_user_service)):
    return await service.count_active_users()


@router.get("/email/{email}", response_model=User)
async def get_user_by_email(email: str, service: UserService = Depends(get_user_service)):
    user = await service.get_user_by_email(email)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.delete("/inactive", response_model=DeletedCount)
async def purge_inactive_users(
    created_before: datetime = Query(..., description="Delete inactive users created before this"),
    service: UserService = Depends(get_user_service),
):
    return DeletedCount(deleted=await service.purge_inactive_users(created_before))


@router.get("/{user_id}", response_model=User)
async def get_user_by_id(user_id: int, service: UserService = Depends(get_user_service)):
    user = await service.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.post("", response_model=int, status_code=status.HTTP_201_CREATED)
async def create_user(user: User, service: UserService = Depends(get_user_service)):
    """Create a user from email and names; returns the generated id."""
    return await service.create_user(user)


@router.put("/{user_id}", response_model=User)
async def update_user(user_id: int, user: User, service: UserService = Depends(get_user_service)):
    user.id = user_id
    return await service.save_user(user)


@router.patch("/{user_id}/email", status_code=status.HTTP_200_OK)
async def update_user_email(
    user_id: int,
    email: str = Query(...),
    service: UserService = Depends(get_user_service),
):
    await service.update_email(user_id, email)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
