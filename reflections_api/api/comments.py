from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from reflections_api.api.deps import require_api_key
from reflections_api.db.session import get_db
from reflections_api.schemas.comments import (
    CommentCreatedResponse,
    CommentCreateRequest,
    CommentOut,
    CommentStatus,
    CommentUpdateRequest,
)
from reflections_api.schemas.common import MessageResponse
from reflections_api.services.resources import blogs, comments

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("/blog/{blog_id}", response_model=list[CommentOut])
def list_blog_comments(blog_id: int, db: Session = Depends(get_db)):
    return comments.list_approved_for_blog(db, blog_id)


@router.get("/slug/{slug}", response_model=list[CommentOut])
def list_slug_comments(slug: str, db: Session = Depends(get_db)):
    return comments.list_approved_for_slug(db, slug)


@router.post("", response_model=CommentCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_comment(payload: CommentCreateRequest, db: Session = Depends(get_db)):
    if not blogs.exists(db, payload.blog_id):
        raise HTTPException(status_code=404, detail="Blog not found")
    if payload.parent_id is not None and not comments.exists(db, payload.parent_id):
        raise HTTPException(status_code=404, detail="Parent comment not found")
    comment_id = comments.create(db, payload)
    return CommentCreatedResponse(id=comment_id, message="Comment submitted for moderation")


@router.get("", response_model=list[CommentOut], dependencies=[Depends(require_api_key)])
def list_comments_admin(
    status_value: CommentStatus | None = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
):
    return comments.list_for_admin(db, status_value)


@router.put("/{comment_id}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
def update_comment(comment_id: int, payload: CommentUpdateRequest, db: Session = Depends(get_db)):
    if not comments.update(db, comment_id, payload):
        raise HTTPException(status_code=404, detail="Comment not found")
    return MessageResponse(message="Comment updated successfully")


@router.delete("/{comment_id}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
def delete_comment(comment_id: int, db: Session = Depends(get_db)):
    if not comments.delete(db, comment_id):
        raise HTTPException(status_code=404, detail="Comment not found")
    return MessageResponse(message="Comment deleted successfully")
