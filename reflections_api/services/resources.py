from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from reflections_api.db.base import Base
from reflections_api.models.blog import Blog, BlogImage
from reflections_api.models.book import Book
from reflections_api.models.comment import Comment
from reflections_api.models.event import Event
from reflections_api.models.form import Form
from reflections_api.services.documents import EMPTY_ARRAY, EMPTY_OBJECT, dump_document, dump_optional_document
from reflections_api.services.updates import Change, build_partial_update

ModelT = TypeVar("ModelT", bound=Base)


class ResourceService(Generic[ModelT]):
    """CRUD for one table.

    ``document_fields`` maps each JSON-document column to the empty document
    stored when the client sends nothing or something unserializable.
    """

    model: type[ModelT]
    document_fields: dict[str, str] = {}

    def ordering(self) -> tuple:
        return (self.model.created_at.desc(), self.model.id.desc())

    def list_records(self, db: Session) -> Sequence[ModelT]:
        return db.scalars(select(self.model).order_by(*self.ordering())).all()

    def get(self, db: Session, record_id: int) -> ModelT | None:
        return db.get(self.model, record_id)

    def exists(self, db: Session, record_id: int) -> bool:
        return db.scalar(select(self.model.id).where(self.model.id == record_id)) is not None

    def create(self, db: Session, payload: BaseModel, **overrides: Any) -> int:
        values = payload.model_dump()
        for field, empty in self.document_fields.items():
            values[field] = dump_document(values.get(field), empty)
        values.update(overrides)

        record = self.model(**values)
        db.add(record)
        db.commit()
        db.refresh(record)
        return record.id

    def changes(self, payload: BaseModel) -> list[Change]:
        changes: list[Change] = []
        for field in type(payload).model_fields:
            value = getattr(payload, field)
            if field in self.document_fields:
                value = dump_optional_document(value, self.document_fields[field])
            changes.append((field, value))
        return changes

    def update(self, db: Session, record_id: int, payload: BaseModel) -> bool:
        if not self.exists(db, record_id):
            return False
        statement = build_partial_update(self.model.__table__, record_id, self.changes(payload))
        db.execute(statement)
        db.commit()
        return True

    def delete(self, db: Session, record_id: int) -> bool:
        result = db.execute(delete(self.model).where(self.model.id == record_id))
        db.commit()
        return result.rowcount > 0


class FormService(ResourceService[Form]):
    model = Form
    document_fields = {"data": EMPTY_OBJECT}


class BlogService(ResourceService[Blog]):
    model = Blog
    document_fields = {"content": EMPTY_OBJECT}

    def get_with_images(self, db: Session, blog_id: int) -> Blog | None:
        return db.scalar(select(Blog).where(Blog.id == blog_id).options(selectinload(Blog.images)))

    def list_images(self, db: Session, blog_id: int) -> Sequence[BlogImage]:
        return db.scalars(
            select(BlogImage)
            .where(BlogImage.blog_id == blog_id)
            .order_by(BlogImage.created_at.desc(), BlogImage.id.desc())
        ).all()


class EventService(ResourceService[Event]):
    model = Event
    document_fields = {
        "gallery_images": EMPTY_ARRAY,
        "speakers": EMPTY_ARRAY,
        "sponsors": EMPTY_ARRAY,
        "tags": EMPTY_ARRAY,
    }

    def ordering(self) -> tuple:
        return (Event.start_date.desc(), Event.id.desc())


class BookService(ResourceService[Book]):
    model = Book
    document_fields = {
        "gallery_images": EMPTY_ARRAY,
        "purchase_links": EMPTY_OBJECT,
        "tags": EMPTY_ARRAY,
    }


class CommentService(ResourceService[Comment]):
    model = Comment

    def create(self, db: Session, payload: BaseModel, **overrides: Any) -> int:
        overrides["status"] = "pending"
        return super().create(db, payload, **overrides)

    def _approved(self):
        return select(Comment).where(Comment.status == "approved").order_by(Comment.created_at.asc(), Comment.id.asc())

    def list_approved_for_blog(self, db: Session, blog_id: int) -> Sequence[Comment]:
        return db.scalars(self._approved().where(Comment.blog_id == blog_id)).all()

    def list_approved_for_slug(self, db: Session, blog_slug: str) -> Sequence[Comment]:
        return db.scalars(self._approved().where(Comment.blog_slug == blog_slug)).all()

    def list_for_admin(self, db: Session, status: str | None = None) -> Sequence[Comment]:
        stmt = select(Comment).order_by(*self.ordering())
        if status:
            stmt = stmt.where(Comment.status == status)
        return db.scalars(stmt).all()


forms = FormService()
blogs = BlogService()
events = EventService()
books = BookService()
comments = CommentService()
