from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from reflections_api.api.deps import require_api_key
from reflections_api.db.session import get_db
from reflections_api.schemas.books import BookCreateRequest, BookOut, BookUpdateRequest
from reflections_api.schemas.common import CreatedResponse, MessageResponse
from reflections_api.services.resources import books

router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=list[BookOut])
def list_books(db: Session = Depends(get_db)):
    return books.list_records(db)


@router.get("/{book_id}", response_model=BookOut)
def get_book(book_id: int, db: Session = Depends(get_db)):
    book = books.get(db, book_id)
    if not book:
        raise HTTPException(status_code=404, detail="Book not found")
    return book


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_key)],
)
def create_book(payload: BookCreateRequest, db: Session = Depends(get_db)):
    # sale_price is stored as given, even when it exceeds price.
    return CreatedResponse(id=books.create(db, payload))


@router.put("/{book_id}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
def update_book(book_id: int, payload: BookUpdateRequest, db: Session = Depends(get_db)):
    if not books.update(db, book_id, payload):
        raise HTTPException(status_code=404, detail="Book not found")
    return MessageResponse(message="Book updated successfully")


@router.delete("/{book_id}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
def delete_book(book_id: int, db: Session = Depends(get_db)):
    if not books.delete(db, book_id):
        raise HTTPException(status_code=404, detail="Book not found")
    return MessageResponse(message="Book deleted successfully")
