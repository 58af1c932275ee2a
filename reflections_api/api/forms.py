from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from reflections_api.api.deps import require_api_key
from reflections_api.db.session import get_db
from reflections_api.schemas.common import CreatedResponse, MessageResponse
from reflections_api.schemas.forms import FormCreateRequest, FormOut, FormUpdateRequest
from reflections_api.services.resources import forms

router = APIRouter(prefix="/forms", tags=["forms"])


@router.get("", response_model=list[FormOut])
def list_forms(db: Session = Depends(get_db)):
    return forms.list_records(db)


@router.get("/{form_id}", response_model=FormOut)
def get_form(form_id: int, db: Session = Depends(get_db)):
    form = forms.get(db, form_id)
    if not form:
        raise HTTPException(status_code=404, detail="Form not found")
    return form


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_form(payload: FormCreateRequest, db: Session = Depends(get_db)):
    return CreatedResponse(id=forms.create(db, payload))


@router.put("/{form_id}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
def update_form(form_id: int, payload: FormUpdateRequest, db: Session = Depends(get_db)):
    if not forms.update(db, form_id, payload):
        raise HTTPException(status_code=404, detail="Form not found")
    return MessageResponse(message="Form updated successfully")


@router.delete("/{form_id}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
def delete_form(form_id: int, db: Session = Depends(get_db)):
    if not forms.delete(db, form_id):
        raise HTTPException(status_code=404, detail="Form not found")
    return MessageResponse(message="Form deleted successfully")
