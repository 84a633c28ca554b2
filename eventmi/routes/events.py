"""Event pages - list, details, add, edit and delete."""
from fastapi import APIRouter, Depends, HTTPException, Path, Request
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from ..application.services import EventService
from ..config import MAX_EVENT_ID, ROOT_PATH
from ..dependencies import get_event_service
from ..forms import EventFormModel, form_errors, parse_form_id
from ..templating import templates

router = APIRouter(prefix="/Event", tags=["events"])


def _render_form(request: Request, template: str, values: dict, errors: dict | None = None, event_id: int | None = None):
    """Render add.html / edit.html with posted (or stored) values."""
    if event_id is None:
        action, submit_label = f"{ROOT_PATH}/Event/Add", "Add"
    else:
        action, submit_label = f"{ROOT_PATH}/Event/Edit/{event_id}", "Save"

    return templates.TemplateResponse(
        request,
        template,
        {
            "values": values,
            "errors": errors or {},
            "event_id": event_id,
            "action": action,
            "submit_label": submit_label,
        }
    )


@router.get("/All")
def all_events(request: Request, service: EventService = Depends(get_event_service)):
    """List all events."""
    return templates.TemplateResponse(
        request,
        "all.html",
        {"events": service.list_events()}
    )


@router.get("/Details/{event_id}")
def event_details(
    request: Request,
    event_id: int = Path(..., ge=1, le=MAX_EVENT_ID),
    service: EventService = Depends(get_event_service)
):
    """Show one event."""
    return templates.TemplateResponse(
        request,
        "details.html",
        {"event": service.get_event(event_id)}
    )


# === Add ===

@router.get("/Add")
def add_page(request: Request):
    """Show empty add form."""
    return _render_form(request, "add.html", {})


@router.post("/Add")
async def add_event(request: Request, service: EventService = Depends(get_event_service)):
    """Create an event, or re-render the form with errors."""
    form_data = dict(await request.form())
    # New events get their id from the database
    form_data.pop("Id", None)

    try:
        form = EventFormModel.from_form(form_data)
    except ValidationError as exc:
        return _render_form(request, "add.html", form_data, form_errors(exc))

    await run_in_threadpool(service.create_event, form)
    return RedirectResponse(url=f"{ROOT_PATH}/Event/All", status_code=302)


# === Edit ===

@router.get("/Edit/{event_id}")
def edit_page(
    request: Request,
    event_id: int = Path(..., ge=1, le=MAX_EVENT_ID),
    service: EventService = Depends(get_event_service)
):
    """Show edit form pre-filled with stored values."""
    form = service.get_edit_form(event_id)
    return _render_form(request, "edit.html", form.to_form_data(), event_id=event_id)


@router.post("/Edit/{event_id}")
async def edit_event(
    request: Request,
    event_id: int = Path(..., ge=1, le=MAX_EVENT_ID),
    service: EventService = Depends(get_event_service)
):
    """Update an event.

    The posted Id is checked against the route before anything else, so a
    mismatch is a 404 even when the rest of the form is invalid.
    """
    form_data = dict(await request.form())

    if parse_form_id(form_data.get("Id")) != event_id:
        raise HTTPException(status_code=404, detail="Event not found")

    # Unknown event: 404 before validation as well
    await run_in_threadpool(service.get_event, event_id)

    try:
        form = EventFormModel.from_form(form_data)
    except ValidationError as exc:
        return _render_form(request, "edit.html", form_data, form_errors(exc), event_id=event_id)

    await run_in_threadpool(service.update_event, event_id, form)
    return RedirectResponse(url=f"{ROOT_PATH}/Event/Details/{event_id}", status_code=302)


# === Delete ===

@router.post("/Delete/{event_id}")
def delete_event(
    event_id: int = Path(..., ge=1, le=MAX_EVENT_ID),
    service: EventService = Depends(get_event_service)
):
    """Delete an event and go back to the list."""
    service.delete_event(event_id)
    return RedirectResponse(url=f"{ROOT_PATH}/Event/All", status_code=302)
