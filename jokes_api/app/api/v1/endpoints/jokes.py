"""
Joke endpoints for API v1.

These routes expose the joke collection: random retrieval, lookup by
id, filtering by type, creation, full and partial update and deletion.
Reading is public; every mutating route requires the master key in
the ``key`` query parameter.  Request bodies are form‑urlencoded and
all responses are JSON.

Handlers only translate HTTP input into store calls.  Lookup,
authorization and mutation order is enforced by ``JokeStore``; domain
errors it raises are rendered by the global error handlers.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Request, status

from jokes_api.app.data.seed import JOKE_TYPES
from jokes_api.app.schemas.joke import Joke, JokeForm, MessageResponse
from jokes_api.app.services.joke_service import JokeStore, get_joke_store, parse_joke_id

router = APIRouter()

_FORM_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/x-www-form-urlencoded": {
                "schema": JokeForm.model_json_schema(),
            }
        },
    }
}

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse, "description": "Joke not found"}}
_FORBIDDEN = {status.HTTP_403_FORBIDDEN: {"model": MessageResponse, "description": "Forbidden"}}

_ID_PATH = Path(..., description="The ID of the joke")
_KEY_QUERY = Query(None, description="Master key for authorization")


async def read_joke_form(request: Request) -> JokeForm:
    """Read ``text`` and ``type`` from a form body, keeping empty strings.

    FastAPI's ``Form`` parameters turn empty strings into defaults, which
    would make a full update with ``text=`` indistinguishable from one
    without ``text``.
    """
    form = await request.form()
    values = {}
    for name in ("text", "type"):
        value = form.get(name)
        values[name] = value if isinstance(value, str) else None
    return JokeForm(**values)


@router.get("/random", response_model=Joke, responses=_NOT_FOUND, summary="Get a random joke")
async def get_random_joke(store: JokeStore = Depends(get_joke_store)) -> Joke:
    """Return a random joke, or 404 when the collection is empty."""
    return store.random()


@router.get("/{joke_id}", response_model=Joke, responses=_NOT_FOUND, summary="Get a specific joke by ID")
async def get_joke(joke_id: str = _ID_PATH, store: JokeStore = Depends(get_joke_store)) -> Joke:
    """Retrieve a single joke by ID.

    The leading integer of the path segment is used as the id.  Returns
    HTTP 404 if no joke has that id or the segment has no leading integer.
    """
    return store.get(parse_joke_id(joke_id))


@router.get(
    "",
    response_model=List[Joke],
    summary="Get jokes filtered by type",
    description="You can filter jokes by the following types: " + ", ".join(JOKE_TYPES) + ".",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse, "description": "Missing joke type query parameter"},
        status.HTTP_404_NOT_FOUND: {"model": MessageResponse, "description": "No jokes found for this type"},
    },
)
async def list_jokes_by_type(
    joke_type: Optional[str] = Query(None, alias="type", description="The type of jokes to filter by"),
    store: JokeStore = Depends(get_joke_store),
) -> List[Joke]:
    return store.filter_by_type(joke_type)


@router.post(
    "",
    response_model=Joke,
    status_code=status.HTTP_201_CREATED,
    responses=_FORBIDDEN,
    openapi_extra=_FORM_BODY,
    summary="Add a new joke",
)
async def create_joke(
    key: Optional[str] = _KEY_QUERY,
    form: JokeForm = Depends(read_joke_form),
    store: JokeStore = Depends(get_joke_store),
) -> Joke:
    """Create a joke with ``id`` equal to the current count plus one."""
    return store.create(key, form.text, form.type)


@router.put(
    "/{joke_id}",
    response_model=Joke,
    responses={**_FORBIDDEN, **_NOT_FOUND},
    openapi_extra=_FORM_BODY,
    summary="Update a joke by ID",
)
async def replace_joke(
    joke_id: str = _ID_PATH,
    key: Optional[str] = _KEY_QUERY,
    form: JokeForm = Depends(read_joke_form),
    store: JokeStore = Depends(get_joke_store),
) -> Joke:
    """Replace both text and type; omitted fields become ``null``."""
    return store.replace(parse_joke_id(joke_id), key, form.text, form.type)


@router.patch(
    "/{joke_id}",
    response_model=Joke,
    responses={**_FORBIDDEN, **_NOT_FOUND},
    openapi_extra=_FORM_BODY,
    summary="Partially update a joke by ID",
)
async def patch_joke(
    joke_id: str = _ID_PATH,
    key: Optional[str] = _KEY_QUERY,
    form: JokeForm = Depends(read_joke_form),
    store: JokeStore = Depends(get_joke_store),
) -> Joke:
    """Update only the fields sent with a non‑empty value."""
    return store.patch(parse_joke_id(joke_id), key, form.text, form.type)


@router.delete(
    "/{joke_id}",
    response_model=MessageResponse,
    responses={**_FORBIDDEN, **_NOT_FOUND},
    summary="Delete a specific joke by ID",
)
async def delete_joke(
    joke_id: str = _ID_PATH,
    key: Optional[str] = _KEY_QUERY,
    store: JokeStore = Depends(get_joke_store),
) -> MessageResponse:
    """Delete a joke by ID (master key required).

    Unknown ids return 404 before the key is checked; a wrong key
    returns 403 and leaves the joke in place.
    """
    store.delete(parse_joke_id(joke_id), key)
    return MessageResponse(message="Joke deleted")


@router.delete("", response_model=MessageResponse, responses=_FORBIDDEN, summary="Delete all jokes")
async def delete_all_jokes(
    key: Optional[str] = _KEY_QUERY,
    store: JokeStore = Depends(get_joke_store),
) -> MessageResponse:
    """Delete every joke (master key required)."""
    store.delete_all(key)
    return MessageResponse(message="All jokes deleted")
