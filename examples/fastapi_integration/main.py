"""
FastAPI Integration Example

Serves an alphabetical people directory from DynamoDB. The selected letter
comes from the `ltr` query parameter (AlphabarConfig.letter_param); the
response carries the records, the per-letter counts and a ready-to-embed
navigation fragment.
"""

from fastapi import FastAPI, Request
from pydantic import BaseModel

from alphabar import AlphabarConfig, DynamoSource, alpha_scope, build_navigation, render_alphabar


class Person(BaseModel):
    """Person record stored in the People table"""

    person_id: str
    last_name: str | None = None
    first_name: str = ""
    email: str | None = None


class NavLinkOut(BaseModel):
    label: str
    count: int
    current: bool
    linked: bool


class DirectoryPage(BaseModel):
    """Response model for one letter of the directory"""

    group: str
    total: int
    counts: dict[str, int]
    people: list[Person]
    navigation: list[NavLinkOut]
    navigation_html: str


# Loaded once at startup and passed explicitly to every request
settings = AlphabarConfig.from_env()
source = DynamoSource(Person, table_name="People")

app = FastAPI(title="Alphabar + FastAPI Example")


@app.get("/people", response_model=DirectoryPage)
def list_people(request: Request) -> DirectoryPage:
    """List the people whose last name starts with the selected letter"""
    letter = request.query_params.get(settings.letter_param)
    page = alpha_scope(source, "last_name", letter, config=settings)
    paginator = page.paginator

    return DirectoryPage(
        group=str(page.group),
        total=page.total,
        counts={str(g): n for g, n in paginator.counts.items()},
        people=page.items,
        navigation=[
            NavLinkOut(label=link.label, count=link.count, current=link.current, linked=link.linked)
            for link in build_navigation(paginator)
        ],
        navigation_html=render_alphabar(
            paginator,
            dict(request.query_params),
            letter_param=settings.letter_param,
            base_url=request.url.path,
        ),
    )


# Run with: uvicorn main:app --reload
# Visit: http://localhost:8000/people?ltr=S
