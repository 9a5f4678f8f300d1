"""
Example: an alphabetical staff directory over an in-memory list.

Shows the explicit paginator flow, the alpha_scope shortcut, and the
navigation fragment rendered for the selected letter.
"""

import logging

from pydantic import BaseModel

from alphabar import AlphabarConfig, BucketPaginator, InMemorySource, alpha_scope, render_alphabar

logging.basicConfig(level=logging.INFO)


class Employee(BaseModel):
    employee_id: int
    last_name: str | None = None
    first_name: str


staff = [
    Employee(employee_id=1, last_name="Abbott", first_name="Ava"),
    Employee(employee_id=2, last_name="baker", first_name="Ben"),
    Employee(employee_id=3, last_name="Barnes", first_name="Bea"),
    Employee(employee_id=4, last_name="Quinn", first_name="Quincy"),
    Employee(employee_id=5, last_name="", first_name="Contractor"),
    Employee(employee_id=6, last_name=None, first_name="Intern"),
]

# Loaded once at startup; ALPHABAR_MINIMUM_RECORDS etc. override the defaults
settings = AlphabarConfig.from_env()
settings.all_option = True

source = InMemorySource(staff, model=Employee)

# 1. Explicit flow: configure, resolve, inspect
print("Explicit paginator...")
paginator = BucketPaginator(field="last_name", group="b", config=settings)
page = paginator.resolve(source)
print(f"Group {page.group}: {[e.last_name for e in page]}")
print(f"Counts: { {str(g): n for g, n in paginator.counts.items()} }")
print(render_alphabar(paginator, {"dept": "eng", "ltr": "b"}, letter_param=settings.letter_param))

# 2. An unknown letter silently falls back to the first populated group
print("\nFallback from an empty letter...")
page = alpha_scope(source, "last_name", "Z", config=settings)
print(f"Requested Z, showing {page.group}: {[e.last_name for e in page]}")

# 3. Blank collects empty and missing names
print("\nBlank group...")
page = alpha_scope(source, "last_name", "Blank", config=settings)
print(f"Blank: {[e.first_name for e in page]}")
