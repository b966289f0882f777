"""Animal Routes — list, get-by-name and create over HTTP.

Invariants:
    - GET / returns plaintext "Hello, World!"
    - GET /animals lists the store in insertion order
    - GET /animals/{name} returns one animal or 404 {"error": "Animal not found"}
    - POST /animals answers 201 with empty body and Location, or 400 with
      {"error": "Invalid animal data", "details": {...}} and no store change
"""

import pytest

from animals_api.core.animal_store import AnimalStore
from animals_api.main import app

SEED = [
    {"type": "cat", "name": "Whiskers", "age": 3, "livesLeft": 7},
    {"type": "dog", "name": "Buddy", "age": 5, "breed": "Labrador"},
]


# --- GET / ---------------------------------------------------------------------

async def test_root_returns_hello_world(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.text == "Hello, World!"
    assert res.headers["content-type"].startswith("text/plain")


# --- GET /animals --------------------------------------------------------------

async def test_list_returns_seed_in_order(client):
    res = await client.get("/animals")
    assert res.status_code == 200
    assert res.json() == SEED


async def test_list_is_empty_array_for_empty_store(client, monkeypatch):
    monkeypatch.setattr(app.state, "animal_store", AnimalStore([]))
    res = await client.get("/animals")
    assert res.status_code == 200
    assert res.json() == []


async def test_repeated_reads_are_identical(client):
    first = await client.get("/animals")
    second = await client.get("/animals")
    one = await client.get("/animals/Whiskers")
    two = await client.get("/animals/Whiskers")
    assert first.json() == second.json()
    assert one.json() == two.json()


# --- GET /animals/{name} -------------------------------------------------------

async def test_get_dog_by_name(client):
    res = await client.get("/animals/Buddy")
    assert res.status_code == 200
    assert res.json() == {"type": "dog", "name": "Buddy", "age": 5, "breed": "Labrador"}


async def test_get_cat_by_name(client):
    res = await client.get("/animals/Whiskers")
    assert res.status_code == 200
    assert res.json() == {"type": "cat", "name": "Whiskers", "age": 3, "livesLeft": 7}


async def test_get_unknown_name_returns_404(client):
    res = await client.get("/animals/NonExistent")
    assert res.status_code == 404
    assert res.json() == {"error": "Animal not found"}


async def test_get_by_name_is_case_sensitive(client):
    res = await client.get("/animals/buddy")
    assert res.status_code == 404


# --- POST /animals: success ----------------------------------------------------

async def test_create_cat_round_trip(client):
    new_cat = {"type": "cat", "name": "NewCat", "age": 1, "livesLeft": 9}
    res = await client.post("/animals", json=new_cat)
    assert res.status_code == 201
    assert res.content == b""
    assert res.headers["location"] == "/animals/NewCat"

    get_res = await client.get("/animals/NewCat")
    assert get_res.json() == new_cat


async def test_create_dog_round_trip(client):
    new_dog = {"type": "dog", "name": "Rex", "age": 2, "breed": "Pug"}
    res = await client.post("/animals", json=new_dog)
    assert res.status_code == 201
    assert res.headers["location"] == "/animals/Rex"

    get_res = await client.get("/animals/Rex")
    assert get_res.status_code == 200
    assert get_res.json() == new_dog


async def test_create_appends_to_end_of_list(client):
    await client.post("/animals", json={"type": "dog", "name": "Rex", "age": 2, "breed": "Pug"})
    res = await client.get("/animals")
    assert [a["name"] for a in res.json()] == ["Whiskers", "Buddy", "Rex"]


async def test_create_drops_unknown_fields(client):
    payload = {"type": "dog", "name": "Rex", "age": 2, "breed": "Pug", "owner": "Ann"}
    await client.post("/animals", json=payload)
    res = await client.get("/animals/Rex")
    assert res.json() == {"type": "dog", "name": "Rex", "age": 2, "breed": "Pug"}


async def test_create_duplicate_name_keeps_first_for_lookup(client):
    res = await client.post(
        "/animals", json={"type": "cat", "name": "Buddy", "age": 1, "livesLeft": 3},
    )
    assert res.status_code == 201

    listing = await client.get("/animals")
    assert len(listing.json()) == 3
    found = await client.get("/animals/Buddy")
    assert found.json()["type"] == "dog"


async def test_location_encodes_name_as_one_segment(client):
    res = await client.post(
        "/animals", json={"type": "dog", "name": "Sir Barks", "age": 4, "breed": "Corgi"},
    )
    assert res.headers["location"] == "/animals/Sir%20Barks"

    get_res = await client.get(res.headers["location"])
    assert get_res.json()["name"] == "Sir Barks"


async def test_name_with_slash_round_trips_through_location(client):
    new_dog = {"type": "dog", "name": "Rex/Jr", "age": 2, "breed": "Pug"}
    res = await client.post("/animals", json=new_dog)
    assert res.status_code == 201
    assert res.headers["location"] == "/animals/Rex%2FJr"

    get_res = await client.get(res.headers["location"])
    assert get_res.status_code == 200
    assert get_res.json() == new_dog


# --- POST /animals: rejection --------------------------------------------------

@pytest.mark.parametrize(
    "payload",
    [
        {"type": "cat", "name": "InvalidCat"},
        {"type": "dog", "name": "InvalidDog", "age": 4},
        {"type": "bird", "name": "Tweety", "age": 2},
        {"type": "dog", "name": "InvalidDog", "breed": "Bulldog"},
        {"type": "dog", "age": 4, "breed": "Bulldog"},
        {"type": "cat", "name": "", "age": 1, "livesLeft": 9},
        {"type": "cat", "name": "ImmortalCat", "age": 1, "livesLeft": 10},
        {"type": "cat", "name": "DeadCat", "age": 1, "livesLeft": -1},
        {"type": "dog", "name": "TimeTraveler", "age": -5, "breed": "Beagle"},
        {"name": "NoTag", "age": 1, "breed": "Pug"},
        [1, 2, 3],
    ],
)
async def test_invalid_animal_returns_400(client, payload):
    res = await client.post("/animals", json=payload)
    assert res.status_code == 400
    body = res.json()
    assert body["error"] == "Invalid animal data"
    assert isinstance(body["details"], dict) and body["details"]


async def test_invalid_cat_details_name_each_field(client):
    res = await client.post("/animals", json={"type": "cat", "name": "X"})
    assert set(res.json()["details"]) == {"age", "livesLeft"}


async def test_wrong_tag_details_only_mention_type(client):
    res = await client.post("/animals", json={"type": "bird", "name": "", "age": -1})
    assert list(res.json()["details"]) == ["type"]


async def test_rejected_create_does_not_touch_store(client):
    await client.post(
        "/animals", json={"type": "cat", "name": "ImmortalCat", "age": 1, "livesLeft": 10},
    )
    res = await client.get("/animals")
    assert res.json() == SEED
    missing = await client.get("/animals/ImmortalCat")
    assert missing.status_code == 404


async def test_malformed_json_returns_400(client):
    res = await client.post(
        "/animals", content=b"{not json", headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid request data"


async def test_missing_body_is_invalid_animal_data(client):
    res = await client.post("/animals")
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid animal data"
    assert list(res.json()["details"]) == ["type"]


async def test_null_body_is_invalid_animal_data(client):
    res = await client.post(
        "/animals", content=b"null", headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid animal data"
    assert list(res.json()["details"]) == ["type"]
