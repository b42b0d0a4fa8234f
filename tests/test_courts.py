"""
Tests del registro de canchas
"""
import pytest

from app.crud import court as court_crud
from app.exceptions import NotFound
from app.schemas.court import CourtCreate, CourtUpdate

from conftest import auth_headers


def test_create_court_trims_the_name(db):
    court = court_crud.create_court(db, CourtCreate(name="  Pista Sur  ", is_indoor=True))

    assert court.name == "Pista Sur"
    assert court.is_indoor is True


def test_courts_are_listed_by_id_and_filtered(db, courts):
    outdoor = court_crud.create_court(db, CourtCreate(name="Pista Exterior"))

    all_ids = [c.id for c in court_crud.get_courts(db)]
    assert all_ids == [courts[0].id, courts[1].id, outdoor.id]
    assert [c.id for c in court_crud.get_courts(db, is_indoor=False)] == [outdoor.id]
    assert [c.id for c in court_crud.get_courts(db, is_indoor=True)] == [c.id for c in courts]


def test_update_court_changes_only_given_fields(db, court):
    updated = court_crud.update_court(
        db, court.id, CourtUpdate(name=" Pista Central Techada ", has_lighting=True)
    )

    assert updated.name == "Pista Central Techada"
    assert updated.has_lighting is True
    assert updated.surface_type == "hard"


def test_update_unknown_court(db):
    with pytest.raises(NotFound):
        court_crud.update_court(db, 999, CourtUpdate(name="Fantasma"))


def test_update_unknown_court_over_http(client, admin):
    response = client.put(
        "/courts/999", json={"name": "Fantasma"}, headers=auth_headers(admin)
    )

    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


def test_list_courts_filter_over_http(client, courts):
    response = client.get("/courts/", params={"is_indoor": "true"})

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Pista Central", "Pista Norte"]
