"""
Violaciones de restricciones que solo detecta la base al hacer commit.
"""
import pytest
from sqlalchemy import select

from app import schemas
from app.core.errors import EntityInUse, UniquenessConflict
from app.models import Role, Technology
from app.services.roles import RoleService
from app.services.technologies import TechnologyService

API = "/api/v1"


class TestCommitTimeUniqueness:

    def test_duplicate_name_raises_conflict_and_rolls_back(self, db, monkeypatch):
        service = TechnologyService(db)
        service.create(schemas.TechnologyIn(name="Python"))

        # sin la comprobación previa, el UNIQUE de la tabla decide
        monkeypatch.setattr(TechnologyService, "_ensure_unique_name", lambda self, name, exclude_id=None: None)
        with pytest.raises(UniquenessConflict) as exc_info:
            service.create(schemas.TechnologyIn(name="Python"))
        assert exc_info.value.status_code == 409

        assert not db.new
        assert [t.name for t in db.scalars(select(Technology))] == ["Python"]


class TestDeleteStillReferenced:

    def test_role_referenced_after_load_is_bad_request(self, db, client, make_role):
        role_id = make_role("Engineer")["id"]

        service = RoleService(db)
        role = service.get(role_id)
        assert role.employees == []

        # otra petición asigna el rol mientras tanto
        resp = client.post(f"{API}/employees", json={
            "name": "Mario", "surname": "Rossi", "hiring_date": "2023-03-15", "role_name": "Engineer",
        })
        assert resp.status_code == 201

        with pytest.raises(EntityInUse) as exc_info:
            service.delete(role_id)
        assert exc_info.value.status_code == 400

        assert db.get(Role, role_id) is not None
        assert client.get(f"{API}/roles/{role_id}").status_code == 200
