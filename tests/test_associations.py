"""
Asociaciones empleado <-> tecnología y proyecto <-> empleado.
"""
import pytest

from app.core.errors import InvalidAssociation
from app.models import Employee, Technology
from app.services.employees import EmployeeService
from app.services.roles import RoleService

API = "/api/v1"


@pytest.fixture
def staff(make_role, make_employee, make_project, make_technology):
    make_role("Engineer")
    return {
        "employee": make_employee(),
        "project": make_project(),
        "technology": make_technology("Python"),
    }


class TestEmployeeTechnology:

    def test_attach_twice_fails(self, client, staff):
        url = f"{API}/employees/{staff['employee']['id']}/technologies/{staff['technology']['id']}"
        assert client.put(url).status_code == 200
        resp = client.put(url)
        assert resp.status_code == 400
        assert "already assigned" in resp.json()["detail"]

        techs = client.get(f"{API}/employees/{staff['employee']['id']}/technologies").json()
        assert [t["name"] for t in techs] == ["Python"]

    def test_detach_twice_fails(self, client, staff):
        url = f"{API}/employees/{staff['employee']['id']}/technologies/{staff['technology']['id']}"
        client.put(url)
        assert client.delete(url).status_code == 200
        resp = client.delete(url)
        assert resp.status_code == 400
        assert "not assigned" in resp.json()["detail"]
        assert client.get(f"{API}/employees/{staff['employee']['id']}/technologies").status_code == 204

    def test_unknown_ids(self, client, staff):
        emp_id, tech_id = staff["employee"]["id"], staff["technology"]["id"]
        assert client.put(f"{API}/employees/999/technologies/{tech_id}").status_code == 404
        assert client.put(f"{API}/employees/{emp_id}/technologies/999").status_code == 404
        assert client.delete(f"{API}/employees/{emp_id}/technologies/999").status_code == 404

    def test_both_sides_updated(self, client, staff):
        emp_id, tech_id = staff["employee"]["id"], staff["technology"]["id"]
        client.put(f"{API}/employees/{emp_id}/technologies/{tech_id}")
        employees = client.get(f"{API}/technologies/{tech_id}/employees").json()
        assert [e["id"] for e in employees] == [emp_id]
        assert client.get(f"{API}/employees/{emp_id}").json()["technologies"][0]["id"] == tech_id

    def test_service_keeps_graph_consistent(self, db, staff):
        service = EmployeeService(db, roles=RoleService(db))
        emp_id, tech_id = staff["employee"]["id"], staff["technology"]["id"]
        service.add_technology(emp_id, tech_id)

        technology = db.get(Technology, tech_id)
        employee = db.get(Employee, emp_id)
        assert employee in technology.employees

        with pytest.raises(InvalidAssociation):
            service.add_technology(emp_id, tech_id)

        service.remove_technology(emp_id, tech_id)
        assert employee not in technology.employees
        assert technology not in employee.technologies


class TestProjectEmployee:

    def test_attach_and_list(self, client, staff):
        pid, eid = staff["project"]["id"], staff["employee"]["id"]
        assert client.get(f"{API}/projects/{pid}/employees").status_code == 204
        assert client.put(f"{API}/projects/{pid}/employees/{eid}").status_code == 200

        employees = client.get(f"{API}/projects/{pid}/employees").json()
        assert [e["id"] for e in employees] == [eid]
        projects = client.get(f"{API}/employees/{eid}/projects").json()
        assert [p["id"] for p in projects] == [pid]

    def test_attach_twice_and_detach_twice(self, client, staff):
        url = f"{API}/projects/{staff['project']['id']}/employees/{staff['employee']['id']}"
        assert client.put(url).status_code == 200
        assert client.put(url).status_code == 400
        assert client.delete(url).status_code == 200
        assert client.delete(url).status_code == 400

    def test_unknown_ids(self, client, staff):
        pid, eid = staff["project"]["id"], staff["employee"]["id"]
        assert client.put(f"{API}/projects/999/employees/{eid}").status_code == 404
        assert client.put(f"{API}/projects/{pid}/employees/999").status_code == 404

    def test_delete_project_keeps_employee(self, client, staff):
        pid, eid = staff["project"]["id"], staff["employee"]["id"]
        client.put(f"{API}/projects/{pid}/employees/{eid}")
        assert client.delete(f"{API}/projects/{pid}").status_code == 200
        assert client.get(f"{API}/employees/{eid}").status_code == 200
        assert client.get(f"{API}/employees/{eid}/projects").status_code == 204
