"""
Endpoints de roles.
"""
API = "/api/v1"


class TestRoleCrud:

    def test_create_defaults_min_salary_to_zero(self, client):
        resp = client.post(f"{API}/roles", json={"name": "Intern"})
        assert resp.status_code == 201
        body = resp.json()
        assert body["name"] == "Intern"
        assert body["min_salary"] == 0

    def test_get_and_404(self, client, make_role):
        role = make_role("Engineer", 3000)
        resp = client.get(f"{API}/roles/{role['id']}")
        assert resp.status_code == 200
        assert resp.json()["min_salary"] == 3000

        resp = client.get(f"{API}/roles/999")
        assert resp.status_code == 404
        assert "role with id 999" in resp.json()["detail"]

    def test_blank_name_is_bad_request(self, client):
        resp = client.post(f"{API}/roles", json={"name": "  "})
        assert resp.status_code == 400
        assert resp.json()["detail"][0]["field"] == "name"

    def test_name_unique_ignoring_case(self, client, make_role):
        make_role("Engineer")
        resp = client.post(f"{API}/roles", json={"name": "ENGINEER"})
        assert resp.status_code == 409

    def test_padded_name_is_stored_trimmed(self, client, make_role):
        role = make_role(" Engineer ", 3000)
        assert role["name"] == "Engineer"

        resp = client.post(f"{API}/roles", json={"name": "Engineer", "min_salary": 1000})
        assert resp.status_code == 409
        resp = client.post(f"{API}/roles", json={"name": "  engineer"})
        assert resp.status_code == 409

    def test_padded_role_name_finds_role(self, client, make_role, make_employee):
        make_role(" Engineer ", 3000)
        emp = make_employee(role_name=" Engineer ")
        assert emp["role"]["name"] == "Engineer"
        assert emp["salary"] == 3000

    def test_rename_is_trimmed(self, client, make_role):
        make_role("Engineer")
        other = make_role("Manager")
        resp = client.put(f"{API}/roles/{other['id']}", json={"name": " Engineer "})
        assert resp.status_code == 409
        resp = client.put(f"{API}/roles/{other['id']}", json={"name": " Lead "})
        assert resp.status_code == 200
        assert resp.json()["name"] == "Lead"

    def test_rename_to_existing_name_conflicts(self, client, make_role):
        make_role("Engineer")
        other = make_role("Manager")
        resp = client.put(f"{API}/roles/{other['id']}", json={"name": "engineer"})
        assert resp.status_code == 409

    def test_rename_same_role_keeps_working(self, client, make_role):
        role = make_role("Engineer")
        resp = client.put(f"{API}/roles/{role['id']}", json={"name": "Engineer", "min_salary": 100})
        assert resp.status_code == 200
        assert resp.json()["min_salary"] == 100


class TestRoleFilters:

    def test_empty_table_is_no_content(self, client):
        resp = client.get(f"{API}/roles")
        assert resp.status_code == 204
        assert resp.content == b""

    def test_filter_by_name_and_minimum_salary(self, client, make_role):
        make_role("Engineer", 3000)
        make_role("Intern", 0)
        make_role("Manager", 5000)

        resp = client.get(f"{API}/roles", params={"minimum_salary": 3000})
        assert [r["name"] for r in resp.json()] == ["Engineer", "Manager"]

        resp = client.get(f"{API}/roles", params={"name": "intern"})
        assert [r["name"] for r in resp.json()] == ["Intern"]

        resp = client.get(f"{API}/roles", params={"name": "Ghost"})
        assert resp.status_code == 204


class TestRoleUpdate:

    def test_all_empty_payload_is_not_modified(self, client, make_role):
        role = make_role("Engineer", 3000)
        resp = client.put(f"{API}/roles/{role['id']}", json={"name": " ", "min_salary": None})
        assert resp.status_code == 304
        assert client.get(f"{API}/roles/{role['id']}").json() == role

    def test_not_modified_is_reported_before_lookup(self, client):
        resp = client.put(f"{API}/roles/999", json={})
        assert resp.status_code == 304

    def test_update_missing_role(self, client):
        resp = client.put(f"{API}/roles/999", json={"name": "Ghost"})
        assert resp.status_code == 404

    def test_raising_minimum_above_holder_salary_is_rejected(self, client, make_role, make_employee):
        role = make_role("Engineer", 3000)
        make_employee(role_name="Engineer")
        resp = client.put(f"{API}/roles/{role['id']}", json={"min_salary": 3500})
        assert resp.status_code == 400
        assert client.get(f"{API}/roles/{role['id']}").json()["min_salary"] == 3000

    def test_lowering_minimum_is_allowed(self, client, make_role, make_employee):
        role = make_role("Engineer", 3000)
        make_employee(role_name="Engineer")
        resp = client.put(f"{API}/roles/{role['id']}", json={"min_salary": 2000})
        assert resp.status_code == 200
        assert resp.json()["min_salary"] == 2000


class TestRoleEmployeesAndDelete:

    def test_employees_of_role(self, client, make_role, make_employee):
        role = make_role("Engineer")
        assert client.get(f"{API}/roles/{role['id']}/employees").status_code == 204
        make_employee(role_name="Engineer")
        resp = client.get(f"{API}/roles/{role['id']}/employees")
        assert resp.status_code == 200
        assert [e["surname"] for e in resp.json()] == ["Rossi"]

    def test_delete_role_in_use_is_bad_request(self, client, make_role, make_employee):
        role = make_role("Engineer")
        make_employee(role_name="Engineer")
        resp = client.delete(f"{API}/roles/{role['id']}")
        assert resp.status_code == 400
        assert client.get(f"{API}/roles/{role['id']}").status_code == 200

    def test_delete_role(self, client, make_role):
        role = make_role("Engineer")
        assert client.delete(f"{API}/roles/{role['id']}").status_code == 200
        assert client.get(f"{API}/roles/{role['id']}").status_code == 404
        assert client.delete(f"{API}/roles/{role['id']}").status_code == 404
