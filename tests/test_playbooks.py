def test_list_playbooks_empty(client):
    assert client.get("/playbooks").json() == []

def test_create_playbook(client, org):
    payload = {"organization_id": org["id"], "name": "deploy", "content": "---\n- hosts: all\n"}
    response = client.post("/playbooks", json=payload)
    assert response.status_code == 201
    body = response.json()
    assert body["content"] == payload["content"]
    assert body["description"] is None
    assert client.get(f"/playbooks/{body['id']}").json() == body

def test_create_playbook_missing_fields(client, org):
    payloads = [
        {"name": "deploy", "content": "---"},
        {"organization_id": org["id"], "content": "---"},
        {"organization_id": org["id"], "name": "deploy"},
        {"organization_id": org["id"], "name": "deploy", "content": ""},
    ]
    for payload in payloads:
        response = client.post("/playbooks", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "organization_id, name and content are required"}

    assert client.get("/playbooks").json() == []

def test_update_playbook_content(client, playbook):
    response = client.put(f"/playbooks/{playbook['id']}", json={"content": "--- # v2"})
    assert response.status_code == 200
    assert response.json()["content"] == "--- # v2"
    assert response.json()["name"] == "deploy"

def test_update_playbook_ignores_organization(client, playbook):
    response = client.put(f"/playbooks/{playbook['id']}", json={"organization_id": 99})
    assert response.status_code == 200
    assert response.json() == playbook

def test_playbook_not_found(client):
    assert client.get("/playbooks/3").json() == {"error": "playbook not found"}
    assert client.put("/playbooks/3", json={}).status_code == 404
    assert client.delete("/playbooks/3").status_code == 404

def test_delete_playbook(client, playbook):
    assert client.delete(f"/playbooks/{playbook['id']}").status_code == 204
    assert client.get(f"/playbooks/{playbook['id']}").status_code == 404

def test_update_playbook_without_body(client, playbook):
    response = client.put(f"/playbooks/{playbook['id']}")
    assert response.status_code == 200
    assert response.json() == playbook

    missing = client.put("/playbooks/999")
    assert missing.status_code == 404
    assert missing.json() == {"error": "playbook not found"}
