def test_profile_hides_password(client, register):
    profile = client.get("/api/user", headers=register("alice")).json()
    assert profile["username"] == "alice"
    assert profile["email"] == "alice@zerowaste.org"
    assert "password" not in profile
    assert "password_hash" not in profile


def test_own_activities(client, register, create_recipe):
    alice = register("alice")
    bob = register("bobby")
    recipe_id = create_recipe(alice)
    client.post("/api/likes", json={"recipe_id": recipe_id, "is_like": True}, headers=alice)
    client.post("/api/comments", json={"recipe_id": recipe_id, "text": "Mine"}, headers=alice)
    client.post("/api/comments", json={"recipe_id": recipe_id, "text": "Theirs"}, headers=bob)

    activities = client.get("/api/user/activities", headers=alice).json()
    assert [r["id"] for r in activities["recipes"]] == [recipe_id]
    assert [like["is_like"] for like in activities["likes"]] == [True]
    assert [c["text"] for c in activities["comments"]] == ["Mine"]


def test_admin_endpoints_require_admin(client, register, make_admin):
    alice = register("alice")
    assert client.get("/api/users", headers=alice).status_code == 403
    assert client.get("/api/all-activities", headers=alice).status_code == 403

    admin = register("admin")
    make_admin("admin")
    users = client.get("/api/users", headers=admin).json()
    assert [(u["username"], u["role"]) for u in users] == [("alice", "user"), ("admin", "admin")]
    assert client.get("/api/all-activities", headers=admin).status_code == 200


def test_all_activities_covers_everyone(client, register, make_admin, create_recipe):
    alice = register("alice")
    bob = register("bobby")
    create_recipe(alice, name="Alice Soup")
    create_recipe(bob, name="Bob Stew")
    admin = register("admin")
    make_admin("admin")

    report = client.get("/api/all-activities", headers=admin).json()
    assert {r["name"] for r in report["recipes"]} == {"Alice Soup", "Bob Stew"}


def test_delete_user_cascades(client, register, make_admin, create_recipe):
    alice = register("alice")
    bob = register("bobby")
    bob_recipe = create_recipe(bob, name="Bob Stew")
    alice_recipe = create_recipe(alice, name="Alice Soup")
    client.post("/api/comments", json={"recipe_id": alice_recipe, "text": "Nice"}, headers=bob)
    client.post("/api/likes", json={"recipe_id": alice_recipe, "is_like": True}, headers=bob)
    client.post("/api/likes", json={"recipe_id": bob_recipe, "is_like": True}, headers=alice)
    client.post("/api/ingredients", json={"name": "Salt"}, headers=bob)

    admin = register("admin")
    make_admin("admin")
    bob_id = client.get("/api/user", headers=bob).json()["id"]

    res = client.delete(f"/api/users/{bob_id}", headers=admin)
    assert res.status_code == 204

    assert client.get(f"/api/recipes/{bob_recipe}").status_code == 404
    assert client.get(f"/api/recipes/{alice_recipe}").status_code == 200
    assert client.get(f"/api/comments/{alice_recipe}").json() == []
    assert client.get(f"/api/likes/count/{alice_recipe}").json() == {"likes": 0, "dislikes": 0}
    assert client.get("/api/user/activities", headers=alice).json()["likes"] == []
    assert [u["username"] for u in client.get("/api/users", headers=admin).json()] == ["alice", "admin"]

    # The token outlives the account
    assert client.get("/api/user", headers=bob).status_code == 404
    assert client.delete(f"/api/users/{bob_id}", headers=admin).status_code == 404


def test_admin_accounts_cannot_be_deleted(client, register, make_admin):
    admin = register("admin")
    make_admin("admin")
    admin_id = client.get("/api/user", headers=admin).json()["id"]

    res = client.delete(f"/api/users/{admin_id}", headers=admin)
    assert res.status_code == 403
    assert res.json() == {"message": "Admin accounts cannot be deleted"}
