def test_pantry_is_per_user(client, register):
    alice = register("alice")
    bob = register("bobby")

    res = client.post("/api/ingredients", json={"name": "Milk", "expiration_date": "2030-01-01"}, headers=alice)
    assert res.status_code == 201
    assert "id" in res.json()
    client.post("/api/ingredients", json={"name": "Flour"}, headers=alice)

    pantry = client.get("/api/ingredients", headers=alice).json()
    assert [(item["name"], item["expiration_date"]) for item in pantry] == [("Milk", "2030-01-01"), ("Flour", None)]
    assert client.get("/api/ingredients", headers=bob).json() == []
    assert client.get("/api/ingredients").status_code == 401


def test_comments(client, register, create_recipe):
    headers = register("alice")
    recipe_id = create_recipe(headers)

    assert client.post("/api/comments", json={"recipe_id": recipe_id, "text": "Great"}).status_code == 401

    first = client.post("/api/comments", json={"recipe_id": recipe_id, "text": "Great"}, headers=headers)
    second = client.post("/api/comments", json={"recipe_id": recipe_id, "text": "Again"}, headers=headers)
    assert first.status_code == second.status_code == 201

    comments = client.get(f"/api/comments/{recipe_id}").json()
    assert [c["text"] for c in comments] == ["Great", "Again"]
    assert comments[0]["created_at"]


def test_comment_validation(client, register, create_recipe):
    headers = register("alice")
    recipe_id = create_recipe(headers)

    res = client.post("/api/comments", json={"recipe_id": recipe_id, "text": ""}, headers=headers)
    assert res.status_code == 400
    res = client.post("/api/comments", json={"recipe_id": 999, "text": "Where?"}, headers=headers)
    assert res.status_code == 404


def test_votes(client, register, create_recipe):
    alice = register("alice")
    bob = register("bobby")
    recipe_id = create_recipe(alice)

    assert client.get(f"/api/likes/{recipe_id}", headers=alice).json() == {"liked": None}

    res = client.post("/api/likes", json={"recipe_id": recipe_id, "is_like": True}, headers=alice)
    assert res.status_code == 200
    assert res.json() == {"message": "Vote recorded"}
    assert client.get(f"/api/likes/{recipe_id}", headers=alice).json() == {"liked": True}

    # Voting again replaces the earlier vote
    client.post("/api/likes", json={"recipe_id": recipe_id, "is_like": False}, headers=alice)
    client.post("/api/likes", json={"recipe_id": recipe_id, "is_like": False}, headers=alice)
    assert client.get(f"/api/likes/count/{recipe_id}").json() == {"likes": 0, "dislikes": 1}

    client.post("/api/likes", json={"recipe_id": recipe_id, "is_like": True}, headers=bob)
    assert client.get(f"/api/likes/count/{recipe_id}").json() == {"likes": 1, "dislikes": 1}
    assert client.get(f"/api/likes/{recipe_id}", headers=alice).json() == {"liked": False}


def test_vote_on_unknown_recipe(client, register):
    res = client.post("/api/likes", json={"recipe_id": 999, "is_like": True}, headers=register("alice"))
    assert res.status_code == 404


def test_vote_counts_follow_latest_vote(client, register, create_recipe):
    headers = register("alice")
    recipe_id = create_recipe(headers)

    def vote(is_like):
        res = client.post("/api/likes", json={"recipe_id": recipe_id, "is_like": is_like}, headers=headers)
        assert res.status_code == 200
        return client.get(f"/api/likes/count/{recipe_id}").json()

    assert vote(True) == {"likes": 1, "dislikes": 0}
    assert vote(True) == {"likes": 1, "dislikes": 0}
    assert vote(False) == {"likes": 0, "dislikes": 1}
    assert vote(True) == {"likes": 1, "dislikes": 0}
