from stickit.services.post_its import current_weekday
from stickit.sessions import sessions


def test_home_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Log in" in response.text


def test_unknown_url_renders_error_page(client):
    response = client.get("/no/such/page")
    assert response.status_code == 404
    assert "Invalid URL entered" in response.text


def test_register_and_login(client, login_as):
    response = login_as("alice")
    assert response.status_code == 200
    assert response.url.path == "/dashboard"
    assert "Profile: alice" in response.text
    assert client.cookies.get("sessionId")
    assert len(sessions) == 1


def test_duplicate_registration_is_rejected(client, login_as):
    login_as("alice")
    response = client.post(
        "/register",
        data={"username": "alice", "email": "again@example.com", "password": "secret"},
    )
    assert response.status_code == 400
    assert "already exists" in response.text


def test_login_with_bad_credentials(client, login_as):
    login_as("alice")
    client.cookies.clear()
    response = client.post("/login", data={"email": "alice@example.com", "password": "wrong"})
    assert response.status_code == 401
    assert "Invalid credentials" in response.text


def test_protected_pages_require_session(client):
    for path in ("/dashboard", "/postits", "/complete", "/categories", "/category", "/users"):
        response = client.get(path)
        assert response.status_code == 401, path
        assert "Unauthorized access" in response.text


def test_unknown_session_cookie_is_unauthenticated(client):
    client.cookies.set("sessionId", "forged")
    response = client.get("/postits")
    assert response.status_code == 401


def test_logout_destroys_session(client, login_as):
    login_as("alice")
    response = client.get("/logout")
    assert response.status_code == 200
    assert response.url.path == "/"
    assert len(sessions) == 0
    assert client.get("/dashboard").status_code == 401


def _add_category(client, name="Work", color="FE0000"):
    return client.post(
        "/categoryform",
        data={"name": name, "description": "Office tasks", "color": color},
    )


def _add_post_it(client, title="Report", weekday=None, category="Work", pinned=None):
    data = {
        "title": title,
        "description": "Write it",
        "category": category,
        "weekday": weekday or current_weekday(),
    }
    if pinned:
        data["pinned"] = "on"
    return client.post("/postit", data=data)


def test_category_flow(client, login_as):
    login_as("alice")
    response = _add_category(client)
    assert response.status_code == 200
    assert "Work was created successfully" in response.text

    form = client.get("/category")
    assert 'value="FE0000"' not in form.text
    assert 'value="FFD100"' in form.text

    listing = client.get("/categories")
    assert "Office tasks" in listing.text

    found = client.get("/category/show", params={"title": "Work"})
    assert found.status_code == 200

    updated = client.post("/category/update", data={"title": "Work", "description": "Meetings"})
    assert "updated successfully" in updated.text
    assert "Meetings" in client.get("/categories").text


def test_category_with_invalid_color_is_rejected(client, login_as):
    login_as("alice")
    response = _add_category(client, color="123456")
    assert response.status_code == 400
    assert "color code is invalid" in response.text


def test_delete_category_by_id(client, login_as, db):
    from stickit.models import Category

    login_as("alice")
    _add_category(client)
    category = db.query(Category).filter(Category.title == "Work").one()

    response = client.post(f"/category/delete/{category.id}")
    assert response.status_code == 200
    assert response.url.path == "/categories"
    assert "Office tasks" not in response.text
    assert 'value="FE0000"' in client.get("/category").text


def test_post_it_flow(client, login_as, db):
    from stickit.models import PostIt

    login_as("alice")
    _add_category(client)
    response = _add_post_it(client, pinned=True)
    assert response.status_code == 200
    assert "Report created successfully" in response.text

    dashboard = client.get("/dashboard")
    assert "Report" in dashboard.text

    note = db.query(PostIt).filter(PostIt.title == "Report").one()
    assert note.pinned == "T"

    edit = client.get(f"/update/{note.id}")
    assert edit.status_code == 200
    updated = client.post(
        "/postit/update",
        data={"post_id": note.id, "description": "Proofread", "weekday": "saturday", "category": "Work"},
    )
    assert updated.status_code == 200
    chosen = client.post("/home", data={"choice": "saturday"})
    assert "Proofread" in chosen.text


def test_completed_post_it_moves_to_completed_listing(client, login_as, db):
    from stickit.models import PostIt

    login_as("alice")
    _add_category(client)
    _add_post_it(client, title="Report")
    note = db.query(PostIt).filter(PostIt.title == "Report").one()

    response = client.post(f"/postit/complete/{note.id}")
    assert "You completed your task" in response.text

    assert "Report" in client.get("/complete").text
    assert "Report" not in client.get("/postits").text
    assert "Report" not in client.get("/dashboard").text


def test_deleted_post_it_is_gone(client, login_as, db):
    from stickit.models import PostIt

    login_as("alice")
    _add_category(client)
    _add_post_it(client, title="Report")
    note = db.query(PostIt).filter(PostIt.title == "Report").one()

    assert client.post(f"/postit/delete/{note.id}").status_code == 200
    assert client.get(f"/update/{note.id}").status_code == 400


def test_post_its_of_other_users_are_hidden(client, login_as, db):
    from stickit.models import PostIt

    login_as("alice")
    _add_category(client)
    _add_post_it(client, title="Secret")
    note = db.query(PostIt).filter(PostIt.title == "Secret").one()

    client.cookies.clear()
    login_as("bob")
    assert "Secret" not in client.get("/postits").text
    assert client.post(f"/postit/complete/{note.id}").status_code == 400


def test_user_profile_update_and_delete(client, login_as):
    login_as("alice")
    profile = client.get("/user/alice")
    assert profile.status_code == 200
    assert "alice@example.com" in profile.text

    response = client.post(
        "/user/update",
        data={"email": "alice@example.com", "username": "alicia", "password": "newpass", "icon": ""},
    )
    assert response.status_code == 200
    assert "Profile: alicia" in response.text

    response = client.get("/user/delete/alice@example.com")
    assert response.status_code == 200
    assert response.url.path == "/home"
    assert len(sessions) == 0


def test_cannot_update_another_account(client, login_as):
    login_as("bob")
    client.cookies.clear()
    login_as("alice")
    response = client.post(
        "/user/update",
        data={"email": "bob@example.com", "username": "mallory", "password": "x"},
    )
    assert response.status_code == 403
    assert client.get("/user/delete/bob@example.com").status_code == 403


def test_list_users(client, login_as):
    login_as("alice")
    response = client.get("/users")
    assert response.status_code == 200
    assert "/user/alice" in response.text


def test_delete_post_it_by_title(client, login_as):
    login_as("alice")
    _add_category(client)
    _add_post_it(client, title="Report")

    response = client.post("/postit/delete", data={"title": "Report"})
    assert response.status_code == 200
    assert "Report was deleted successfully" in response.text
    assert "Report" not in client.get("/postits").text
    assert client.post("/postit/delete", data={"title": "Report"}).status_code == 400


def test_login_is_rate_limited(client, login_as):
    login_as("alice")
    codes = [
        client.post("/login", data={"email": "alice@example.com", "password": "wrong"}).status_code
        for _ in range(5)
    ]
    assert codes[:4] == [401, 401, 401, 401]
    assert codes[4] == 429

    response = client.post("/login", data={"email": "alice@example.com", "password": "secret"})
    assert response.status_code == 429
    assert response.headers["content-type"].startswith("text/html")
    assert "Too many attempts, try again later." in response.text


def test_create_user_form_is_rate_limited(client):
    codes = [
        client.post(
            "/user",
            data={"username": f"user{i}", "email": f"user{i}@example.com", "password": "secret"},
        ).status_code
        for i in range(6)
    ]
    assert codes == [200, 200, 200, 200, 200, 429]
