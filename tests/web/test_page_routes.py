from __future__ import annotations


def test_index_lists_permitted_modules(normal_client):
    resp = normal_client.get("/index")
    assert resp.status_code == 200
    assert b"authority_render/notification" in resp.data
    assert b"authority_render/salary\"" not in resp.data


def test_authority_render(normal_client):
    assert normal_client.get("/authority_render/notification").status_code == 200
    assert normal_client.get("/authority_render/salary").status_code == 403
    assert normal_client.get("/authority_render/spaceship").status_code == 404


def test_admin_sees_every_page(admin_client):
    for model in ("department", "rank", "staff", "password", "authority", "notification", "company", "salary", "salary_record"):
        resp = admin_client.get(f"/authority_render/{model}")
        assert resp.status_code == 200, model


def test_views_do_not_expose_templates(admin_client):
    assert admin_client.get("/views/index.html").status_code == 404
