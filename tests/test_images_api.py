def create_with_images(admin_client, *images):
    files = [("images", image) for image in images]
    response = admin_client.post(
        "/api/listings",
        data={"title": "Loft", "city": "Gdańsk", "price": "500000"},
        files=files,
    )
    assert response.status_code == 201
    return response.json()


def test_image_is_public(admin_client, client):
    listing = create_with_images(admin_client, ("plan.webp", b"RIFFwebp", "image/webp"))

    response = client.get(f"/api/images/{listing['image_ids'][0]}")
    assert response.status_code == 200
    assert response.content == b"RIFFwebp"
    assert response.headers["content-type"] == "image/webp"


def test_image_without_content_type(admin_client, client):
    listing = create_with_images(admin_client, ("blob", b"raw-bytes"))

    response = client.get(f"/api/images/{listing['image_ids'][0]}")
    assert response.status_code == 200
    assert response.content == b"raw-bytes"


def test_missing_image(client):
    response = client.get("/api/images/12345")
    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


def test_delete_image(admin_client):
    listing = create_with_images(
        admin_client,
        ("a.jpg", b"a", "image/jpeg"),
        ("b.jpg", b"b", "image/jpeg"),
    )
    first, second = listing["image_ids"]

    response = admin_client.delete(f"/api/images/{first}")
    assert response.status_code == 200
    assert response.json() == {"success": True, "id": first, "listing_id": listing["id"]}

    assert admin_client.get(f"/api/images/{first}").status_code == 404
    assert admin_client.get(f"/api/listings/{listing['id']}").json()["image_ids"] == [second]
    assert admin_client.delete(f"/api/images/{first}").status_code == 404
