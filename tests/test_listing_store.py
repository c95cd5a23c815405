import pytest

from estate_board.errors import NotFound
from estate_board.schemas.listing import ListingCreate, ListingUpdate, ListingFilter
from estate_board.services.uploads import UploadedImage


def make_listing(store, images=(), **fields):
    data = {"title": "Loft", "city": "Gdańsk", "price": 500000}
    data.update(fields)
    return store.create(ListingCreate(**data), list(images))


def jpeg(data=b"\xff\xd8jpeg-bytes"):
    return UploadedImage(filename="photo.jpg", mime="image/jpeg", data=data)


def test_empty_store_lists_nothing(store):
    assert store.list_all() == []


def test_create_keeps_submitted_fields(store):
    listing = make_listing(store, rooms=3, area=54.5, balcony=True, description="Widok na morze")

    assert listing.id is not None
    assert listing.title == "Loft"
    assert listing.city == "Gdańsk"
    assert listing.price == 500000
    assert listing.rooms == 3
    assert listing.area == 54.5
    assert listing.balcony is True
    assert listing.terrace is False
    assert listing.created_at is not None


def test_create_uses_default_type(store):
    assert make_listing(store).type == "mieszkanie"
    assert make_listing(store, type="dom").type == "dom"


def test_create_stores_images(store):
    listing = make_listing(store, images=[jpeg(b"one"), jpeg(b"two")])

    assert len(listing.image_ids) == 2
    first = store.get_image(listing.image_ids[0])
    assert first.mime == "image/jpeg"
    assert first.data == b"one"


def test_ids_are_unique_and_never_reused(store):
    first = make_listing(store)
    second = make_listing(store)
    store.delete(second.id)
    third = make_listing(store)

    assert len({first.id, second.id, third.id}) == 3
    assert third.id > second.id


def test_list_is_newest_first(store):
    ids = [make_listing(store, title=f"Listing {i}").id for i in range(3)]

    assert [listing.id for listing in store.list_all()] == list(reversed(ids))


def test_filters(store):
    flat = make_listing(store, title="Mieszkanie przy plaży", city="Sopot", rooms=2, area=40, price=300000)
    house = make_listing(store, title="Dom z ogrodem", city="Gdynia", rooms=5, area=150, price=1200000,
                         type="dom", description="Duży OGRÓD")

    def ids(**kwargs):
        return [listing.id for listing in store.list_all(ListingFilter(**kwargs))]

    assert ids(q="plaży") == [flat.id]
    assert ids(q="dom z") == [house.id]
    assert ids(city="sop") == [flat.id]
    assert ids(type="DOM") == [house.id]
    assert ids(rooms=2) == [flat.id]
    assert ids(min_area=100) == [house.id]
    assert ids(max_area=40) == [flat.id]
    assert ids(min_price=300000, max_price=1000000) == [flat.id]
    assert ids(max_price=100) == []


def test_search_treats_like_wildcards_literally(store):
    promo = make_listing(store, title="Rabat 50% na start")
    make_listing(store, title="Cena 500 tys.", city="Gdynia")

    def ids(**kwargs):
        return [listing.id for listing in store.list_all(ListingFilter(**kwargs))]

    assert ids(q="_") == []
    assert ids(q="%") == [promo.id]
    assert ids(q="50%") == [promo.id]
    assert ids(city="G_y") == []


def test_matching_folds_polish_letters(store):
    lodz = make_listing(store, title="Kamienica na ŁÓDZKIEJ", city="ŁÓDŹ", type="Działka")
    make_listing(store, title="Loft", city="Gdańsk")

    def ids(**kwargs):
        return [listing.id for listing in store.list_all(ListingFilter(**kwargs))]

    assert ids(city="łódź") == [lodz.id]
    assert ids(q="łódzk") == [lodz.id]
    assert ids(type="DZIAŁKA") == [lodz.id]
    assert ids(type="działka") == [lodz.id]


def test_get_one_missing(store):
    with pytest.raises(NotFound):
        store.get_one(999)


def test_partial_update_keeps_other_fields(store):
    listing = make_listing(store, title="A", city="X", price=100, rooms=2)
    created_at = listing.created_at

    store.update(listing.id, ListingUpdate(price=150))
    updated = store.get_one(listing.id)

    assert updated.title == "A"
    assert updated.city == "X"
    assert updated.price == 150
    assert updated.rooms == 2
    assert updated.created_at == created_at


def test_update_ignores_explicit_nulls(store):
    listing = make_listing(store, district="Wrzeszcz")

    store.update(listing.id, ListingUpdate(title=None, district=None))
    updated = store.get_one(listing.id)

    assert updated.title == "Loft"
    assert updated.district == "Wrzeszcz"


def test_update_adds_and_removes_images(store):
    listing = make_listing(store, images=[jpeg(b"old-1"), jpeg(b"old-2")])
    keep_id, drop_id = listing.image_ids

    updated = store.update(listing.id, ListingUpdate(), images=[jpeg(b"new")], remove_image_ids=[drop_id])

    assert keep_id in updated.image_ids
    assert drop_id not in updated.image_ids
    assert len(updated.image_ids) == 2
    with pytest.raises(NotFound):
        store.get_image(drop_id)


def test_remove_images_never_touches_other_listings(store):
    owner = make_listing(store, images=[jpeg(b"owner")])
    other = make_listing(store)
    foreign_id = owner.image_ids[0]

    store.update(other.id, ListingUpdate(), remove_image_ids=[foreign_id, 12345])

    assert store.get_image(foreign_id).data == b"owner"
    assert store.get_one(owner.id).image_ids == [foreign_id]


def test_update_missing_listing(store):
    with pytest.raises(NotFound):
        store.update(999, ListingUpdate(price=1))


def test_delete_cascades_to_images(store):
    listing = make_listing(store, images=[jpeg(b"a"), jpeg(b"b")])
    image_ids = listing.image_ids

    store.delete(listing.id)

    with pytest.raises(NotFound):
        store.get_one(listing.id)
    for image_id in image_ids:
        with pytest.raises(NotFound):
            store.get_image(image_id)


def test_delete_missing_listing(store):
    with pytest.raises(NotFound):
        store.delete(999)


def test_delete_image(store):
    listing = make_listing(store, images=[jpeg()])
    image_id = listing.image_ids[0]

    assert store.delete_image(image_id) == listing.id
    assert store.get_one(listing.id).image_ids == []
    with pytest.raises(NotFound):
        store.delete_image(image_id)
