from app.models.domain import HotelRecord
from app.services.catalog_service import CatalogService
from app.services.images import HOTEL_IMAGE_PALETTE, FallbackImageCache
from app.storage.repository import StaticHotelRepository


def make_catalog() -> CatalogService:
    hotels = [
        HotelRecord(
            id="hotel-1",
            name="The Royal Palace",
            city="Delhi",
            rating=4.5,
            price=3500,
            description="Elegant stay with all modern amenities.",
            facilities=("Free WiFi", "AC", "Breakfast"),
        ),
        HotelRecord(
            id="hotel-2",
            name="Sea Breeze",
            city="Goa",
            rating=4.0,
            price=2400,
            description="Beach cottages.",
            image="https://example.com/sea-breeze.jpg",
        ),
        HotelRecord(
            id="hotel-3",
            name="Old Quarter Inn",
            city="delhi",
            rating=3.5,
            price=1800,
            description="Budget rooms near the old city.",
        ),
    ]
    cities = ["Delhi", "Mumbai", "Bangalore", "Goa", "New Delhi"]
    return CatalogService(StaticHotelRepository(hotels, cities))


def test_list_all_keeps_dataset_order_and_sets_images():
    catalog = make_catalog()

    hotels = catalog.list_all()

    assert [h.id for h in hotels] == ["hotel-1", "hotel-2", "hotel-3"]
    assert all(h.image for h in hotels)
    assert hotels[1].image == "https://example.com/sea-breeze.jpg"
    assert hotels[0].image in HOTEL_IMAGE_PALETTE


def test_list_by_city_is_case_insensitive_subset():
    catalog = make_catalog()

    for query in ("Delhi", "DELHI", "delhi"):
        hotels = catalog.list_by_city(query)
        assert [h.id for h in hotels] == ["hotel-1", "hotel-3"]
        assert all(h.city.lower() == query.lower() for h in hotels)
        assert all(h in catalog.list_all() for h in hotels)


def test_list_by_city_does_not_trim_query():
    catalog = make_catalog()

    assert catalog.list_by_city(" Goa") == []
    assert catalog.list_by_city("Goa ") == []
    assert catalog.list_by_city("Atlantis") == []


def test_find_by_id_exact_match_or_none():
    catalog = make_catalog()

    hotel = catalog.find_by_id("hotel-1")
    assert hotel is not None
    assert hotel.name == "The Royal Palace"
    assert hotel.image

    assert catalog.find_by_id("HOTEL-1") is None
    assert catalog.find_by_id("missing") is None


def test_fallback_image_is_stable_across_lookups():
    catalog = make_catalog()

    first = catalog.find_by_id("hotel-3").image
    second = catalog.find_by_id("hotel-3").image
    from_list = catalog.list_by_city("delhi")[1].image

    assert first == second == from_list
    assert "hotel-3" in catalog.image_cache


def test_explicit_image_is_not_cached():
    catalog = make_catalog()

    catalog.find_by_id("hotel-2")

    assert "hotel-2" not in catalog.image_cache
    assert len(catalog.image_cache) == 0


def test_repository_records_are_not_mutated():
    catalog = make_catalog()

    catalog.list_all()

    assert catalog.repository.get("hotel-1").image is None


def test_catalog_uses_supplied_cache():
    cache = FallbackImageCache()
    catalog = CatalogService(make_catalog().repository, image_cache=cache)

    catalog.find_by_id("hotel-1")

    assert cache.get("hotel-1") in HOTEL_IMAGE_PALETTE


def test_search_city_names_substring_in_list_order():
    catalog = make_catalog()

    assert catalog.search_city_names("del") == ["Delhi", "New Delhi"]
    assert catalog.search_city_names("A") == ["Mumbai", "Bangalore", "Goa"]
    assert catalog.search_city_names("xyz123") == []
