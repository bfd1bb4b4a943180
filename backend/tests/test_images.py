from app.services.images import (
    HOTEL_IMAGE_PALETTE,
    FallbackImageCache,
    _to_int32,
    fallback_image_for,
    rolling_hash,
)


def test_rolling_hash_small_ids():
    assert rolling_hash("") == 0
    assert rolling_hash("a") == 97
    # 97 * 31 + 98
    assert rolling_hash("ab") == 3105


def test_fallback_image_index_from_hash():
    assert fallback_image_for("a") == HOTEL_IMAGE_PALETTE[97 % 6]
    assert fallback_image_for("ab") == HOTEL_IMAGE_PALETTE[3105 % 6]


def test_shift_wraps_to_signed_32_bits():
    assert _to_int32(0x7FFFFFFF) == 2147483647
    assert _to_int32(0x80000000) == -2147483648
    assert _to_int32(0x1_0000_0005) == 5
    assert _to_int32(-1) == -1


def test_hash_matches_reference_values_past_32_bits():
    assert rolling_hash("hotel-1") == 1099180632
    assert rolling_hash("a-very-long-hotel-identifier-that-overflows-32-bits") == 3632969271
    assert fallback_image_for("hotel-1") == HOTEL_IMAGE_PALETTE[0]
    assert (
        fallback_image_for("a-very-long-hotel-identifier-that-overflows-32-bits")
        == HOTEL_IMAGE_PALETTE[3]
    )


def test_hash_uses_utf16_code_units():
    # the emoji is a surrogate pair, so two units
    assert rolling_hash("h\U0001F600tel") == -40594320
    assert fallback_image_for("h\U0001F600tel") == HOTEL_IMAGE_PALETTE[0]


def test_long_ids_stay_in_palette_and_are_deterministic():
    hotel_id = "a-very-long-hotel-identifier-that-overflows-32-bits"

    image = fallback_image_for(hotel_id)

    assert image in HOTEL_IMAGE_PALETTE
    assert fallback_image_for(hotel_id) == image
    assert rolling_hash(hotel_id) == rolling_hash(hotel_id)


def test_cache_keeps_first_assignment():
    cache = FallbackImageCache()
    cache._images["hotel-9"] = "https://example.com/first.jpg"

    assert cache.resolve("hotel-9") == "https://example.com/first.jpg"
    assert cache.resolve("hotel-10") == fallback_image_for("hotel-10")
    assert len(cache) == 2
    assert cache.get("unknown") is None
