import os
from datetime import date, timedelta
from typing import Optional

import requests
import streamlit as st

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")


def get_city_suggestions(query: str) -> list[str]:
    if not query.strip():
        return []
    resp = requests.get(f"{BACKEND_URL}/cities", params={"q": query}, timeout=5)
    resp.raise_for_status()
    return resp.json()["suggestions"]


def post_search(payload: dict) -> dict:
    resp = requests.post(f"{BACKEND_URL}/search", json=payload, timeout=10)
    if resp.status_code == 422:
        return resp.json()
    resp.raise_for_status()
    return resp.json()


def get_hotels(params: dict) -> dict:
    resp = requests.get(f"{BACKEND_URL}/hotels", params=params, timeout=10)
    resp.raise_for_status()
    return resp.json()


def get_hotel(hotel_id: str) -> Optional[dict]:
    resp = requests.get(f"{BACKEND_URL}/hotels/{hotel_id}", timeout=10)
    if resp.status_code == 404:
        return None
    resp.raise_for_status()
    return resp.json()["data"]


def stars(hotel: dict) -> str:
    full, half, empty = hotel["stars"]
    return "★" * full + "½" * half + "☆" * empty


def plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def render_card(hotel: dict) -> None:
    with st.container(border=True):
        image_col, info_col = st.columns([1, 2])
        if hotel.get("image"):
            image_col.image(hotel["image"], use_container_width=True)
        info_col.subheader(hotel["name"])
        info_col.caption(f"{hotel['city']} | {stars(hotel)} ({hotel['rating']})")
        info_col.write(hotel["description"])
        info_col.markdown(" ".join(f"`{f}`" for f in hotel["facilities"]))
        info_col.markdown(f"**₹{hotel['price']:,}** per night")
        quote = hotel.get("quote") or {}
        if quote.get("total_label"):
            info_col.caption(quote["total_label"])
        if info_col.button("View Details", key=f"details-{hotel['id']}"):
            st.session_state["selected_hotel"] = hotel["id"]
            st.rerun()


def render_detail(hotel_id: str) -> None:
    if st.button("← Back to Hotels"):
        st.session_state.pop("selected_hotel", None)
        st.rerun()
    try:
        hotel = get_hotel(hotel_id)
    except requests.RequestException as exc:
        st.error(f"Failed to load hotel: {exc}")
        return
    if hotel is None:
        st.warning("Hotel not found. The hotel you're looking for doesn't exist or has been removed.")
        return

    if hotel.get("image"):
        st.image(hotel["image"], use_container_width=True)
    st.header(hotel["name"])
    st.caption(f"{hotel['city']} | {stars(hotel)} ({hotel['rating']})")

    main_col, booking_col = st.columns([2, 1])
    with main_col:
        st.subheader("About this hotel")
        st.write(hotel["description"])
        st.subheader("Facilities")
        for facility in hotel["facilities"]:
            st.markdown(f"- ✓ {facility}")
        st.subheader("Location")
        st.write(f"{hotel['city']}, India")
    with booking_col:
        st.subheader("Book your stay")
        st.metric("Price per night", f"₹{hotel['price']:,}")
        st.write(f"Rating: {hotel['rating']}/5")
        booked_key = f"booked-{hotel['id']}"
        if st.button("Book Now", disabled=st.session_state.get(booked_key, False)):
            st.session_state[booked_key] = True
        if st.session_state.get(booked_key):
            st.success(f"Booking initiated for {hotel['name']}!")
        st.caption("Free cancellation • No prepayment needed")


st.set_page_config(page_title="YatraBooking", layout="wide")
st.title("YatraBooking")
st.caption("Backend: FastAPI | UI: Streamlit | Static hotel catalog")

with st.sidebar:
    st.subheader("Find your stay")
    city_query = st.text_input("City", placeholder="Enter city name")
    try:
        suggestions = get_city_suggestions(city_query)
    except requests.RequestException:
        suggestions = []
    city = city_query
    if suggestions:
        picked = st.selectbox(
            "Suggestions",
            options=suggestions,
            index=None,
            placeholder="Keep typed city or pick a suggestion",
        )
        city = picked or city_query

    with st.form("search_form"):
        today = date.today()
        check_in = st.date_input("Check-in", value=today, min_value=today)
        check_out = st.date_input("Check-out", value=today + timedelta(days=1))
        guests = st.number_input("Guests", min_value=1, max_value=5, value=1)
        submitted = st.form_submit_button("Search Hotels")

if submitted:
    payload = {
        "city": city,
        "check_in": check_in.isoformat() if isinstance(check_in, date) else "",
        "check_out": check_out.isoformat() if isinstance(check_out, date) else "",
        "guests": int(guests),
    }
    try:
        result = post_search(payload)
    except requests.RequestException as exc:
        st.error(f"Search failed: {exc}")
        result = None
    if result and result.get("is_valid"):
        st.session_state["search"] = {
            "city": payload["city"],
            "checkin": payload["check_in"],
            "checkout": payload["check_out"],
            "guests": str(payload["guests"]),
        }
        st.session_state.pop("selected_hotel", None)
    elif result:
        for error in result.get("errors") or ["Search request was rejected"]:
            st.error(error)

selected = st.session_state.get("selected_hotel")
search = st.session_state.get("search")

if selected:
    render_detail(selected)
elif search:
    try:
        listing = get_hotels(search)
    except requests.RequestException as exc:
        st.error(f"Failed to load hotels: {exc}")
        listing = None
    if listing:
        stay = listing["stay"]
        st.header(f"Hotels in {search['city'] or 'India'}")
        st.caption(
            f"{search['checkin']} - {search['checkout']} • "
            f"{plural(stay['guests'], 'Guest')} • {plural(stay['nights'], 'Night')} • "
            f"{plural(listing['count'], 'hotel')} found"
        )
        if not listing["data"]:
            st.info(
                f"We couldn't find any hotels in {search['city']}. "
                "Try searching for a different city."
            )
        for hotel in listing["data"]:
            render_card(hotel)
else:
    st.info("Enter a city and your dates to search hotels.")
