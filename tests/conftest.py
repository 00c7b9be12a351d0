"""Shared pytest fixtures for all test suites."""

from collections.abc import Iterator
from typing import Any

import pytest

from wandermint.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Re-read settings for every test so env overrides apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def trip_document() -> dict[str, Any]:
    """Minimal valid trip document in the current layout."""
    return {
        "id": "trip-1",
        "userId": "user-1",
        "destinations": ["Tokyo, Japan"],
        "startDate": "2025-06-10T00:00:00Z",
        "endDate": "2025-06-20T00:00:00Z",
        "createdAt": "2025-05-01T12:00:00Z",
        "status": "pending",
    }


@pytest.fixture
def itinerary_document() -> dict[str, Any]:
    """Detailed itinerary exercising flights, days, stays and logistics."""
    return {
        "id": "itin-1",
        "flights": {
            "bookingDeadline": "2025-05-15",
            "bookingInstructions": "Book together ",
            "allFlights": [
                {
                    "isBooked": True,
                    "bookingReference": "ABC123",
                    "segments": [
                        {
                            "flightNumber": "NH7",
                            "airline": "ANA",
                            "departure": {"airport": "SFO", "airportCode": "SFO", "city": "San Francisco"},
                            "arrival": {"airport": "NRT", "airportCode": "NRT", "city": "Tokyo"},
                            "cost": {"paymentType": "cash", "cashAmount": 600},
                        }
                    ],
                },
                {
                    "segments": [
                        {
                            "flightNumber": "NH8",
                            "airline": "ANA",
                            "cost": {
                                "paymentType": "points",
                                "pointsAmount": 40000,
                                "pointsProgram": "United",
                                "totalCashValue": 500,
                            },
                        }
                    ]
                },
            ],
        },
        "transportation": [
            {
                "id": "t-1",
                "type": "train",
                "from": "Tokyo",
                "to": "Kyoto",
                "departureDate": "2025-06-15",
                "departureTime": "09:00",
                "cost": {"paymentType": "cash", "cashAmount": 80},
            }
        ],
        "dailyPlans": [
            {
                "id": "day-1",
                "dayNumber": 1,
                "date": "2025-06-11",
                "title": "Arrival",
                "activities": [
                    {
                        "id": "a-1",
                        "time": "15:00",
                        "title": "Meiji Shrine",
                        "description": "Morning walk",
                        "category": "cultural",
                        "location": {
                            "name": "Meiji Jingu",
                            "address": "Shibuya",
                            "coordinates": {"latitude": 35.6764, "longitude": 139.6993},
                        },
                        "cost": {"paymentType": "cash", "cashAmount": 10},
                    }
                ],
                "meals": [
                    {
                        "id": "m-1",
                        "type": "dinner",
                        "restaurantName": "Sukiyabashi",
                        "estimatedCost": {"paymentType": "cash", "cashAmount": 120},
                    }
                ],
                "transportation": [
                    {"id": "t-2", "method": "subway", "time": "08:00", "from": "Hotel", "to": "Shrine"}
                ],
            }
        ],
        "accommodations": [
            {
                "id": "acc-1",
                "name": "Park Hyatt Tokyo",
                "type": "hotel",
                "checkIn": "2025-06-11",
                "checkOut": "2025-06-15",
                "nights": 4,
                "cost": {"paymentType": "cash", "cashAmount": 900},
                "photos": [{"id": "p-1", "url": "https://example.com/1.jpg"}],
            }
        ],
        "totalCost": {"totalEstimate": 2200, "flights": 600, "currency": "USD"},
        "bookingInstructions": {"overallInstructions": "Book flights first"},
        "emergencyInfo": {"localEmergencyNumbers": {"police": "110"}},
    }


@pytest.fixture
def recommendation_document(itinerary_document: dict[str, Any]) -> dict[str, Any]:
    """Recommendation carrying both the detailed itinerary and legacy lists."""
    return {
        "id": "rec-1",
        "destination": "Tokyo, Japan",
        "overview": "Ten days in Japan",
        "bestTimeToVisit": "Spring",
        "tips": ["Get a rail pass"],
        "createdAt": "2025-05-02T09:00:00Z",
        "itinerary": itinerary_document,
        "activities": [{"id": "la-1", "name": "Tsukiji"}],
        "accommodations": [{"id": "lacc-1", "name": "Ryokan"}],
        "estimatedCost": {"totalEstimate": 2500, "currency": "USD"},
    }
