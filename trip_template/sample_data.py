"""
Record de voyage de démonstration : utilisé pour l'aperçu quand le shell n'en fournit pas.

Les chemins utilisés par les blocs : trip.reference, trip.title, trip.startDate,
trip.endDate, price.subtotal, price.deposit, price.total, services[].
"""
import copy

SAMPLE_TRIP_DATA = {
    "trip": {
        "reference": "BR-2025-0142",
        "title": "Smith Family - Tuscany Adventure",
        "startDate": "2025-03-15",
        "endDate": "2025-03-22",
        "duration": 7,
        "totalTravelers": 4,
    },
    "contact": {
        "fullName": "John Smith",
        "firstName": "John",
        "lastName": "Smith",
        "email": "john.smith@email.com",
        "phone": "+1 555-0123",
    },
    "price": {
        "total": "€12,450",
        "subtotal": "€11,200",
        "deposit": "€2,490",
        "currency": "EUR",
    },
    "services": [
        {
            "name": "Villa Toscana Resort",
            "type": "accommodation",
            "date": "Mar 15-22",
            "description": "7 nights luxury accommodation",
        },
        {
            "name": "Private Wine Tour",
            "type": "activity",
            "date": "Mar 16",
            "description": "Full day Chianti region experience",
        },
    ],
}


def sample_trip_data() -> dict:
    """Copie indépendante du record de démonstration."""
    return copy.deepcopy(SAMPLE_TRIP_DATA)
