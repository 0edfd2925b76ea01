"""Fixed broker datasets served by the mock provider."""

from typing import Any, Dict

# =============================================================================
# MOCK PORTFOLIOS (keyed by lower-case broker identifier)
# =============================================================================

MOCK_PORTFOLIOS: Dict[str, Dict[str, Any]] = {
    "zerodha": {
        "holdings": [
            {
                "symbol": "RELIANCE",
                "name": "Reliance Industries",
                "quantity": 50,
                "avg_price": 2200.00,
                "current_price": 2456.80,
                "invested_value": 110000.00,
                "current_value": 122840.00,
            },
            {
                "symbol": "HDFCBANK",
                "name": "HDFC Bank",
                "quantity": 100,
                "avg_price": 1650.00,
                "current_price": 1623.40,
                "invested_value": 165000.00,
                "current_value": 162340.00,
            },
            {
                "symbol": "BHARTIARTL",
                "name": "Bharti Airtel",
                "quantity": 80,
                "avg_price": 820.00,
                "current_price": 872.30,
                "invested_value": 65600.00,
                "current_value": 69784.00,
            },
        ],
        "summary": {
            "invested": 340600.00,
            "current_value": 354964.00,
            "returns": 14364.00,
            "returns_percent": 4.22,
        },
    },
    "groww": {
        "holdings": [
            {
                "symbol": "TCS",
                "name": "Tata Consultancy Services",
                "quantity": 25,
                "avg_price": 3400.00,
                "current_price": 3589.50,
                "invested_value": 85000.00,
                "current_value": 89737.50,
            },
            {
                "symbol": "ICICIBANK",
                "name": "ICICI Bank",
                "quantity": 150,
                "avg_price": 890.00,
                "current_price": 934.60,
                "invested_value": 133500.00,
                "current_value": 140190.00,
            },
            {
                "symbol": "ASIANPAINT",
                "name": "Asian Paints",
                "quantity": 15,
                "avg_price": 3100.00,
                "current_price": 3245.70,
                "invested_value": 46500.00,
                "current_value": 48685.50,
            },
        ],
        "summary": {
            "invested": 265000.00,
            "current_value": 278613.00,
            "returns": 13613.00,
            "returns_percent": 5.14,
        },
    },
    "upstox": {
        "holdings": [
            {
                "symbol": "INFY",
                "name": "Infosys Limited",
                "quantity": 75,
                "avg_price": 1320.00,
                "current_price": 1445.25,
                "invested_value": 99000.00,
                "current_value": 108393.75,
            },
            {
                "symbol": "ITC",
                "name": "ITC Limited",
                "quantity": 200,
                "avg_price": 420.00,
                "current_price": 445.60,
                "invested_value": 84000.00,
                "current_value": 89120.00,
            },
        ],
        "summary": {
            "invested": 183000.00,
            "current_value": 197513.75,
            "returns": 14513.75,
            "returns_percent": 7.93,
        },
    },
}
