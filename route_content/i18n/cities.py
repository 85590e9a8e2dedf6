"""IATA code -> city display name.

Used when upstream did not send a city name. Unknown codes return None;
callers decide how to degrade (raw code, or "<CODE> City" for flight
records).
"""

from __future__ import annotations

from typing import Optional

IATA_CITIES: dict[str, str] = {
    # North America
    "LAX": "Los Angeles",
    "WAS": "Washington, D.C.",
    "BWI": "Baltimore",
    "IAD": "Washington Dulles",
    "DCA": "Washington Reagan",
    "JFK": "New York",
    "EWR": "Newark",
    "LGA": "New York",
    "ORD": "Chicago",
    "DFW": "Dallas",
    "ATL": "Atlanta",
    "BOS": "Boston",
    "MIA": "Miami",
    "SFO": "San Francisco",
    "SEA": "Seattle",
    "DEN": "Denver",
    "LAS": "Las Vegas",
    "PHX": "Phoenix",
    "MCO": "Orlando",
    "CLT": "Charlotte",
    "IAH": "Houston",
    "DTW": "Detroit",
    "YYZ": "Toronto",
    "YVR": "Vancouver",
    "MEX": "Mexico City",
    "CUN": "Cancun",
    # Europe
    "LHR": "London",
    "LGW": "London",
    "CDG": "Paris",
    "ORY": "Paris",
    "AMS": "Amsterdam",
    "FRA": "Frankfurt",
    "MUC": "Munich",
    "MAD": "Madrid",
    "BCN": "Barcelona",
    "AGP": "Malaga",
    "PMI": "Palma de Mallorca",
    "LIS": "Lisbon",
    "FCO": "Rome",
    "MXP": "Milan",
    "ZRH": "Zurich",
    "VIE": "Vienna",
    "IST": "Istanbul",
    "SVO": "Moscow",
    "DME": "Moscow",
    "LED": "Saint Petersburg",
    # Middle East and Asia
    "DXB": "Dubai",
    "DOH": "Doha",
    "SIN": "Singapore",
    "BKK": "Bangkok",
    "HKG": "Hong Kong",
    "NRT": "Tokyo",
    "HND": "Tokyo",
    "ICN": "Seoul",
    "PEK": "Beijing",
    "PVG": "Shanghai",
    "SYD": "Sydney",
    # India
    "DEL": "Delhi",
    "BOM": "Mumbai",
    "HYD": "Hyderabad",
    "BLR": "Bangalore",
    "CCU": "Kolkata",
    "MAA": "Chennai",
    "AMD": "Ahmedabad",
    "PNQ": "Pune",
    "COK": "Kochi",
    "GOI": "Goa",
    "IXZ": "Port Blair",
    "IXC": "Chandigarh",
    "LKO": "Lucknow",
    "VGA": "Vijayawada",
    "TRV": "Thiruvananthapuram",
    "BDQ": "Vadodara",
    "JAI": "Jaipur",
    "UDR": "Udaipur",
    "JDH": "Jodhpur",
    "BHO": "Bhopal",
    "IDR": "Indore",
    "NAG": "Nagpur",
    "RAJ": "Rajkot",
    "SXR": "Srinagar",
    "IXJ": "Jammu",
    "IXL": "Leh",
    "IXB": "Bagdogra",
    "GAU": "Guwahati",
    "IXE": "Mangalore",
    "IXM": "Madurai",
    "IXR": "Ranchi",
}


def city_for_code(code: Optional[str]) -> Optional[str]:
    """Return the city for an IATA code, case-insensitively, or None."""
    if not code:
        return None
    return IATA_CITIES.get(code.strip().upper())


def city_or_code(code: str) -> str:
    """City name when known, else the upper-cased code itself."""
    return city_for_code(code) or code.upper()
