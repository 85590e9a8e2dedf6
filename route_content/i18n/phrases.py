"""Static per-locale UI phrase tables.

Every key is present for every locale; tests enforce this. ``phrase``
still falls back to the English string of the same key, so a key
missing from a future table degrades to English instead of failing.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

from ..domain.models import Locale
from .locales import normalize

PhraseMap = Mapping[str, str]

_EN: dict[str, str] = {
    "available_flights": "Available Flights",
    "find_flights": "Find Flights",
    "find_hotels": "Find Hotels",
    "book_now": "Book Now",
    "view_details": "View Details",
    "select_flight": "Select Flight",
    "compare_prices": "Compare Prices",
    "filter_results": "Filter Results",
    "sort_by": "Sort By",
    "show_more": "Show More",
    "show_less": "Show Less",
    "loading": "Loading...",
    "error": "Error",
    "average_price": "Average Price",
    "cheapest_price": "Cheapest Price",
    "most_expensive": "Most Expensive",
    "total_flights": "Total Flights",
    "direct_flights": "Direct Flights",
    "cheapest_day": "Cheapest day:",
    "cheapest_month": "Cheapest month:",
    "round_trip": "Round-trip from:",
    "one_way": "One-way from:",
    "flights_per_week": "flights/week",
    "stops": "stops",
    "stop": "stop",
    "direct": "Direct",
    "airline": "Airline:",
    "popular_destinations": "Popular Destinations",
    "faqs": "Frequently Asked Questions",
    "price_trends": "Price Trends & Analysis",
    "weekly_trends": "Weekly Price Trends",
    "monthly_trends": "Monthly Price Trends",
    "total_destinations": "Total Destinations",
    "hotels_near_airport": "Hotels near the airport",
    "search_deals": "Search Deals",
    "view_popular": "View Popular",
    "find_deals": "Find Deals",
    "various_destinations": "Various Destinations",
}

_ES: dict[str, str] = {
    "available_flights": "Vuelos Disponibles",
    "find_flights": "Buscar Vuelos",
    "find_hotels": "Buscar Hoteles",
    "book_now": "Reservar Ahora",
    "view_details": "Ver Detalles",
    "select_flight": "Seleccionar Vuelo",
    "compare_prices": "Comparar Precios",
    "filter_results": "Filtrar Resultados",
    "sort_by": "Ordenar Por",
    "show_more": "Mostrar Más",
    "show_less": "Mostrar Menos",
    "loading": "Cargando...",
    "error": "Error",
    "average_price": "Precio Promedio",
    "cheapest_price": "Precio Más Barato",
    "most_expensive": "Más Caro",
    "total_flights": "Total de Vuelos",
    "direct_flights": "Vuelos Directos",
    "cheapest_day": "Día más barato:",
    "cheapest_month": "Mes más barato:",
    "round_trip": "Ida y vuelta desde:",
    "one_way": "Ida desde:",
    "flights_per_week": "vuelos/semana",
    "stops": "escalas",
    "stop": "escala",
    "direct": "Directo",
    "airline": "Aerolínea:",
    "popular_destinations": "Destinos Populares",
    "faqs": "Preguntas Frecuentes",
    "price_trends": "Tendencias y Análisis de Precios",
    "weekly_trends": "Tendencias de Precios Semanales",
    "monthly_trends": "Tendencias de Precios Mensuales",
    "total_destinations": "Destinos Totales",
    "hotels_near_airport": "Hoteles cerca del aeropuerto",
    "search_deals": "Buscar Ofertas",
    "view_popular": "Ver Populares",
    "find_deals": "Encontrar Ofertas",
    "various_destinations": "Varios Destinos",
}

_RU: dict[str, str] = {
    "available_flights": "Доступные рейсы",
    "find_flights": "Найти рейсы",
    "find_hotels": "Найти отели",
    "book_now": "Забронировать",
    "view_details": "Подробнее",
    "select_flight": "Выбрать рейс",
    "compare_prices": "Сравнить цены",
    "filter_results": "Фильтровать результаты",
    "sort_by": "Сортировать по",
    "show_more": "Показать больше",
    "show_less": "Показать меньше",
    "loading": "Загрузка...",
    "error": "Ошибка",
    "average_price": "Средняя цена",
    "cheapest_price": "Самая низкая цена",
    "most_expensive": "Самый дорогой",
    "total_flights": "Всего рейсов",
    "direct_flights": "Прямые рейсы",
    "cheapest_day": "Самый дешевый день:",
    "cheapest_month": "Самый дешевый месяц:",
    "round_trip": "Туда и обратно от:",
    "one_way": "В одну сторону от:",
    "flights_per_week": "рейсов/неделю",
    "stops": "пересадки",
    "stop": "пересадка",
    "direct": "Прямой",
    "airline": "Авиакомпания:",
    "popular_destinations": "Популярные направления",
    "faqs": "Часто задаваемые вопросы",
    "price_trends": "Тенденции и анализ цен",
    "weekly_trends": "Недельные тенденции цен",
    "monthly_trends": "Месячные тенденции цен",
    "total_destinations": "Всего направлений",
    "hotels_near_airport": "Отели рядом с аэропортом",
    "search_deals": "Искать предложения",
    "view_popular": "Популярное",
    "find_deals": "Найти предложения",
    "various_destinations": "Различные направления",
}

_FR: dict[str, str] = {
    "available_flights": "Vols Disponibles",
    "find_flights": "Trouver des Vols",
    "find_hotels": "Trouver des Hôtels",
    "book_now": "Réserver",
    "view_details": "Voir les Détails",
    "select_flight": "Choisir le Vol",
    "compare_prices": "Comparer les Prix",
    "filter_results": "Filtrer les Résultats",
    "sort_by": "Trier Par",
    "show_more": "Afficher Plus",
    "show_less": "Afficher Moins",
    "loading": "Chargement...",
    "error": "Erreur",
    "average_price": "Prix Moyen",
    "cheapest_price": "Prix le Plus Bas",
    "most_expensive": "Le Plus Cher",
    "total_flights": "Total des Vols",
    "direct_flights": "Vols Directs",
    "cheapest_day": "Jour le moins cher :",
    "cheapest_month": "Mois le moins cher :",
    "round_trip": "Aller-retour depuis :",
    "one_way": "Aller simple depuis :",
    "flights_per_week": "vols/semaine",
    "stops": "escales",
    "stop": "escale",
    "direct": "Direct",
    "airline": "Compagnie :",
    "popular_destinations": "Destinations Populaires",
    "faqs": "Questions Fréquentes",
    "price_trends": "Tendances et Analyse des Prix",
    "weekly_trends": "Tendances des Prix Hebdomadaires",
    "monthly_trends": "Tendances des Prix Mensuelles",
    "total_destinations": "Destinations Totales",
    "hotels_near_airport": "Hôtels près de l'aéroport",
    "search_deals": "Chercher des Offres",
    "view_popular": "Voir les Populaires",
    "find_deals": "Trouver des Offres",
    "various_destinations": "Diverses Destinations",
}

_TABLES: dict[Locale, PhraseMap] = {
    Locale.EN: MappingProxyType(_EN),
    Locale.ES: MappingProxyType(_ES),
    Locale.RU: MappingProxyType(_RU),
    Locale.FR: MappingProxyType(_FR),
}

PHRASE_KEYS: tuple[str, ...] = tuple(_EN)


def phrases_for(locale: Union[str, Locale, None]) -> PhraseMap:
    """Return the complete, read-only phrase table for a locale."""
    return _TABLES[normalize(locale)]


def phrase(locale: Union[str, Locale, None], key: str) -> str:
    """Look up one phrase, falling back to the English string of ``key``.

    Raises:
        KeyError: If ``key`` does not exist in the English table either.
    """
    table = phrases_for(locale)
    value = table.get(key)
    if value:
        return value
    return _TABLES[Locale.EN][key]
