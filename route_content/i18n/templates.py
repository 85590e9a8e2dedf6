"""Hand-authored per-locale content templates.

Placeholders use ``str.format`` syntax (``{airline_name}``,
``{departure_city}``, ``{arrival_city}``, ``{city}``, ...). Templates
that depend on how much of the route is known come in variants:

- ``route``: departure and arrival known
- ``city``: only a departure (or airport) city known
- ``network``: neither known, e.g. an airline landing page

``fill`` raises InterpolationError when a referenced value is missing,
so a caller can swap in the English hard default instead of rendering a
half-filled sentence.
"""

from __future__ import annotations

from string import Formatter
from typing import Mapping, Optional, Union

from ..domain.errors import InterpolationError
from ..domain.models import Locale, SectionKey

TemplateVariants = Union[str, Mapping[str, str]]

ROUTE = "route"
CITY = "city"
NETWORK = "network"

_FORMATTER = Formatter()


def placeholders(template: str) -> tuple[str, ...]:
    """Return the placeholder names referenced by ``template``."""
    return tuple(name for _, name, _, _ in _FORMATTER.parse(template) if name)


def fill(template_key: str, template: str, values: Mapping[str, Optional[str]]) -> str:
    """Interpolate ``values`` into ``template``.

    Raises:
        InterpolationError: If a placeholder has no value or the value is None.
    """
    for name in placeholders(template):
        if values.get(name) is None:
            raise InterpolationError(
                f"Template {template_key!r} references undefined value {name!r}",
                template_key=template_key,
                missing_key=name,
            )
    return template.format_map(values)


def pick_variant(templates: TemplateVariants, variant: str) -> str:
    """Select a variant, degrading route -> city -> network."""
    if isinstance(templates, str):
        return templates
    for candidate in _VARIANT_ORDER[variant]:
        if candidate in templates:
            return templates[candidate]
    return next(iter(templates.values()))


_VARIANT_ORDER = {
    ROUTE: (ROUTE, CITY, NETWORK),
    CITY: (CITY, NETWORK, ROUTE),
    NETWORK: (NETWORK, CITY, ROUTE),
}


# ---------------------------------------------------------------------------
# Titles and descriptions, keyed by page kind then variant
# ---------------------------------------------------------------------------

TITLES: dict[Locale, dict[str, TemplateVariants]] = {
    Locale.EN: {
        "flight": {
            ROUTE: "Cheap flights from {departure_city} to {arrival_city} | {airline_name}",
            CITY: "Cheap flights from {departure_city} | {airline_name}",
        },
        "airport": "Flights from {departure_city} ({departure_code}) | {airline_name}",
        "hotel": "Hotels near {departure_city} Airport ({departure_code})",
        "airline": {
            ROUTE: "{airline_name} flights from {departure_city} to {arrival_city}",
            CITY: "{airline_name} flights from {departure_city}",
            NETWORK: "{airline_name} flights, routes and deals",
        },
    },
    Locale.ES: {
        "flight": {
            ROUTE: "Vuelos baratos de {departure_city} a {arrival_city} | {airline_name}",
            CITY: "Vuelos baratos desde {departure_city} | {airline_name}",
        },
        "airport": "Vuelos desde {departure_city} ({departure_code}) | {airline_name}",
        "hotel": "Hoteles cerca del aeropuerto de {departure_city} ({departure_code})",
        "airline": {
            ROUTE: "Vuelos de {airline_name} de {departure_city} a {arrival_city}",
            CITY: "Vuelos de {airline_name} desde {departure_city}",
            NETWORK: "Vuelos, rutas y ofertas de {airline_name}",
        },
    },
    Locale.RU: {
        "flight": {
            ROUTE: "Дешевые авиабилеты из {departure_city} в {arrival_city} | {airline_name}",
            CITY: "Дешевые авиабилеты из {departure_city} | {airline_name}",
        },
        "airport": "Рейсы из {departure_city} ({departure_code}) | {airline_name}",
        "hotel": "Отели рядом с аэропортом {departure_city} ({departure_code})",
        "airline": {
            ROUTE: "Рейсы {airline_name} из {departure_city} в {arrival_city}",
            CITY: "Рейсы {airline_name} из {departure_city}",
            NETWORK: "Рейсы, маршруты и предложения {airline_name}",
        },
    },
    Locale.FR: {
        "flight": {
            ROUTE: "Vols pas chers de {departure_city} à {arrival_city} | {airline_name}",
            CITY: "Vols pas chers depuis {departure_city} | {airline_name}",
        },
        "airport": "Vols depuis {departure_city} ({departure_code}) | {airline_name}",
        "hotel": "Hôtels près de l'aéroport de {departure_city} ({departure_code})",
        "airline": {
            ROUTE: "Vols {airline_name} de {departure_city} à {arrival_city}",
            CITY: "Vols {airline_name} depuis {departure_city}",
            NETWORK: "Vols, routes et offres {airline_name}",
        },
    },
}

DESCRIPTIONS: dict[Locale, dict[str, TemplateVariants]] = {
    Locale.EN: {
        "flight": {
            ROUTE: "Plan your journey from {departure_city} to {arrival_city} with the latest deals, travel tips, and flight information from {airline_name}.",
            CITY: "Plan your journey from {departure_city} with the latest deals, travel tips, and flight information from {airline_name}.",
        },
        "airport": "Discover direct and connecting flights from {departure_city} ({departure_code}). Compare prices, check schedules, and find the best deals.",
        "hotel": "Find comfortable hotels near {departure_city} airport ({departure_code}) with shuttle services and early check-in options.",
        "airline": {
            ROUTE: "Plan your journey from {departure_city} to {arrival_city} with {airline_name}'s latest deals, travel tips, and flight information.",
            CITY: "Plan your journey from {departure_city} with {airline_name}'s latest deals, travel tips, and flight information.",
            NETWORK: "Explore {airline_name} routes, fares and travel information, and book your next trip with confidence.",
        },
    },
    Locale.ES: {
        "flight": {
            ROUTE: "Planifique su viaje de {departure_city} a {arrival_city} con las últimas ofertas, consejos de viaje e información de vuelos de {airline_name}.",
            CITY: "Planifique su viaje desde {departure_city} con las últimas ofertas, consejos de viaje e información de vuelos de {airline_name}.",
        },
        "airport": "Descubra vuelos directos y con escalas desde {departure_city} ({departure_code}). Compare precios, consulte horarios y encuentre las mejores ofertas.",
        "hotel": "Encuentre hoteles cómodos cerca del aeropuerto de {departure_city} ({departure_code}) con servicio de traslado y check-in temprano.",
        "airline": {
            ROUTE: "Planifique su viaje de {departure_city} a {arrival_city} con las últimas ofertas, consejos de viaje e información de vuelos de {airline_name}.",
            CITY: "Planifique su viaje desde {departure_city} con las últimas ofertas, consejos de viaje e información de vuelos de {airline_name}.",
            NETWORK: "Explore las rutas, tarifas e información de viaje de {airline_name} y reserve su próximo viaje con confianza.",
        },
    },
    Locale.RU: {
        "flight": {
            ROUTE: "Спланируйте поездку из {departure_city} в {arrival_city} с последними предложениями, советами и информацией о рейсах от {airline_name}.",
            CITY: "Спланируйте поездку из {departure_city} с последними предложениями, советами и информацией о рейсах от {airline_name}.",
        },
        "airport": "Прямые и стыковочные рейсы из {departure_city} ({departure_code}). Сравнивайте цены, проверяйте расписание и находите лучшие предложения.",
        "hotel": "Удобные отели рядом с аэропортом {departure_city} ({departure_code}) с трансфером и ранним заселением.",
        "airline": {
            ROUTE: "Спланируйте поездку из {departure_city} в {arrival_city} с последними предложениями, советами и информацией о рейсах {airline_name}.",
            CITY: "Спланируйте поездку из {departure_city} с последними предложениями, советами и информацией о рейсах {airline_name}.",
            NETWORK: "Маршруты, тарифы и полезная информация о {airline_name}: бронируйте следующую поездку уверенно.",
        },
    },
    Locale.FR: {
        "flight": {
            ROUTE: "Planifiez votre voyage de {departure_city} à {arrival_city} avec les dernières offres, conseils de voyage et informations de vol de {airline_name}.",
            CITY: "Planifiez votre voyage depuis {departure_city} avec les dernières offres, conseils de voyage et informations de vol de {airline_name}.",
        },
        "airport": "Découvrez les vols directs et avec escale depuis {departure_city} ({departure_code}). Comparez les prix, consultez les horaires et trouvez les meilleures offres.",
        "hotel": "Trouvez des hôtels confortables près de l'aéroport de {departure_city} ({departure_code}) avec navette et enregistrement anticipé.",
        "airline": {
            ROUTE: "Planifiez votre voyage de {departure_city} à {arrival_city} avec les dernières offres, conseils de voyage et informations de vol de {airline_name}.",
            CITY: "Planifiez votre voyage depuis {departure_city} avec les dernières offres, conseils de voyage et informations de vol de {airline_name}.",
            NETWORK: "Explorez les routes, tarifs et informations de voyage de {airline_name} et réservez votre prochain voyage en toute confiance.",
        },
    },
}


# ---------------------------------------------------------------------------
# Section bodies
# ---------------------------------------------------------------------------

_BOOKING_STEPS = {
    Locale.EN: (
        "Visit the airline's official website or use a reliable booking platform.",
        "Enter your travel dates, departure and arrival cities.",
        "Compare prices and schedules of available flights.",
        "Select your preferred flight and complete passenger details.",
        "Review your booking and proceed to secure payment.",
        "Receive your confirmation via email.",
    ),
    Locale.ES: (
        "Visite el sitio web oficial de la aerolínea o use una plataforma de reservas confiable.",
        "Ingrese sus fechas de viaje, ciudades de origen y destino.",
        "Compare precios y horarios de vuelos disponibles.",
        "Seleccione su vuelo preferido y complete los detalles del pasajero.",
        "Revise su reserva y proceda al pago seguro.",
        "Reciba su confirmación por correo electrónico.",
    ),
    Locale.RU: (
        "Посетите официальный веб-сайт авиакомпании или используйте надежную платформу бронирования.",
        "Введите даты поездки, города отправления и назначения.",
        "Сравните цены и расписания доступных рейсов.",
        "Выберите предпочтительный рейс и заполните данные пассажира.",
        "Проверьте бронирование и перейдите к безопасной оплате.",
        "Получите подтверждение по электронной почте.",
    ),
    Locale.FR: (
        "Visitez le site web officiel de la compagnie aérienne ou utilisez une plateforme de réservation fiable.",
        "Saisissez vos dates de voyage, villes de départ et d'arrivée.",
        "Comparez les prix et horaires des vols disponibles.",
        "Sélectionnez votre vol préféré et complétez les détails du passager.",
        "Vérifiez votre réservation et procédez au paiement sécurisé.",
        "Recevez votre confirmation par e-mail.",
    ),
}

_POPULAR_CITIES = {
    Locale.EN: ("New York", "London", "Paris", "Tokyo", "Dubai", "Singapore", "Bangkok", "Hong Kong"),
    Locale.ES: ("Nueva York", "Londres", "París", "Tokio", "Dubái", "Singapur", "Bangkok", "Hong Kong"),
    Locale.RU: ("Нью-Йорк", "Лондон", "Париж", "Токио", "Дубай", "Сингапур", "Бангкок", "Гонконг"),
    Locale.FR: ("New York", "Londres", "Paris", "Tokyo", "Dubaï", "Singapour", "Bangkok", "Hong Kong"),
}

_PLACES = {
    Locale.EN: (
        "Historic center and monuments",
        "Museums and art galleries",
        "Parks and green spaces",
        "Local markets and shops",
        "Restaurants and nightlife",
        "Cultural attractions",
    ),
    Locale.ES: (
        "Centro histórico y monumentos",
        "Museos y galerías de arte",
        "Parques y espacios verdes",
        "Mercados locales y tiendas",
        "Restaurantes y vida nocturna",
        "Atracciones culturales",
    ),
    Locale.RU: (
        "Исторический центр и памятники",
        "Музеи и художественные галереи",
        "Парки и зеленые зоны",
        "Местные рынки и магазины",
        "Рестораны и ночная жизнь",
        "Культурные достопримечательности",
    ),
    Locale.FR: (
        "Centre historique et monuments",
        "Musées et galeries d'art",
        "Parcs et espaces verts",
        "Marchés locaux et magasins",
        "Restaurants et vie nocturne",
        "Attractions culturelles",
    ),
}


def _items(tag: str, entries: tuple[str, ...]) -> str:
    body = "".join(f"<li>{entry}</li>" for entry in entries)
    return f"<{tag}>{body}</{tag}>"


SECTION_TEMPLATES: dict[Locale, dict[SectionKey, TemplateVariants]] = {
    Locale.EN: {
        SectionKey.BOOKING_STEPS: "<h3>How to Book {airline_name} Flights</h3>"
        + _items("ol", _BOOKING_STEPS[Locale.EN]),
        SectionKey.CANCELLATION_POLICY: (
            "<h3>{airline_name} Cancellation Policy</h3>"
            "<p>{airline_name}'s cancellation policy allows changes and cancellations based on fare type:</p>"
            "<ul>"
            "<li><strong>Basic Fare:</strong> Cancellations allowed up to 24 hours before flight with fees.</li>"
            "<li><strong>Standard Fare:</strong> Free changes and cancellations up to 48 hours before flight.</li>"
            "<li><strong>Flexible Fare:</strong> Free changes and cancellations up to 72 hours before flight.</li>"
            "</ul>"
            "<p>For more information, contact {airline_name} customer service.</p>"
        ),
        SectionKey.CLASSES: (
            "<h3>{airline_name} Flight Classes</h3>"
            "<p>{airline_name} offers different service classes to meet your travel needs:</p>"
            "<ul>"
            "<li><strong>Economy Class:</strong> Comfortable seats with basic service and in-flight entertainment.</li>"
            "<li><strong>Premium Class:</strong> Seats with extra legroom and enhanced service.</li>"
            "<li><strong>Business Class:</strong> Reclining seats, premium meals, and VIP lounge access.</li>"
            "</ul>"
        ),
        SectionKey.DESTINATIONS_OVERVIEW: {
            ROUTE: "<h3>Destinations Overview</h3><p>{airline_name} connects {departure_city} to popular destinations worldwide. The route from {departure_city} to {arrival_city} is one of our most popular routes.</p><p>Our route network includes major cities, business destinations, and popular vacation spots.</p>",
            CITY: "<h3>Destinations Overview</h3><p>{airline_name} connects {departure_city} to popular destinations worldwide. From {departure_city}, we offer flights to multiple domestic and international destinations.</p><p>Our route network includes major cities, business destinations, and popular vacation spots.</p>",
            NETWORK: "<h3>Destinations Overview</h3><p>{airline_name} serves numerous destinations worldwide, connecting travelers to major cities and popular tourist destinations.</p><p>Our route network includes major cities, business destinations, and popular vacation spots.</p>",
        },
        SectionKey.POPULAR_DESTINATIONS: {
            ROUTE: "<h3>Popular Destinations</h3><p>{departure_city} to {arrival_city} is one of the most popular routes. Travelers also fly to:</p>"
            + _items("ul", _POPULAR_CITIES[Locale.EN]),
            CITY: "<h3>Popular Destinations from {departure_city}</h3>"
            + _items("ul", _POPULAR_CITIES[Locale.EN]),
            NETWORK: "<h3>Popular Destinations</h3>" + _items("ul", _POPULAR_CITIES[Locale.EN]),
        },
        SectionKey.PLACES_TO_VISIT: {
            CITY: "<h3>Places to Visit in {city}</h3>" + _items("ul", _PLACES[Locale.EN]),
            NETWORK: "<h3>Places to Visit</h3>" + _items("ul", _PLACES[Locale.EN]),
        },
        SectionKey.CITY_INFO: {
            CITY: "<h3>City Information</h3><p><strong>About {city}:</strong></p><p>{city} is a vibrant city with rich history and culture. The city offers a unique blend of tradition and modernity, with attractions ranging from historic sites to modern shopping centers.</p><p>Visitors can enjoy local cuisine, explore fascinating museums, and experience the city's lively nightlife.</p>",
            NETWORK: "<h3>City Information</h3><p>Every destination on the {airline_name} network offers its own blend of history, culture and cuisine.</p><p>Visitors can enjoy local food, explore fascinating museums, and experience lively nightlife.</p>",
        },
        SectionKey.BEST_TIME_TO_VISIT: {
            CITY: "<h3>Best Time to Visit {city}</h3><p>The best time to visit {city} is typically during cooler, drier months for comfortable sightseeing. Spring and autumn months offer pleasant temperatures and fewer crowds.</p><p>Avoid the hottest summer months if you prefer more temperate climates.</p>",
            NETWORK: "<h3>Best Time to Travel</h3><p>Spring and autumn months usually offer pleasant temperatures, fewer crowds and lower fares.</p><p>Avoid peak holiday periods if you want the best prices.</p>",
        },
    },
    Locale.ES: {
        SectionKey.BOOKING_STEPS: "<h3>Cómo reservar vuelos de {airline_name}</h3>"
        + _items("ol", _BOOKING_STEPS[Locale.ES]),
        SectionKey.CANCELLATION_POLICY: (
            "<h3>Política de cancelación de {airline_name}</h3>"
            "<p>La política de cancelación de {airline_name} permite cambios y cancelaciones según el tipo de tarifa:</p>"
            "<ul>"
            "<li><strong>Tarifa Básica:</strong> Cancelaciones permitidas hasta 24 horas antes del vuelo con cargo.</li>"
            "<li><strong>Tarifa Estándar:</strong> Cambios y cancelaciones gratuitas hasta 48 horas antes del vuelo.</li>"
            "<li><strong>Tarifa Flexible:</strong> Cambios y cancelaciones gratuitas hasta 72 horas antes del vuelo.</li>"
            "</ul>"
            "<p>Para más información, contacte el servicio al cliente de {airline_name}.</p>"
        ),
        SectionKey.CLASSES: (
            "<h3>Clases de vuelo de {airline_name}</h3>"
            "<p>{airline_name} ofrece diferentes clases de servicio para satisfacer sus necesidades de viaje:</p>"
            "<ul>"
            "<li><strong>Clase Económica:</strong> Asientos cómodos con servicio básico y entretenimiento a bordo.</li>"
            "<li><strong>Clase Premium:</strong> Asientos con más espacio para las piernas y servicio mejorado.</li>"
            "<li><strong>Clase Business:</strong> Asientos reclinables, comidas premium y acceso a salas VIP.</li>"
            "</ul>"
        ),
        SectionKey.DESTINATIONS_OVERVIEW: {
            ROUTE: "<h3>Resumen de destinos</h3><p>{airline_name} conecta {departure_city} con destinos populares en todo el mundo. La ruta de {departure_city} a {arrival_city} es una de nuestras rutas más populares.</p><p>Nuestra red de rutas incluye ciudades principales, destinos de negocios y lugares de vacaciones populares.</p>",
            CITY: "<h3>Resumen de destinos</h3><p>{airline_name} conecta {departure_city} con destinos populares en todo el mundo. Desde {departure_city}, ofrecemos vuelos a múltiples destinos nacionales e internacionales.</p><p>Nuestra red de rutas incluye ciudades principales, destinos de negocios y lugares de vacaciones populares.</p>",
            NETWORK: "<h3>Resumen de destinos</h3><p>{airline_name} vuela a numerosos destinos en todo el mundo, conectando a los viajeros con grandes ciudades y destinos turísticos populares.</p><p>Nuestra red de rutas incluye ciudades principales, destinos de negocios y lugares de vacaciones populares.</p>",
        },
        SectionKey.POPULAR_DESTINATIONS: {
            ROUTE: "<h3>Destinos populares</h3><p>{departure_city} a {arrival_city} es una de las rutas más populares. Los viajeros también vuelan a:</p>"
            + _items("ul", _POPULAR_CITIES[Locale.ES]),
            CITY: "<h3>Destinos populares desde {departure_city}</h3>"
            + _items("ul", _POPULAR_CITIES[Locale.ES]),
            NETWORK: "<h3>Destinos populares</h3>" + _items("ul", _POPULAR_CITIES[Locale.ES]),
        },
        SectionKey.PLACES_TO_VISIT: {
            CITY: "<h3>Lugares para visitar en {city}</h3>" + _items("ul", _PLACES[Locale.ES]),
            NETWORK: "<h3>Lugares para visitar</h3>" + _items("ul", _PLACES[Locale.ES]),
        },
        SectionKey.CITY_INFO: {
            CITY: "<h3>Información de la ciudad</h3><p><strong>Acerca de {city}:</strong></p><p>{city} es una ciudad vibrante con una rica historia y cultura. La ciudad ofrece una mezcla única de tradición y modernidad, con atracciones que van desde sitios históricos hasta centros comerciales modernos.</p><p>Los visitantes pueden disfrutar de la cocina local, explorar museos fascinantes y experimentar la animada vida nocturna de la ciudad.</p>",
            NETWORK: "<h3>Información de la ciudad</h3><p>Cada destino de la red de {airline_name} ofrece su propia mezcla de historia, cultura y gastronomía.</p><p>Los visitantes pueden disfrutar de la cocina local, explorar museos fascinantes y vivir una animada vida nocturna.</p>",
        },
        SectionKey.BEST_TIME_TO_VISIT: {
            CITY: "<h3>Mejor época para visitar {city}</h3><p>La mejor época para visitar {city} es típicamente durante los meses más frescos y secos para un turismo cómodo. Los meses de primavera y otoño ofrecen temperaturas agradables y menos multitudes.</p><p>Evite los meses más calurosos del verano si prefiere climas más templados.</p>",
            NETWORK: "<h3>Mejor época para viajar</h3><p>La primavera y el otoño suelen ofrecer temperaturas agradables, menos multitudes y tarifas más bajas.</p><p>Evite los periodos vacacionales de mayor demanda si busca los mejores precios.</p>",
        },
    },
    Locale.RU: {
        SectionKey.BOOKING_STEPS: "<h3>Как забронировать рейсы {airline_name}</h3>"
        + _items("ol", _BOOKING_STEPS[Locale.RU]),
        SectionKey.CANCELLATION_POLICY: (
            "<h3>Правила отмены {airline_name}</h3>"
            "<p>Политика отмены {airline_name} разрешает изменения и отмены в зависимости от типа тарифа:</p>"
            "<ul>"
            "<li><strong>Базовый тариф:</strong> Отмена разрешена до 24 часов до вылета за плату.</li>"
            "<li><strong>Стандартный тариф:</strong> Бесплатные изменения и отмена до 48 часов до вылета.</li>"
            "<li><strong>Гибкий тариф:</strong> Бесплатные изменения и отмена до 72 часов до вылета.</li>"
            "</ul>"
            "<p>Для получения дополнительной информации обратитесь в службу поддержки {airline_name}.</p>"
        ),
        SectionKey.CLASSES: (
            "<h3>Классы обслуживания {airline_name}</h3>"
            "<p>{airline_name} предлагает различные классы обслуживания для удовлетворения ваших потребностей в путешествии:</p>"
            "<ul>"
            "<li><strong>Эконом-класс:</strong> Удобные места с базовым обслуживанием и развлечениями на борту.</li>"
            "<li><strong>Премиум-класс:</strong> Места с дополнительным пространством для ног и улучшенным обслуживанием.</li>"
            "<li><strong>Бизнес-класс:</strong> Раскладывающиеся кресла, премиальная еда и доступ в VIP-залы.</li>"
            "</ul>"
        ),
        SectionKey.DESTINATIONS_OVERVIEW: {
            ROUTE: "<h3>Обзор направлений</h3><p>{airline_name} соединяет {departure_city} с популярными направлениями по всему миру. Маршрут из {departure_city} в {arrival_city} является одним из наших самых популярных маршрутов.</p><p>Наша сеть маршрутов включает основные города, деловые направления и популярные места для отпуска.</p>",
            CITY: "<h3>Обзор направлений</h3><p>{airline_name} соединяет {departure_city} с популярными направлениями по всему миру. Из {departure_city} мы предлагаем рейсы в несколько внутренних и международных направлений.</p><p>Наша сеть маршрутов включает основные города, деловые направления и популярные места для отпуска.</p>",
            NETWORK: "<h3>Обзор направлений</h3><p>{airline_name} выполняет рейсы во множество направлений по всему миру, соединяя путешественников с крупными городами и популярными курортами.</p><p>Наша сеть маршрутов включает основные города, деловые направления и популярные места для отпуска.</p>",
        },
        SectionKey.POPULAR_DESTINATIONS: {
            ROUTE: "<h3>Популярные направления</h3><p>{departure_city} - {arrival_city} - один из самых популярных маршрутов. Путешественники также летают в:</p>"
            + _items("ul", _POPULAR_CITIES[Locale.RU]),
            CITY: "<h3>Популярные направления из {departure_city}</h3>"
            + _items("ul", _POPULAR_CITIES[Locale.RU]),
            NETWORK: "<h3>Популярные направления</h3>" + _items("ul", _POPULAR_CITIES[Locale.RU]),
        },
        SectionKey.PLACES_TO_VISIT: {
            CITY: "<h3>Что посетить в {city}</h3>" + _items("ul", _PLACES[Locale.RU]),
            NETWORK: "<h3>Что посетить</h3>" + _items("ul", _PLACES[Locale.RU]),
        },
        SectionKey.CITY_INFO: {
            CITY: "<h3>Информация о городе</h3><p><strong>О {city}:</strong></p><p>{city} - это оживленный город с богатой историей и культурой. Город предлагает уникальное сочетание традиций и современности, с достопримечательностями от исторических мест до современных торговых центров.</p><p>Посетители могут насладиться местной кухней, исследовать увлекательные музеи и испытать оживленную ночную жизнь города.</p>",
            NETWORK: "<h3>Информация о городе</h3><p>Каждое направление в сети {airline_name} предлагает свое сочетание истории, культуры и кухни.</p><p>Посетители могут насладиться местной кухней, исследовать увлекательные музеи и оживленную ночную жизнь.</p>",
        },
        SectionKey.BEST_TIME_TO_VISIT: {
            CITY: "<h3>Лучшее время для посещения {city}</h3><p>Лучшее время для посещения {city} обычно в более прохладные и сухие месяцы для комфортного туризма. Весенние и осенние месяцы предлагают приятные температуры и меньше толп.</p><p>Избегайте самых жарких летних месяцев, если предпочитаете более умеренный климат.</p>",
            NETWORK: "<h3>Лучшее время для путешествия</h3><p>Весной и осенью обычно приятная погода, меньше туристов и ниже цены.</p><p>Избегайте пиковых праздничных периодов, если хотите найти лучшие цены.</p>",
        },
    },
    Locale.FR: {
        SectionKey.BOOKING_STEPS: "<h3>Comment réserver les vols {airline_name}</h3>"
        + _items("ol", _BOOKING_STEPS[Locale.FR]),
        SectionKey.CANCELLATION_POLICY: (
            "<h3>Politique d'annulation de {airline_name}</h3>"
            "<p>La politique d'annulation de {airline_name} permet les modifications et annulations selon le type de tarif :</p>"
            "<ul>"
            "<li><strong>Tarif de base :</strong> Annulations autorisées jusqu'à 24 heures avant le vol avec frais.</li>"
            "<li><strong>Tarif standard :</strong> Modifications et annulations gratuites jusqu'à 48 heures avant le vol.</li>"
            "<li><strong>Tarif flexible :</strong> Modifications et annulations gratuites jusqu'à 72 heures avant le vol.</li>"
            "</ul>"
            "<p>Pour plus d'informations, contactez le service client de {airline_name}.</p>"
        ),
        SectionKey.CLASSES: (
            "<h3>Classes de vol {airline_name}</h3>"
            "<p>{airline_name} offre différentes classes de service pour répondre à vos besoins de voyage :</p>"
            "<ul>"
            "<li><strong>Classe économique :</strong> Sièges confortables avec service de base et divertissement à bord.</li>"
            "<li><strong>Classe premium :</strong> Sièges avec plus d'espace pour les jambes et service amélioré.</li>"
            "<li><strong>Classe affaires :</strong> Sièges inclinables, repas premium et accès aux salons VIP.</li>"
            "</ul>"
        ),
        SectionKey.DESTINATIONS_OVERVIEW: {
            ROUTE: "<h3>Aperçu des destinations</h3><p>{airline_name} connecte {departure_city} aux destinations populaires du monde entier. La route de {departure_city} à {arrival_city} est l'une de nos routes les plus populaires.</p><p>Notre réseau comprend des villes principales, des destinations d'affaires et des lieux de vacances populaires.</p>",
            CITY: "<h3>Aperçu des destinations</h3><p>{airline_name} connecte {departure_city} aux destinations populaires du monde entier. Depuis {departure_city}, nous proposons des vols vers plusieurs destinations nationales et internationales.</p><p>Notre réseau comprend des villes principales, des destinations d'affaires et des lieux de vacances populaires.</p>",
            NETWORK: "<h3>Aperçu des destinations</h3><p>{airline_name} dessert de nombreuses destinations dans le monde, reliant les voyageurs aux grandes villes et aux sites touristiques populaires.</p><p>Notre réseau comprend des villes principales, des destinations d'affaires et des lieux de vacances populaires.</p>",
        },
        SectionKey.POPULAR_DESTINATIONS: {
            ROUTE: "<h3>Destinations populaires</h3><p>{departure_city} - {arrival_city} est l'une des routes les plus populaires. Les voyageurs s'envolent aussi vers :</p>"
            + _items("ul", _POPULAR_CITIES[Locale.FR]),
            CITY: "<h3>Destinations populaires depuis {departure_city}</h3>"
            + _items("ul", _POPULAR_CITIES[Locale.FR]),
            NETWORK: "<h3>Destinations populaires</h3>" + _items("ul", _POPULAR_CITIES[Locale.FR]),
        },
        SectionKey.PLACES_TO_VISIT: {
            CITY: "<h3>Lieux à visiter à {city}</h3>" + _items("ul", _PLACES[Locale.FR]),
            NETWORK: "<h3>Lieux à visiter</h3>" + _items("ul", _PLACES[Locale.FR]),
        },
        SectionKey.CITY_INFO: {
            CITY: "<h3>Informations sur la ville</h3><p><strong>À propos de {city} :</strong></p><p>{city} est une ville dynamique avec une riche histoire et culture. La ville offre un mélange unique de tradition et de modernité, avec des attractions allant des sites historiques aux centres commerciaux modernes.</p><p>Les visiteurs peuvent profiter de la cuisine locale, explorer des musées fascinants et découvrir la vie nocturne animée de la ville.</p>",
            NETWORK: "<h3>Informations sur la ville</h3><p>Chaque destination du réseau {airline_name} offre son propre mélange d'histoire, de culture et de gastronomie.</p><p>Les visiteurs peuvent profiter de la cuisine locale, explorer des musées fascinants et découvrir une vie nocturne animée.</p>",
        },
        SectionKey.BEST_TIME_TO_VISIT: {
            CITY: "<h3>Meilleur moment pour visiter {city}</h3><p>Le meilleur moment pour visiter {city} est généralement pendant les mois les plus frais et secs pour un tourisme confortable. Les mois de printemps et d'automne offrent des températures agréables et moins de foule.</p><p>Évitez les mois d'été les plus chauds si vous préférez un climat plus tempéré.</p>",
            NETWORK: "<h3>Meilleur moment pour voyager</h3><p>Le printemps et l'automne offrent généralement des températures agréables, moins de foule et des tarifs plus bas.</p><p>Évitez les périodes de vacances les plus chargées pour obtenir les meilleurs prix.</p>",
        },
    },
}


# ---------------------------------------------------------------------------
# FAQs: price, destinations served, cheapest day, best season, how to book.
# Same length and order in every locale.
# ---------------------------------------------------------------------------

FAQ_TOPICS: tuple[str, ...] = ("price", "destinations", "cheapest_day", "best_season", "how_to_book")

# Phrases spliced into FAQ and price-card templates before filling them.
ROUTE_PHRASES: dict[Locale, dict[str, str]] = {
    Locale.EN: {ROUTE: " from {departure_city} to {arrival_city}", CITY: " from {departure_city}", NETWORK: ""},
    Locale.ES: {ROUTE: " de {departure_city} a {arrival_city}", CITY: " desde {departure_city}", NETWORK: ""},
    Locale.RU: {ROUTE: " из {departure_city} в {arrival_city}", CITY: " из {departure_city}", NETWORK: ""},
    Locale.FR: {ROUTE: " de {departure_city} à {arrival_city}", CITY: " depuis {departure_city}", NETWORK: ""},
}

FAQ_TEMPLATES: dict[Locale, dict[str, dict[str, str]]] = {
    Locale.EN: {
        "price": {
            "q": "How much does it cost to fly {airline_name}{route_phrase}?",
            "a": "Flight costs with {airline_name}{route_phrase} vary by season, but typically start from {cheapest_price} for one-way tickets.",
            "a_unpriced": "Flight costs with {airline_name}{route_phrase} vary by season, demand and how early you book. Compare dates to find the lowest fare.",
        },
        "destinations": {
            "q": "Where can I fly with {airline_name}{origin_phrase}?",
            "a": "{airline_name} connects you{origin_phrase} to multiple domestic and international destinations, including major cities and popular spots.",
        },
        "cheapest_day": {
            "q": "When are {airline_name} flights{origin_phrase} cheapest?",
            "a": "The cheapest day to fly {airline_name}{origin_phrase} is usually {cheapest_day}, with prices typically lower during off-season months.",
        },
        "best_season": {
            "q": "What's the best season for {airline_name} deals?",
            "a": "The best month for {airline_name} deals{origin_phrase} is typically {cheapest_month}, when fares tend to be at their lowest.",
        },
        "how_to_book": {
            "q": "How do I book {airline_name} flights{route_phrase}?",
            "a": "Enter your travel dates, compare available {airline_name} flights{route_phrase}, choose your fare and complete your booking securely online.",
        },
    },
    Locale.ES: {
        "price": {
            "q": "¿Cuánto cuesta volar con {airline_name}{route_phrase}?",
            "a": "Los costos de vuelo con {airline_name}{route_phrase} varían según la temporada, pero generalmente comienzan desde {cheapest_price} para vuelos de ida.",
            "a_unpriced": "Los costos de vuelo con {airline_name}{route_phrase} varían según la temporada, la demanda y la antelación de la reserva. Compare fechas para encontrar la tarifa más baja.",
        },
        "destinations": {
            "q": "¿A dónde puedo volar con {airline_name}{origin_phrase}?",
            "a": "{airline_name} le conecta{origin_phrase} con múltiples destinos nacionales e internacionales, incluyendo ciudades principales y destinos populares.",
        },
        "cheapest_day": {
            "q": "¿Cuándo son más baratos los vuelos de {airline_name}{origin_phrase}?",
            "a": "El día más barato para volar con {airline_name}{origin_phrase} suele ser el {cheapest_day}, con precios típicamente más bajos en temporada baja.",
        },
        "best_season": {
            "q": "¿Cuál es la mejor temporada para ofertas de {airline_name}?",
            "a": "El mejor mes para ofertas de {airline_name}{origin_phrase} es típicamente {cheapest_month}, cuando las tarifas suelen ser las más bajas.",
        },
        "how_to_book": {
            "q": "¿Cómo reservo vuelos de {airline_name}{route_phrase}?",
            "a": "Ingrese sus fechas de viaje, compare los vuelos de {airline_name}{route_phrase} disponibles, elija su tarifa y complete su reserva de forma segura en línea.",
        },
    },
    Locale.RU: {
        "price": {
            "q": "Сколько стоит лететь с {airline_name}{route_phrase}?",
            "a": "Стоимость рейсов с {airline_name}{route_phrase} варьируется в зависимости от сезона, но обычно начинается от {cheapest_price} за билет в одну сторону.",
            "a_unpriced": "Стоимость рейсов с {airline_name}{route_phrase} зависит от сезона, спроса и срока бронирования. Сравните даты, чтобы найти самый низкий тариф.",
        },
        "destinations": {
            "q": "Куда я могу полететь с {airline_name}{origin_phrase}?",
            "a": "{airline_name} соединяет вас{origin_phrase} с несколькими внутренними и международными направлениями, включая основные города и популярные места.",
        },
        "cheapest_day": {
            "q": "Когда рейсы {airline_name}{origin_phrase} самые дешевые?",
            "a": "Самый дешевый день для полетов с {airline_name}{origin_phrase} обычно {cheapest_day}, с ценами, как правило, ниже в межсезонье.",
        },
        "best_season": {
            "q": "Какое лучшее время для предложений {airline_name}?",
            "a": "Лучший месяц для предложений {airline_name}{origin_phrase} обычно {cheapest_month}, когда тарифы самые низкие.",
        },
        "how_to_book": {
            "q": "Как забронировать рейсы {airline_name}{route_phrase}?",
            "a": "Введите даты поездки, сравните доступные рейсы {airline_name}{route_phrase}, выберите тариф и безопасно завершите бронирование онлайн.",
        },
    },
    Locale.FR: {
        "price": {
            "q": "Combien coûte un vol avec {airline_name}{route_phrase} ?",
            "a": "Les coûts de vol avec {airline_name}{route_phrase} varient selon la saison, mais commencent généralement à partir de {cheapest_price} pour les vols aller simple.",
            "a_unpriced": "Les coûts de vol avec {airline_name}{route_phrase} varient selon la saison, la demande et la date de réservation. Comparez les dates pour trouver le tarif le plus bas.",
        },
        "destinations": {
            "q": "Où puis-je voler avec {airline_name}{origin_phrase} ?",
            "a": "{airline_name} vous connecte{origin_phrase} à plusieurs destinations nationales et internationales, y compris les grandes villes et destinations populaires.",
        },
        "cheapest_day": {
            "q": "Quand les vols {airline_name}{origin_phrase} sont-ils les moins chers ?",
            "a": "Le jour le moins cher pour voler avec {airline_name}{origin_phrase} est généralement le {cheapest_day}, avec des prix plus bas pendant la basse saison.",
        },
        "best_season": {
            "q": "Quelle est la meilleure saison pour les offres {airline_name} ?",
            "a": "Le meilleur mois pour les offres {airline_name}{origin_phrase} est généralement {cheapest_month}, quand les tarifs sont au plus bas.",
        },
        "how_to_book": {
            "q": "Comment réserver les vols {airline_name}{route_phrase} ?",
            "a": "Saisissez vos dates de voyage, comparez les vols {airline_name}{route_phrase} disponibles, choisissez votre tarif et finalisez votre réservation en ligne en toute sécurité.",
        },
    },
}


# ---------------------------------------------------------------------------
# Price cards
# ---------------------------------------------------------------------------

PRICE_CARD_KINDS: tuple[str, ...] = ("round_trip", "one_way", "cheapest_month", "cheapest_day")

PRICE_CARD_TEMPLATES: dict[Locale, dict[str, str]] = {
    Locale.EN: {
        "round_trip": "Round-trip {airline_name} flights{origin_phrase} to {destination}",
        "one_way": "One-way {airline_name} flight{origin_phrase} to {destination}",
        "cheapest_month": "Cheapest month is {cheapest_month}. Maximum price drop for flights to {destination} in {cheapest_month}.",
        "cheapest_day": "Cheapest week day is {cheapest_day}. Maximum price drop for flights to {destination} on {cheapest_day}.",
    },
    Locale.ES: {
        "round_trip": "Vuelos de ida y vuelta de {airline_name}{origin_phrase} a {destination}",
        "one_way": "Vuelo de ida de {airline_name}{origin_phrase} a {destination}",
        "cheapest_month": "El mes más barato es {cheapest_month}. Máxima caída de precios de vuelos a {destination} en {cheapest_month}.",
        "cheapest_day": "El día de la semana más barato es el {cheapest_day}. Máxima caída de precios de vuelos a {destination} el {cheapest_day}.",
    },
    Locale.RU: {
        "round_trip": "Рейсы туда и обратно {airline_name}{origin_phrase} в {destination}",
        "one_way": "Рейс в одну сторону {airline_name}{origin_phrase} в {destination}",
        "cheapest_month": "Самый дешевый месяц - {cheapest_month}. Максимальное падение цен на рейсы в {destination} в месяце {cheapest_month}.",
        "cheapest_day": "Самый дешевый день недели - {cheapest_day}. Максимальное падение цен на рейсы в {destination} в {cheapest_day}.",
    },
    Locale.FR: {
        "round_trip": "Vols aller-retour {airline_name}{origin_phrase} vers {destination}",
        "one_way": "Vol aller simple {airline_name}{origin_phrase} vers {destination}",
        "cheapest_month": "Le mois le moins cher est {cheapest_month}. Baisse maximale des prix des vols vers {destination} en {cheapest_month}.",
        "cheapest_day": "Le jour de la semaine le moins cher est le {cheapest_day}. Baisse maximale des prix des vols vers {destination} le {cheapest_day}.",
    },
}


# ---------------------------------------------------------------------------
# SEO keywords
# ---------------------------------------------------------------------------

KEYWORD_TERMS: dict[Locale, tuple[str, ...]] = {
    Locale.EN: ("flights", "cheap tickets", "booking", "airline"),
    Locale.ES: ("vuelos", "billetes baratos", "reservas", "aerolínea"),
    Locale.RU: ("авиабилеты", "дешевые билеты", "бронирование", "авиакомпания"),
    Locale.FR: ("vols", "billets pas chers", "réservation", "compagnie aérienne"),
}


# ---------------------------------------------------------------------------
# Hard defaults: English only, used when a generated template cannot be filled
# ---------------------------------------------------------------------------

DEFAULT_TITLE = "Cheap Flights and Travel Deals"
DEFAULT_DESCRIPTION = "Compare prices, check schedules, and find the best flight deals for your next trip."
DEFAULT_SECTIONS: dict[SectionKey, str] = {
    SectionKey.BOOKING_STEPS: "<p>Search for your flight, compare fares and complete your booking online.</p>",
    SectionKey.CANCELLATION_POLICY: "<p>Cancellation and change rules depend on your fare type. Check the fare rules before booking.</p>",
    SectionKey.CLASSES: "<p>Economy, premium and business cabins are available on many routes.</p>",
    SectionKey.DESTINATIONS_OVERVIEW: "<p>Flights connect travelers to destinations around the world.</p>",
    SectionKey.POPULAR_DESTINATIONS: "<p>Discover popular destinations and the best deals to reach them.</p>",
    SectionKey.PLACES_TO_VISIT: "<p>Explore local attractions, museums and markets at your destination.</p>",
    SectionKey.CITY_INFO: "<p>Learn more about your destination before you travel.</p>",
    SectionKey.BEST_TIME_TO_VISIT: "<p>Spring and autumn usually offer pleasant weather and lower fares.</p>",
}
DEFAULT_FAQ = (
    "How can I find the best flight deals?",
    "Compare prices across dates and airlines and book early to secure the lowest fares.",
)
