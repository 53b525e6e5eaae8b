"""Таблица внешних слоёв SLIP (Landgate, Western Australia).

Ключ: короткое логическое имя слоя, по нему строится маршрут
``/api/<name>``. Значение: полный URL запроса к ArcGIS MapServer,
который отдаёт все объекты слоя в формате GeoJSON.
Таблица фиксируется при импорте и больше не меняется.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

_QUERY = "query?where=1%3D1&outFields=*&returnGeometry=true&f=geojson"

_SLIP_BOUNDARIES = "https://public-services.slip.wa.gov.au/public/rest/services/SLIP_Public_Services/Boundaries/MapServer"
_MARINE_MAP = "https://services.slip.wa.gov.au/public/rest/services/Landgate_Public_Maps/Marine_Map_WA_3/MapServer"


ENDPOINTS: Mapping[str, str] = MappingProxyType({
    "portAuthorities": f"{_SLIP_BOUNDARIES}/12/{_QUERY}",
    "marineParks": f"{_MARINE_MAP}/2/{_QUERY}",
    "fishHabitat": f"{_MARINE_MAP}/4/{_QUERY}",
    "cockburnSound": f"{_MARINE_MAP}/12/{_QUERY}",
    "mooringAreas": f"{_MARINE_MAP}/15/{_QUERY}",
    "marineInfrastructure": f"{_MARINE_MAP}/18/{_QUERY}",
})
