"""Interactive Leaflet map of the tracked routes."""

from __future__ import annotations

import json

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from routewatch.config import settings

router = APIRouter(tags=["map"])

TILE_URL = "https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png"
TILE_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
    'contributors &copy; <a href="https://carto.com/attributions">CARTO</a>'
)
MAP_CENTER = (20.0, 0.0)
MAP_ZOOM = 2
MAP_BOUNDS = ((-90.0, -180.0), (90.0, 180.0))

PAGE_TEMPLATE = r"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>RouteWatch</title>
  <link rel="stylesheet" href="https://unpkg.com/leaflet@1.9.4/dist/leaflet.css"
        integrity="sha256-p4NxAoJBhIIN+hmNHrzRCf9tD/miZyoHS5obTRR9BMY=" crossorigin="">
  <script src="https://unpkg.com/leaflet@1.9.4/dist/leaflet.js"
          integrity="sha256-20nQCchB9co0qIjJZRGuk2/Z9VM+kNiyxNV1lvTlZBo=" crossorigin=""></script>
  <style>
    html, body { height: 100%; margin: 0; }
    #map { height: 100vh; width: 100vw; }
    .panel {
      position: absolute; top: 10px; z-index: 1000; background: white;
      padding: 10px; border-radius: 5px; box-shadow: 0 0 10px rgba(0,0,0,0.2);
      font-family: sans-serif;
    }
    #loading { left: 50px; display: none; }
    #tracked { right: 10px; }
    #tracked ul { list-style: none; padding: 0; margin: 0; }
    .plane-icon div {
      font-size: 30px; display: flex; justify-content: center; align-items: center;
    }
  </style>
</head>
<body>
<div id="loading" class="panel">Loading flight data...</div>
<div id="tracked" class="panel"><h3>Tracked Flights</h3><ul id="tracked-list"></ul></div>
<div id="map"></div>
<script>
  const CONFIG = __CONFIG__;

  const map = L.map('map', {
    center: CONFIG.center,
    zoom: CONFIG.zoom,
    maxBounds: CONFIG.bounds,
    maxBoundsViscosity: 1.0
  });
  L.tileLayer(CONFIG.tileUrl, { attribution: CONFIG.attribution, noWrap: true }).addTo(map);

  const planeLayer = L.layerGroup().addTo(map);
  const loadingEl = document.getElementById('loading');
  let pending = 0;

  function setLoading(active) {
    loadingEl.style.display = active ? 'block' : 'none';
  }

  function escapeHtml(text) {
    const div = document.createElement('div');
    div.textContent = text;
    return div.innerHTML;
  }

  function planeIcon(heading) {
    return L.divIcon({
      html: '<div style="transform: rotate(' + heading + 'deg);">&#9992;&#65039;</div>',
      className: 'plane-icon',
      iconSize: [30, 30],
      iconAnchor: [15, 15]
    });
  }

  async function loadRoutes() {
    const response = await fetch(CONFIG.routesUrl);
    const catalog = await response.json();
    const list = document.getElementById('tracked-list');
    catalog.tracked_flights.forEach(function (flightId) {
      const item = document.createElement('li');
      item.textContent = flightId;
      list.appendChild(item);
    });
    catalog.routes.forEach(function (route) {
      L.polyline(
        [[route.origin.lat, route.origin.lon], [route.destination.lat, route.destination.lon]],
        { color: 'yellow', weight: 3, opacity: 0.7 }
      ).addTo(map);
    });
    catalog.airports.forEach(function (airport) {
      L.marker([airport.lat, airport.lon])
        .bindPopup('<div style="font-weight: bold">' + escapeHtml(airport.name) + '</div>')
        .addTo(map);
    });
  }

  async function refreshFlights() {
    pending += 1;
    setLoading(true);
    try {
      const response = await fetch(CONFIG.flightsUrl);
      if (!response.ok) {
        throw new Error('HTTP ' + response.status);
      }
      const feed = await response.json();
      planeLayer.clearLayers();
      feed.flights.forEach(function (flight) {
        L.marker([flight.lat, flight.lon], { icon: planeIcon(flight.bearing) })
          .bindPopup(
            '<strong>Flight:</strong> ' + escapeHtml(flight.callsign) + '<br>' +
            '<strong>From:</strong> ' + escapeHtml(flight.origin_name) + '<br>' +
            '<strong>To:</strong> ' + escapeHtml(flight.destination_name) + '<br>' +
            '<strong>Altitude:</strong> ' + flight.altitude_ft + ' ft<br>' +
            '<strong>Speed:</strong> ' + flight.speed_kt + ' knots'
          )
          .addTo(planeLayer);
      });
      pending -= 1;
      setLoading(pending > 0 || feed.loading);
    } catch (error) {
      console.error('Error fetching flight data:', error);
      pending -= 1;
      setLoading(pending > 0);
    }
  }

  loadRoutes().catch(function (error) { console.error('Error loading routes:', error); });
  refreshFlights();
  setInterval(refreshFlights, CONFIG.refreshSeconds * 1000);
</script>
</body>
</html>
"""


def render_map_page(*, refresh_seconds: float | None = None) -> str:
    """Render the map page with its tile, bounds and feed settings inlined."""

    config = {
        "center": list(MAP_CENTER),
        "zoom": MAP_ZOOM,
        "bounds": [list(corner) for corner in MAP_BOUNDS],
        "tileUrl": TILE_URL,
        "attribution": TILE_ATTRIBUTION,
        "routesUrl": "/api/v1/routes",
        "flightsUrl": "/api/v1/flights",
        "refreshSeconds": refresh_seconds or settings.poll_interval_seconds,
    }
    # "</" must not appear inside the inline script
    payload = json.dumps(config).replace("</", "<\\/")
    return PAGE_TEMPLATE.replace("__CONFIG__", payload)


@router.get("/", response_class=HTMLResponse, summary="Flight map")
def map_page() -> HTMLResponse:
    return HTMLResponse(render_map_page())
