# shallnotcollide/visualization/map.py
"""
Interactive Folium rendering of a simulation snapshot: one layer per
concern (airports, aircraft, active conflicts) so each can be toggled from
the layer control.
"""
import folium
import logging
from typing import Dict, Iterable, List

from ..simulation.data_models import Airport, AircraftView, Conflict

PHASE_COLORS = {
    'TAXIING': 'gray',
    'TAKING OFF': 'orange',
    'CLIMBING': 'blue',
    'CRUISING': 'green',
    'DESCENDING': 'purple',
    'LANDING': 'cadetblue',
}

class TrafficMapVisualizer:
    """Creates a Folium traffic picture from engine snapshots."""

    def create_traffic_map(
        self,
        airports: Iterable[Airport],
        tracks: List[AircraftView],
        conflicts: Dict[str, Conflict] = None
    ) -> folium.Map:
        airports = list(airports)
        traffic_map = folium.Map(location=self._center(airports), zoom_start=7, tiles="CartoDB positron")

        airport_group = folium.FeatureGroup(name="Airports", show=True).add_to(traffic_map)
        for airport in airports:
            folium.Marker(
                location=[airport.lat, airport.lon],
                tooltip=f"<b>{airport.name}</b>",
                icon=folium.Icon(color='darkblue', icon='plane', prefix='fa')
            ).add_to(airport_group)

        aircraft_group = folium.FeatureGroup(name="Aircraft", show=True).add_to(traffic_map)
        positions = {}
        for view in tracks:
            positions[view.id] = (view.lat, view.lon)
            folium.CircleMarker(
                location=[view.lat, view.lon],
                radius=6,
                color=PHASE_COLORS.get(view.phase, 'black'),
                fill=True,
                fill_opacity=0.8,
                popup=self._create_popup_html(view),
                tooltip=view.callsign
            ).add_to(aircraft_group)

        conflict_group = folium.FeatureGroup(name="Active Conflicts", show=True).add_to(traffic_map)
        for conflict in (conflicts or {}).values():
            if conflict.aircraft1_id not in positions or conflict.aircraft2_id not in positions:
                continue
            folium.PolyLine(
                locations=[positions[conflict.aircraft1_id], positions[conflict.aircraft2_id]],
                color='red', weight=4, opacity=0.9,
                tooltip=conflict.message
            ).add_to(conflict_group)

        folium.LayerControl(collapsed=False).add_to(traffic_map)
        logging.info(f"Traffic map created with {len(tracks)} aircraft and {len(conflicts or {})} conflicts.")
        return traffic_map

    def save_map(self, m: folium.Map, filename: str) -> None:
        m.save(filename)
        logging.info(f"Interactive traffic map written to '{filename}'.")

    def _center(self, airports: List[Airport]) -> List[float]:
        if not airports:
            return [0.0, 0.0]
        return [sum(a.lat for a in airports) / len(airports), sum(a.lon for a in airports) / len(airports)]

    def _create_popup_html(self, view: AircraftView) -> str:
        return f"""
        <b>{view.callsign}</b> ({view.phase.title()})<br>
        Altitude: {view.altitude} ft<br>
        Speed: {view.speed} km/h, Heading: {view.heading:03d}<br>
        Destination: {view.destination_name}
        """
