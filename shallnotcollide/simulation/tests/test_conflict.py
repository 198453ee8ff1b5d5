#!/usr/bin/env python3
# shallnotcollide/simulation/tests/test_conflict.py

import sys
import math
from pathlib import Path
import unittest

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from shallnotcollide.simulation.conflict import ConflictDetector
from shallnotcollide.simulation.data_models import Aircraft, Airport, FlightPhase, make_callsign

TOZEUR = Airport(name='Tozeur', lat=33.93, lon=8.13)
KM_PER_DEGREE = 6371 * math.pi / 180

def make_aircraft(aircraft_id, lat, altitude, lon=10.5):
    return Aircraft(id=aircraft_id, callsign=make_callsign(aircraft_id), lat=lat, lon=lon,
                    destination=TOZEUR, altitude=altitude, phase=FlightPhase.CRUISE, speed=480)

class TestConflictDetector(unittest.TestCase):
    def setUp(self):
        self.detector = ConflictDetector()
        self.a = make_aircraft(1, 35.0, 5000)
        self.b = make_aircraft(2, 35.0 + 10 / KM_PER_DEGREE, 5200)

    def test_new_conflict_reported_once(self):
        first = self.detector.detect([self.a, self.b], tick=1)
        self.assertEqual(len(first), 1)
        self.assertEqual(first[0].aircraft1_callsign, 'TN001')
        self.assertEqual(first[0].aircraft2_callsign, 'TN002')
        self.assertEqual(first[0].distance_km, 10.0)
        self.assertEqual(first[0].message, 'CONFLICT: TN001 and TN002 - 10.0 km apart')

        for tick in range(2, 6):
            self.assertEqual(self.detector.detect([self.a, self.b], tick=tick), [])
        self.assertEqual(list(self.detector.active_conflicts), ['1-2'])

    def test_reappearing_conflict_is_new_again(self):
        self.detector.detect([self.a, self.b], tick=1)
        self.b.altitude = 9000
        self.assertEqual(self.detector.detect([self.a, self.b], tick=2), [])
        self.assertEqual(self.detector.active_conflicts, {})
        self.b.altitude = 5200
        self.assertEqual(len(self.detector.detect([self.a, self.b], tick=3)), 1)

    def test_pair_order_does_not_matter(self):
        conflicts = self.detector.detect([self.b, self.a], tick=1)
        self.assertEqual(conflicts[0].aircraft1_callsign, 'TN001')
        self.assertEqual(list(self.detector.active_conflicts), ['1-2'])

        other = ConflictDetector()
        other.detect([self.a, self.b], tick=1)
        self.assertEqual(other.active_conflicts.keys(), self.detector.active_conflicts.keys())

    def test_both_thresholds_required(self):
        self.b.altitude = 5500
        self.assertEqual(self.detector.detect([self.a, self.b]), [])
        self.b.altitude = 5200
        self.b.lat = 35.0 + 20 / KM_PER_DEGREE
        self.assertEqual(self.detector.detect([self.a, self.b]), [])

    def test_key_uses_numeric_order(self):
        a = make_aircraft(9, 35.0, 5000)
        b = make_aircraft(10, 35.01, 5000)
        self.detector.detect([b, a])
        self.assertEqual(list(self.detector.active_conflicts), ['9-10'])

    def test_opening_tick_survives_rebuild(self):
        self.detector.detect([self.a, self.b], tick=4)
        self.detector.detect([self.a, self.b], tick=5)
        conflict = self.detector.active_conflicts['1-2']
        self.assertEqual(conflict.opened_at_tick, 4)
        self.assertEqual(conflict.altitude_difference, 200)

    def test_each_pair_once(self):
        fleet = [make_aircraft(i, 35.0 + i * 0.001, 5000) for i in range(1, 5)]
        conflicts = self.detector.detect(fleet)
        self.assertEqual(len(conflicts), 6)
        self.assertEqual(len(self.detector.active_conflicts), 6)

    def test_active_conflicts_is_a_copy(self):
        self.detector.detect([self.a, self.b])
        self.detector.active_conflicts.clear()
        self.assertEqual(len(self.detector.active_conflicts), 1)

    def test_reset_forgets_active_conflicts(self):
        self.detector.detect([self.a, self.b])
        self.detector.reset()
        self.assertEqual(len(self.detector.detect([self.a, self.b])), 1)

if __name__ == '__main__':
    unittest.main()
