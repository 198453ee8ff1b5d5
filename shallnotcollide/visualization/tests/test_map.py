#!/usr/bin/env python3
# shallnotcollide/visualization/tests/test_map.py

import sys
from pathlib import Path
import tempfile
import unittest

import folium

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from shallnotcollide.simulation import initialize
from shallnotcollide.visualization.map import TrafficMapVisualizer

class TestTrafficMapVisualizer(unittest.TestCase):
    def setUp(self):
        self.engine = initialize(4, seed=8)
        for _ in range(5):
            self.engine.tick()
        self.visualizer = TrafficMapVisualizer()

    def test_map_contains_every_aircraft(self):
        m = self.visualizer.create_traffic_map(self.engine.registry, self.engine.snapshot(),
                                               self.engine.active_conflicts)
        self.assertIsInstance(m, folium.Map)
        html = m.get_root().render()
        for view in self.engine.snapshot():
            self.assertIn(view.callsign, html)
        self.assertIn('Tunis-Carthage', html)

    def test_save_map(self):
        m = self.visualizer.create_traffic_map(self.engine.registry, self.engine.snapshot())
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / 'traffic.html'
            self.visualizer.save_map(m, str(target))
            self.assertTrue(target.exists())

if __name__ == '__main__':
    unittest.main()
