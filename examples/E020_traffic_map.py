import sys
from pathlib import Path

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

# Local Imports
from shallnotcollide.simulation import initialize
from shallnotcollide.visualization import TrafficMapVisualizer

engine = initialize(20, seed=7)
for _ in range(600):
    engine.tick()

visualizer = TrafficMapVisualizer()
traffic_map = visualizer.create_traffic_map(engine.registry, engine.snapshot(), engine.active_conflicts)
visualizer.save_map(traffic_map, "traffic_map.html")
print(f"-> Traffic picture after {engine.tick_count} ticks written to 'traffic_map.html'.")
