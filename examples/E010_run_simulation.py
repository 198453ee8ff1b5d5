import sys
from pathlib import Path
import logging

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

# Local Imports
from shallnotcollide.simulation import initialize

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

TICKS = 900  # 30 simulated minutes at 2s per tick

engine = initialize(20, seed=2024)

for _ in range(TICKS):
    for conflict in engine.tick():
        print(f"[tick {engine.tick_count:4d}] {conflict.message}")

print("\nFleet after {} ticks:".format(engine.tick_count))
for view in engine.snapshot():
    print(
        f"  > {view.callsign} | {view.phase:<11} | "
        f"FL{view.altitude // 100:03d} | {view.speed:3d} km/h | "
        f"HDG {view.heading:03d} -> {view.destination_name}"
    )
print(f"\nActive conflicts: {len(engine.active_conflicts)}")
