# shallnotcollide/constants/simulation.py

class SimConstants:
    """Operating limits for the simulated regional fleet."""

    # ===== TIMING =====
    TICK_SECONDS = 2.0             # Simulated time advanced by one tick
    DEFAULT_AIRCRAFT_COUNT = 20

    # ===== IDENTIFICATION =====
    CALLSIGN_PREFIX = "TN"
    CALLSIGN_DIGITS = 3

    # ===== ALTITUDES (ft) =====
    ALTITUDE = {
        'GROUND_FLOOR': 500,       # Field elevation every aircraft is clamped to
        'INITIAL_TARGET': 10000,   # Placeholder until a cruise level is drawn
        'CRUISE_MIN': 10000,
        'CRUISE_SPREAD': 5000,     # Cruise level drawn from [MIN, MIN + SPREAD)
        'ROTATION': 1000,          # Above this TAKEOFF becomes CLIMB
        'LEVEL_OFF_MARGIN': 200,   # CLIMB becomes CRUISE within this of target
        'DESCENT_TARGET': 500,
        'CRUISE_JITTER': 20,       # Peak-to-peak track noise while cruising
    }

    # ===== RATES =====
    RATES = {
        'CLIMB_FPM': 500,
        'DESCENT_FPM': 1000,
        'TAKEOFF_CLIMB_FACTOR': 1.5,
    }

    # ===== SPEEDS (km/h) =====
    SPEEDS = {
        'TAXIING': 0,
        'TAKING OFF': 250,
        'CLIMBING': 300,
        'CRUISING': 480,
        'DESCENDING': 350,
        'LANDING': 150,
    }
    ACCELERATION_KMH_PER_TICK = 20
    TAKEOFF_ROLL_SPEED = 50        # Above this GROUND_TAXI becomes TAKEOFF

    # ===== NAVIGATION (km) =====
    APPROACH_RADIUS_KM = 50
    ARRIVAL_RADIUS_KM = 5
    EARTH_RADIUS_KM = 6371

    # ===== SEPARATION =====
    SEPARATION = {
        'HORIZONTAL_KM': 15,
        'VERTICAL_FT': 500,
    }
    PAIRWISE_SCAN_WARNING_SIZE = 1000
