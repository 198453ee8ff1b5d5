# app.py
import logging
import threading
from flask import Flask, jsonify, request

# Core Application Imports
from helpers.simulation import build_broadcaster, env_int, simulation_worker
from shallnotcollide.auth.core import default_store
from shallnotcollide.constants.connection import ServerConstants
from shallnotcollide.visualization.map import TrafficMapVisualizer

app = Flask(__name__)
log = logging.getLogger('werkzeug')
log.setLevel(logging.WARNING)

# Global State Dictionary
state = {
    'broadcaster': build_broadcaster(),
    'users': default_store(),
    'stop_event': threading.Event(),
}

@app.route('/')
def index():
    return jsonify({'service': 'shallnotcollide', 'endpoints': ['/login', '/tracks', '/alerts', '/status', '/map']})

@app.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or {}
    username = data.get('username')
    password = data.get('password')

    if not username or not password:
        return jsonify({'message': 'Username and password required'}), 400

    user = state['users'].authenticate(username, password)
    if user is None:
        return jsonify({'message': 'Invalid credentials'}), 401

    logging.info(f"User '{user.username}' logged in as {user.role}")
    return jsonify({'user': user.to_public_dict()})

@app.route('/tracks')
def tracks():
    return jsonify(state['broadcaster'].latest_tracks())

@app.route('/alerts')
def alerts():
    try:
        since = int(request.args.get('since', 0))
    except ValueError:
        return jsonify({'error': "'since' must be an integer timestamp in milliseconds."}), 400
    return jsonify({'type': 'alerts', 'alerts': state['broadcaster'].alerts_since(since)})

@app.route('/status')
def status():
    engine = state['broadcaster'].engine
    return jsonify({
        'tick': engine.tick_count,
        'aircraft': engine.aircraft_count,
        'active_conflicts': len(engine.active_conflicts),
    })

@app.route('/map')
def traffic_map():
    try:
        engine = state['broadcaster'].engine
        m = TrafficMapVisualizer().create_traffic_map(engine.registry, engine.snapshot(), engine.active_conflicts)
        return m.get_root().render()
    except Exception as e:
        logging.error(f"Error rendering traffic map: {e}", exc_info=True)
        return jsonify({'error': f'Could not render map: {e}'}), 500

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    threading.Thread(target=simulation_worker, args=(state,), daemon=True).start()
    port = env_int('SNC_PORT', ServerConstants.DEFAULT_PORT)
    logging.info(f"ATC server running on http://localhost:{port}")
    app.run(host=ServerConstants.DEFAULT_HOST, port=port, debug=True, use_reloader=False)
