# attack_sim/__init__.py
from .routes import attack_sim_bp
from .sockets import register_attack_sim_socket_handlers

def init_attack_sim(app, socketio):
    app.register_blueprint(attack_sim_bp)
    register_attack_sim_socket_handlers(socketio)
